"""Value types for a scaffolding run."""

from dataclasses import dataclass
from enum import Enum


class LLM(str, Enum):
    """Supported coding assistants. The value doubles as the branding file stem."""

    GEMINI = "GEMINI"
    CLAUDE = "CLAUDE"

    @property
    def branding_file(self) -> str:
        return f"{self.value}.md"


@dataclass(frozen=True)
class ProjectRequest:
    name: str
    language: str
    llm: LLM
