"""Exception hierarchy for scaffolding failures.

Every error the pipeline raises on purpose derives from ScaffoldError, so the
CLI can tell an expected failure (print the message) from a crash (print the
traceback).
"""


class ScaffoldError(Exception):
    """Base user-facing scaffolding error."""


class ToolNotFoundError(ScaffoldError):
    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"{tool} is not installed or not on PATH.")


class TemplateSourceError(ScaffoldError):
    """The template source could not be located or fetched."""


class TemplateIntegrityError(ScaffoldError):
    """The template source is missing something every project needs."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Template is incomplete, {message}: {path}")


class DestinationExistsError(ScaffoldError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Destination already exists: {path}")


class GitCommandError(ScaffoldError):
    def __init__(self, args: list[str], returncode: int, detail: str = "") -> None:
        self.args_list = args
        self.returncode = returncode
        self.detail = detail
        message = f"'{' '.join(args)}' failed with exit code {returncode}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
