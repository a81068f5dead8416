"""Shared fixtures: a small but complete template tree on disk."""

from pathlib import Path

import pytest


PYTHON_VARIANT = (
    "# PRP for {{LLM_AGENT}}\n"
    "Run the {{LLM_AGENT}} agent on INITIAL.md.\n"
    "Validate with pytest, then ask {{LLM_AGENT}} to review.\n"
)

TEMPLATE_FILES = {
    "Rules/python.md": "# Python rules\n- Use type hints.\n",
    "Rules/typescript.md": "# TypeScript rules\n- Enable strict mode.\n",
    ".gemini/templates/prp_template.md": "# Generic PRP\nAgent: {{LLM_AGENT}}\n",
    ".gemini/templates/prp_template_python.md": PYTHON_VARIANT,
    ".gemini/scripts/generate-prp.sh": "#!/usr/bin/env bash\necho generate\n",
    "examples/feature.md": "## Example feature\n",
    "src/main.py": "print('hello')\n",
    "tests/test_main.md": "placeholder\n",
    "INITIAL.md": "## FEATURE:\n",
    "INITIAL_EXAMPLE.md": "## FEATURE: example\n",
    "README.md": "# Context Engineering Template\n",
    ".gitignore": "__pycache__/\n",
    ".gitattributes": "* text=auto\n",
    "GEMINI.md": "# Gemini guidance\n",
    "CLAUDE.md": "# Claude guidance\n",
}


def write_template(root, files=None):
    """Write a template tree under root and return root."""
    for rel_path, content in (files or TEMPLATE_FILES).items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def template_dir(tmp_path):
    return write_template(tmp_path / "template")


@pytest.fixture
def work_dir(tmp_path, monkeypatch):
    """An empty working directory that is also the cwd."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def fake_git_init(monkeypatch):
    """Replace 'git init' with a stub that just creates the .git directory."""
    import create_context_app.scaffold as scaffold_mod

    calls = []

    def _init(directory):
        calls.append(directory)
        (Path(directory) / ".git").mkdir()

    monkeypatch.setattr(scaffold_mod, "init_repository", _init)
    return calls
