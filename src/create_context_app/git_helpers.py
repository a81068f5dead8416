"""Git operation helpers: availability check, template clone, repository init."""

from create_context_app.errors import GitCommandError, TemplateSourceError, ToolNotFoundError
from create_context_app.utils import check_command, log, pushd, run_cmd


def ensure_git_available() -> None:
    """Raise ToolNotFoundError unless git is on PATH."""
    if not check_command("git"):
        raise ToolNotFoundError("git")
    log(f"✓ {'git':<8} - OK", style="green")


def _failure_detail(result) -> str:
    """Last non-empty line of a failed command's stderr (or stdout)."""
    text = (result.stderr or result.stdout or "").strip()
    lines = [line for line in text.split("\n") if line.strip()]
    return lines[-1].strip() if lines else ""


def clone_template(source: str, target_dir: str, branch: str = "") -> None:
    """Shallow-clone a template repository into target_dir.

    target_dir must not exist yet (git creates it). Raises TemplateSourceError
    when the clone fails, e.g. unreachable remote or unknown branch.
    """
    args = ["git", "clone", "--depth", "1", "--quiet"]
    if branch:
        args += ["--branch", branch]
    args += [source, target_dir]
    result = run_cmd(args, capture=True)
    if result.returncode != 0:
        detail = _failure_detail(result)
        message = f"Could not clone template source {source}"
        if detail:
            message += f" ({detail})"
        raise TemplateSourceError(message)


def init_repository(directory: str) -> None:
    """Run 'git init' with directory as the working tree root."""
    with pushd(directory):
        result = run_cmd(["git", "init", "--quiet"], capture=True)
    if result.returncode != 0:
        raise GitCommandError(["git", "init"], result.returncode, _failure_detail(result))
