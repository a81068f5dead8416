"""Version information.

Reports the installed distribution version, plus the short commit hash when
running from a git checkout of this tool (editable installs).
"""

import os
import subprocess
from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "create-context-app"
PACKAGE_VERSION = "0.1.0"

_REPO_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _source_commit() -> str | None:
    """Short HEAD hash of this tool's own checkout, or None outside a checkout."""
    if not os.path.isdir(os.path.join(_REPO_DIR, ".git")):
        return None
    try:
        result = subprocess.run(
            ["git", "-C", _REPO_DIR, "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def get_version() -> str:
    """Return a version string like '0.1.0' or '0.1.0 (g3a7f2c1)'."""
    try:
        base = version(PACKAGE_NAME)
    except PackageNotFoundError:
        base = PACKAGE_VERSION
    commit = _source_commit()
    return f"{base} (g{commit})" if commit else base
