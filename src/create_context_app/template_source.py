"""Template source resolution: local directory or temporary clone, and language discovery."""

import contextlib
import os
import re
import shutil
import tempfile
from collections.abc import Generator

from create_context_app.config import (
    CLONE_DIR_PREFIX,
    REMOTE_SCHEMES,
    RULES_DIR,
    RULES_SUFFIX,
)
from create_context_app.errors import TemplateIntegrityError, TemplateSourceError
from create_context_app.git_helpers import clone_template
from create_context_app.utils import log

# scp-like git syntax: user@host:path
_SCP_REMOTE_RE = re.compile(r"^[\w.-]+@[\w.-]+:.+")


def is_remote_source(source: str) -> bool:
    """Decide whether a template source string names a git remote.

    Pure function: URLs with a known scheme, scp-style addresses and paths
    ending in '.git' count as remote.
    """
    if source.startswith(REMOTE_SCHEMES):
        return True
    if _SCP_REMOTE_RE.match(source):
        return True
    return source.rstrip("/").endswith(".git")


@contextlib.contextmanager
def open_template_source(source: str, branch: str = "") -> Generator[str, None, None]:
    """Yield a local directory holding the template tree.

    An existing local directory is yielded as-is and never modified. A remote
    source is cloned into a fresh temporary directory that is removed on exit,
    whether the body succeeded or raised.
    """
    expanded = os.path.expanduser(source)
    if os.path.isdir(expanded):
        if branch:
            raise TemplateSourceError(f"--branch only applies to a git remote, not a local directory: {expanded}")
        log(f"Using local template: {os.path.abspath(expanded)}", style="cyan")
        yield os.path.abspath(expanded)
        return

    if not is_remote_source(source):
        raise TemplateSourceError(f"Template source not found: {source}")

    clone_root = tempfile.mkdtemp(prefix=CLONE_DIR_PREFIX)
    try:
        checkout = os.path.join(clone_root, "template")
        ref_label = f" ({branch})" if branch else ""
        log(f"Cloning template {source}{ref_label}...", style="cyan")
        clone_template(source, checkout, branch=branch)
        log("✓ Template fetched", style="green")
        yield checkout
    finally:
        shutil.rmtree(clone_root, ignore_errors=True)


def language_from_filename(filename: str) -> str:
    """Return the language identifier for a rules filename, or '' if it isn't one.

    Pure function: 'python.md' -> 'python', 'notes.txt' -> ''.
    """
    if not filename.endswith(RULES_SUFFIX):
        return ""
    return filename[: -len(RULES_SUFFIX)]


def discover_languages(template_dir: str) -> list[str]:
    """List the languages the template supports, one per Rules/<lang>.md file.

    Raises TemplateIntegrityError when the Rules directory is missing or holds
    no rules documents.
    """
    rules_dir = os.path.join(template_dir, RULES_DIR)
    if not os.path.isdir(rules_dir):
        raise TemplateIntegrityError(rules_dir, "rules directory not found")

    languages = set()
    for name in os.listdir(rules_dir):
        lang = language_from_filename(name)
        if lang and os.path.isfile(os.path.join(rules_dir, name)):
            languages.add(lang)
    if not languages:
        raise TemplateIntegrityError(rules_dir, f"no {RULES_SUFFIX} rules documents found")
    return sorted(languages)
