"""Project scaffolding: validate the destination and populate it from the template.

The steps run strictly in order and each one either completes or raises. A
failure part-way through leaves whatever was already written in place.
"""

import os
import shutil

from create_context_app.config import (
    OPTIONAL_DIRS,
    OPTIONAL_FILES,
    PLACEHOLDER_TOKEN,
    PRP_TEMPLATE_NAME,
    PRP_TEMPLATES_DIR,
    PRP_VARIANT_PATTERN,
    REQUIRED_DIRS,
    REQUIRED_FILES,
    RULES_DIR,
    RULES_SUFFIX,
    STAGED_SOURCE_DIR,
)
from create_context_app.errors import DestinationExistsError, TemplateIntegrityError
from create_context_app.git_helpers import init_repository
from create_context_app.models import LLM, ProjectRequest
from create_context_app.utils import log


def resolve_destination(name: str, cwd: str | None = None) -> str:
    """Return the absolute path <cwd>/<name> of the project to create."""
    return os.path.join(os.path.abspath(cwd or os.getcwd()), name)


def check_destination(destination: str) -> None:
    """Raise DestinationExistsError if anything (file, dir, link) is at destination."""
    if os.path.lexists(destination):
        raise DestinationExistsError(destination)


def substitute_placeholder(content: str, llm: LLM) -> str:
    """Replace every placeholder token with the uppercase LLM name.

    Pure function.
    """
    return content.replace(PLACEHOLDER_TOKEN, llm.value)


# ============================================
# Execution steps
# ============================================


def _copy_entry(src: str, dst: str) -> None:
    if os.path.isdir(src):
        shutil.copytree(src, dst, symlinks=True)
    else:
        shutil.copy2(src, dst)


def copy_template_assets(template_dir: str, destination: str) -> None:
    """Copy the fixed directory and file lists from the template into destination.

    Missing required entries raise TemplateIntegrityError; missing optional
    entries are skipped.
    """
    entries = (
        [(name, True) for name in REQUIRED_DIRS]
        + [(name, False) for name in OPTIONAL_DIRS]
        + [(name, True) for name in REQUIRED_FILES]
        + [(name, False) for name in OPTIONAL_FILES]
    )
    for name, required in entries:
        src = os.path.join(template_dir, name)
        if not os.path.exists(src):
            if required:
                raise TemplateIntegrityError(src, "required entry missing")
            log(f"  - {name} not in template, skipping", style="yellow")
            continue
        _copy_entry(src, os.path.join(destination, name))
        log(f"  ✓ {name}", style="green")


def copy_branding_file(template_dir: str, destination: str, llm: LLM) -> str:
    """Copy the selected LLM's branding file into destination. Returns its new path."""
    src = os.path.join(template_dir, llm.branding_file)
    if not os.path.isfile(src):
        raise TemplateIntegrityError(src, "branding file missing")
    dst = os.path.join(destination, llm.branding_file)
    shutil.copy2(src, dst)
    log(f"✓ Added {llm.branding_file}", style="green")
    return dst


def configure_prp_template(destination: str, language: str, llm: LLM) -> bool:
    """Write the language's PRP template variant over the generic template.

    Returns False (and changes nothing) when the language has no variant.
    """
    templates_dir = os.path.join(destination, *PRP_TEMPLATES_DIR)
    variant_path = os.path.join(templates_dir, PRP_VARIANT_PATTERN.format(lang=language))
    if not os.path.isfile(variant_path):
        log(f"No PRP template variant for {language}, keeping the generic one", style="yellow")
        return False

    with open(variant_path, "r", encoding="utf-8", newline="") as f:
        content = f.read()
    with open(os.path.join(templates_dir, PRP_TEMPLATE_NAME), "w", encoding="utf-8", newline="") as f:
        f.write(substitute_placeholder(content, llm))
    log(f"✓ Configured {PRP_TEMPLATE_NAME} for {language} / {llm.value}", style="green")
    return True


def write_language_rules(template_dir: str, destination: str, language: str, llm: LLM) -> bool:
    """Write the language's rules document as the LLM branding file.

    Reads Rules/<lang>.md from the template source. Returns False and leaves the
    branding file alone when no such document exists.
    """
    rules_path = os.path.join(template_dir, RULES_DIR, f"{language}{RULES_SUFFIX}")
    if not os.path.isfile(rules_path):
        log(f"No rules document for {language}, keeping generic {llm.branding_file}", style="yellow")
        return False

    shutil.copyfile(rules_path, os.path.join(destination, llm.branding_file))
    log(f"✓ Wrote {language} rules to {llm.branding_file}", style="green")
    return True


def create_source_root(destination: str, name: str) -> str:
    """Rename the staged src/ directory to <name>, or create <name> if none was staged."""
    source_root = os.path.join(destination, name)
    staged = os.path.join(destination, STAGED_SOURCE_DIR)
    if os.path.isdir(staged):
        os.rename(staged, source_root)
    else:
        os.mkdir(source_root)
    log(f"✓ Created source directory {name}/", style="green")
    return source_root


def create_project(request: ProjectRequest, template_dir: str, cwd: str | None = None) -> str:
    """Scaffold a new project from template_dir. Returns the destination path.

    The destination must not exist; it is checked before anything is written.
    """
    destination = resolve_destination(request.name, cwd)
    check_destination(destination)

    log(f"Creating {request.name} ({request.language}, {request.llm.value})...", style="cyan")
    os.mkdir(destination)

    log("Copying template files...", style="cyan")
    copy_template_assets(template_dir, destination)
    copy_branding_file(template_dir, destination, request.llm)
    configure_prp_template(destination, request.language, request.llm)
    write_language_rules(template_dir, destination, request.language, request.llm)

    source_root = create_source_root(destination, request.name)
    init_repository(source_root)
    log(f"✓ Initialized git repository in {request.name}/", style="green")
    return destination
