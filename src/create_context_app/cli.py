"""CLI app definition: the single scaffolding command and its error boundary."""

import os
from typing import Annotated

import typer

from create_context_app.config import TEMPLATE_SOURCE_ENV
from create_context_app.errors import ScaffoldError
from create_context_app.git_helpers import ensure_git_available
from create_context_app.models import LLM, ProjectRequest
from create_context_app.scaffold import check_destination, create_project, resolve_destination
from create_context_app.template_source import discover_languages, open_template_source
from create_context_app.utils import console, err_console, error, log
from create_context_app.version import get_version


def _version_callback(value: bool):
    if value:
        console.print(get_version())
        raise typer.Exit()


def _validate_name(value: str) -> str:
    """Reject names that are not a single, non-empty path component."""
    if value is None:
        return value
    name = value.strip()
    if not name:
        raise typer.BadParameter("Project name must not be empty.")
    if name in (".", "..") or "/" in name or os.sep in name:
        raise typer.BadParameter(f"Project name must be a plain directory name, got '{value}'.")
    return name


app = typer.Typer(
    help="Scaffold a new context engineering project from a template.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command()
def create(
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Project name (used for the directory and source folder)", callback=_validate_name),
    ],
    lang: Annotated[
        str,
        typer.Option("--lang", "-l", help="Project language; one of the Rules/<lang>.md files in the template"),
    ],
    llm: Annotated[
        LLM,
        typer.Option("--llm", "-m", help="Coding assistant the project is set up for", case_sensitive=False),
    ],
    template: Annotated[
        str,
        typer.Option("--template", "-t", envvar=TEMPLATE_SOURCE_ENV, help="Template directory or git URL"),
    ],
    branch: Annotated[
        str,
        typer.Option("--branch", "-b", help="Branch or tag to clone when the template is a git URL"),
    ] = "",
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit.", callback=_version_callback, is_eager=True),
    ] = False,
) -> None:
    """Create a new project directory from the context engineering template."""
    try:
        destination = _scaffold(name, lang, llm, template, branch)
    except typer.BadParameter:
        raise
    except ScaffoldError as exc:
        error(str(exc))
        raise typer.Exit(1)
    except Exception:
        err_console.print_exception()
        error("Unexpected failure while creating the project.")
        raise typer.Exit(1)

    console.print()
    log("======================================", style="bold green")
    log(f" Project {name} created successfully!", style="bold green")
    log("======================================", style="bold green")
    console.print()
    console.print(f"  cd {destination}", style="bold cyan")
    console.print(f"  Start by describing your feature in INITIAL.md, then open {llm.branding_file}.", style="cyan")
    console.print()


def _scaffold(name: str, lang: str, llm: LLM, template: str, branch: str) -> str:
    """Run the pipeline: prerequisites, template, discovery, validation, copy."""
    ensure_git_available()

    # Fail before touching the network if the project is already there.
    check_destination(resolve_destination(name))

    with open_template_source(template, branch=branch) as template_dir:
        languages = discover_languages(template_dir)
        if lang not in languages:
            raise typer.BadParameter(
                f"'{lang}' is not one of: {', '.join(languages)}.",
                param_hint="'--lang' / '-l'",
            )
        request = ProjectRequest(name=name, language=lang, llm=llm)
        return create_project(request, template_dir)
