"""Core utility functions: console output, logging, command execution."""

import contextlib
import os
import shutil
import subprocess
from collections.abc import Generator

from rich.console import Console

from create_context_app.config import LOG_FILE_ENV

console = Console()
err_console = Console(stderr=True)


@contextlib.contextmanager
def pushd(path: str) -> Generator[None, None, None]:
    """Context manager that changes to a directory and restores on exit."""
    prev = os.getcwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(prev)


def log(message: str, style: str = "") -> None:
    """Write a progress message to the console and, if configured, the log file.

    The log file is named by the CONTEXT_APP_LOG_FILE environment variable.
    """
    if style:
        console.print(message, style=style, markup=False)
    else:
        console.print(message, markup=False)

    log_file = os.environ.get(LOG_FILE_ENV, "")
    if not log_file:
        return
    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(message + "\n")
    except Exception:
        pass  # Never break the run over logging


def error(message: str) -> None:
    """Print a fatal error on the error console and append it to the log file."""
    err_console.print(f"ERROR: {message}", style="bold red", markup=False, highlight=False)
    log_file = os.environ.get(LOG_FILE_ENV, "")
    if not log_file:
        return
    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(f"ERROR: {message}\n")
    except Exception:
        pass


def check_command(name: str) -> bool:
    """Check if a command is available on PATH."""
    return shutil.which(name) is not None


def run_cmd(args: list[str], capture: bool = False) -> subprocess.CompletedProcess:
    """Run a command, optionally capturing output."""
    kwargs = {}
    if capture:
        kwargs["stdout"] = subprocess.PIPE
        kwargs["stderr"] = subprocess.PIPE
        kwargs["text"] = True
    return subprocess.run(args, **kwargs)
