"""Interactive collection of project answers.

These functions are the only place that reads from the terminal.  The
initializer itself accepts a plain ``ProjectAnswers`` value, so scripted
callers can skip this module entirely.
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .models import ProjectAnswers
from .utils import console as default_console


def confirm_overwrite(project_name: str, console: Console | None = None) -> bool:
    """Ask whether an existing target directory may be written into."""
    return Confirm.ask(
        f'Directory "{project_name}" already exists. Overwrite?',
        default=False,
        console=console or default_console,
    )


def collect_answers(
    default_name: str,
    default_description: str,
    console: Console | None = None,
) -> ProjectAnswers:
    """Prompt for the project name and description.

    The name is asked again until a non-empty value is given.
    """
    console = console or default_console
    while True:
        name = Prompt.ask("Project name", default=default_name, console=console).strip()
        if name:
            break
        console.print("[red]Project name cannot be empty.[/red]")

    description = Prompt.ask(
        "Project description", default=default_description, console=console
    )
    return ProjectAnswers(project_name=name, description=description)


def default_answers(default_name: str, default_description: str) -> ProjectAnswers:
    """Answers used for non-interactive runs."""
    return ProjectAnswers(project_name=default_name, description=default_description)
