"""Shared helpers for mcp-server-init.

Provides JSON I/O, whole-file atomic writes, and Rich-based console output.
The engine modules only use the file helpers; console output is reserved for
the CLI.
"""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed value (usually a dict).

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


def dump_json(data: Any) -> str:
    """Serialize *data* as 2-space indented JSON with a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# Atomic writes
# ---------------------------------------------------------------------------


@contextmanager
def _replace_atomically(path: Path, mode: int = 0o644) -> Iterator[IO[bytes]]:
    """Yield a temporary sibling of *path* that replaces it on success.

    The temporary file is removed if the body raises, so *path* is either
    left untouched or replaced by a complete file.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            # mkstemp creates 0600 files
            os.chmod(tmp_name, mode)
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def atomic_write_text(path: str | Path, content: str) -> None:
    """Write *content* to *path* as UTF-8, all or nothing."""
    with _replace_atomically(Path(path)) as handle:
        handle.write(content.encode("utf-8"))


def atomic_copy_file(source: str | Path, destination: str | Path) -> None:
    """Copy the bytes of *source* over *destination*, all or nothing."""
    mode = os.stat(source).st_mode & 0o777
    with open(source, "rb") as src, _replace_atomically(Path(destination), mode) as dst:
        shutil.copyfileobj(src, dst)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    console.print(f"[cyan]{message}[/cyan]")


def print_next_steps(project_arg: str) -> None:
    """Print the commands a user runs after the project is created."""
    steps = "\n".join(
        [
            f"  cd {project_arg}",
            "  npm install",
            "  # Review configuration in src/config/",
            "  # Add your tools in src/tools/",
            "  # Add your services in src/services/",
            "  npm run dev    (to start the development server)",
            "  npm run build  (to build for production)",
        ]
    )
    console.print(Panel(steps, title="Next steps", style="cyan", expand=False))
