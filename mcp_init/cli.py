"""Command-line entry point for mcp-server-init.

Usage::

    mcp-init my-server
    mcp-init my-server --yes --description "Weather tools"
    python -m mcp_init my-server --template ./my-template
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from .config import InitConfig
from .errors import ScaffoldError
from .initializer import ProjectInitializer
from .models import ProjectAnswers, ScaffoldReport
from .prompts import collect_answers, confirm_overwrite, default_answers
from .utils import (
    console,
    print_error,
    print_info,
    print_next_steps,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcp-init",
        description="Create a new MCP server project from a template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  mcp-init my-server\n"
            "  mcp-init my-server --yes --description 'Weather tools'\n"
            "  mcp-init my-server --template ./my-template --force\n"
        ),
    )
    parser.add_argument("project_dir", help="Directory to create the project in")
    parser.add_argument("--name", default=None, help="Project name (default: directory name)")
    parser.add_argument("--description", default=None, help="Project description")
    parser.add_argument(
        "--template",
        default=None,
        help="Template directory (default: the bundled MCP server template)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file saved with InitConfig.save",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Skip the project questions; use --name/--description or their defaults",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Write into an existing directory without asking",
    )
    return parser


def _load_config(args: argparse.Namespace) -> InitConfig:
    template = Path(args.template) if args.template else None
    if args.config:
        config = InitConfig.load(Path(args.config))
        if template is not None:
            config = config.model_copy(update={"template_dir": template})
        return config
    return InitConfig.from_env(template_dir=template)


def _resolve_answers(
    args: argparse.Namespace, config: InitConfig, default_name: str
) -> ProjectAnswers:
    name = args.name or default_name
    description = args.description if args.description is not None else config.default_description
    if args.yes:
        return default_answers(name, description)
    return collect_answers(name, description)


def _print_report(report: ScaffoldReport) -> None:
    for missing in report.missing:
        print_warning(escape(f"  Source path not found, skipping: {missing.path}"))
    for failure in report.failures:
        print_error(escape(f"  [{failure.kind}] {failure}"))

    manifest = report.manifest or {}
    print_summary_table(
        {
            "Project": manifest.get("name", "-"),
            "Location": str(report.target_dir),
            "Entries copied": ", ".join(report.entries) or "-",
            "Files written": str(len(report.copied.files)),
            "Manifest": "written" if report.manifest is not None else "FAILED",
        },
        title="Project Summary",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``mcp-init`` and ``python -m mcp_init``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args)
    except (OSError, ValidationError) as exc:
        print_error(escape(f"Error: invalid configuration: {exc}"))
        return 1

    target = Path(args.project_dir).resolve()
    default_name = target.name

    print_info("Initializing new MCP Server project...")

    if target.exists():
        if not target.is_dir():
            print_error(escape(f"Error: {target} exists and is not a directory."))
            return 1
        if not args.force and not confirm_overwrite(default_name):
            print_warning("Initialization cancelled.")
            return 0
        print_warning(escape(f"Writing into existing directory: {target}"))

    answers = _resolve_answers(args, config, default_name)

    console.print("\n[blue]Creating project structure...[/blue]")
    try:
        report = ProjectInitializer(config).initialize(target, answers)
    except ScaffoldError as exc:
        print_error(escape(f"Error: {exc}"))
        return 1

    _print_report(report)

    if not report.success:
        print_error("Project created with errors; see the failures above.")
        return 1

    print_success("Project initialized successfully!")
    print_next_steps(args.project_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
