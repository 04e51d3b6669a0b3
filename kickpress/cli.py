"""Command line entry point.

Usage::

    kickpress kick my-api
    kickpress kick my-api --no-typescript --package-manager pnpm
    python -m kickpress.cli kick my-api --path ./services/my-api
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from kickpress import __version__
from kickpress.config import ProjectConfig, ScaffoldSettings
from kickpress.scaffolder import materialize
from kickpress.scaffolder.variants import PACKAGE_MANAGERS, resolve_package_manager
from kickpress.utils import (
    console,
    format_duration,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser(settings: ScaffoldSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kickpress",
        description=(
            "Scaffold Express.js projects with TypeScript, Prisma, "
            "and best practices built-in"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  kickpress kick my-api                    Create a TypeScript project\n"
            "  kickpress kick my-api --no-typescript    Create a JavaScript project\n"
            "  kickpress kick my-api -m pnpm            Document pnpm commands\n"
        ),
    )
    parser.add_argument("-v", "--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)
    kick = subparsers.add_parser("kick", help="Create a new Express.js project")
    kick.add_argument("name", help="Project name")
    kick.add_argument(
        "--path", "-p",
        default=None,
        help="Destination directory (default: ./<name>)",
    )
    kick.add_argument(
        "--typescript",
        action=argparse.BooleanOptionalAction,
        default=settings.typescript,
        help="Generate TypeScript (default) or JavaScript with --no-typescript",
    )
    kick.add_argument(
        "--database", "-d",
        default=settings.database,
        help=f"Database identifier (default: {settings.database})",
    )
    kick.add_argument(
        "--package-manager", "-m",
        default=settings.package_manager,
        help=(
            f"Package manager used in the README "
            f"({', '.join(PACKAGE_MANAGERS)}; default: {settings.package_manager})"
        ),
    )
    kick.add_argument(
        "--template", "-t",
        default=settings.template,
        help="Project template (reserved)",
    )
    return parser


def run_kick(args: argparse.Namespace) -> int:
    """Scaffold the project described by *args*; return a process exit code."""
    project_path = Path(args.path) if args.path else Path.cwd() / args.name

    try:
        config = ProjectConfig(
            project_name=args.name,
            project_path=project_path,
            typescript=args.typescript,
            database=args.database,
            template=args.template,
        )
    except ValidationError as exc:
        print_error(f"Invalid project configuration: {escape(str(exc))}")
        return 1

    if args.package_manager not in PACKAGE_MANAGERS:
        print_warning(
            f"Unknown package manager '{escape(args.package_manager)}'; "
            "README commands will invoke it directly."
        )
    started = time.monotonic()
    try:
        if project_path.is_dir() and any(project_path.iterdir()):
            print_warning(
                f"{escape(str(project_path))} is not empty; existing files may be overwritten."
            )
        written = materialize(config, args.package_manager)
    except OSError as exc:
        print_error(f"Failed to scaffold project: {escape(str(exc))}")
        return 1
    elapsed = time.monotonic() - started

    print_summary_table(
        {
            "Project": config.project_name,
            "Location": str(project_path),
            "Language": "TypeScript" if config.typescript else "JavaScript",
            "Database": config.database,
            "Package manager": args.package_manager,
            "Files written": str(len(written)),
        },
        title="Kickpress",
    )
    print_success(f"Project created in {format_duration(elapsed)}")

    pm = resolve_package_manager(args.package_manager)
    console.print("\nNext steps:")
    console.print(f"  cd {escape(str(project_path))}")
    if pm.requires_build_approval:
        console.print(f"  {pm.name} approve-builds")
    console.print(f"  {pm.name} install")
    console.print(f"  {pm.run('db:generate')}")
    console.print(f"  {pm.run('dev')}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``kickpress`` / ``python -m kickpress.cli``."""
    parser = build_parser(ScaffoldSettings.from_env())
    args = parser.parse_args(argv)

    if args.command == "kick":
        sys.exit(run_kick(args))


if __name__ == "__main__":
    main()
