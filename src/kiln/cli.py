"""Command line interface for kiln."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from .config import TemplateConfig
from .errors import KilnError
from .progress import NullProgress, SpinnerProgress
from .project import ProjectName
from .variables import substitute
from .walker import walk_dir

_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kiln", description="Fill placeholders in a copied project template"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (repeat for debug messages)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render", help="substitute placeholders in file contents and names"
    )
    render_parser.add_argument("name", help="Name of the new project")
    render_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Template directory to render in place",
    )
    render_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Use the project name verbatim instead of converting it to kebab-case",
    )
    render_parser.add_argument(
        "--no-progress", action="store_true", help="Do not display a progress spinner"
    )

    vars_parser = subparsers.add_parser("vars", help="print the template variables")
    vars_parser.add_argument("name", help="Name of the new project")
    vars_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Use the project name verbatim instead of converting it to kebab-case",
    )

    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _handle_render(args: argparse.Namespace) -> int:
    project_dir = args.directory
    if not project_dir.is_dir():
        raise KilnError(f"{project_dir} is not a directory")

    name = ProjectName.parse(args.name)
    variables = substitute(name, args.force)
    config = TemplateConfig.load(project_dir)

    if args.no_progress:
        rendered = walk_dir(project_dir, variables, config, NullProgress())
    else:
        with SpinnerProgress(_console) as progress:
            rendered = walk_dir(project_dir, variables, config, progress)

    _console.print(
        f"[bold green]Done![/] Rendered {len(rendered)} files in [bold]{escape(str(project_dir))}[/]"
    )
    return 0


def _handle_vars(args: argparse.Namespace) -> int:
    variables = substitute(ProjectName.parse(args.name), args.force)
    for key, value in variables.items():
        sys.stdout.write(f"{key} = {value}\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    handlers = {"render": _handle_render, "vars": _handle_vars}
    handler = handlers.get(args.command)
    if handler is None:
        parser.error("no command provided")
        return 2

    try:
        return handler(args)
    except KilnError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}", soft_wrap=True)
        if exc.__cause__ is not None:
            _console.print(f"  [dim]{escape(str(exc.__cause__))}[/]", soft_wrap=True)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
