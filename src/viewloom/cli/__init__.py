"""Viewloom CLI — validate and render template trees.

Entry point registered as ``viewloom`` in ``pyproject.toml``::

    [project.scripts]
    viewloom = "viewloom.cli:main"
"""

import argparse
import sys

from viewloom.config import DEFAULT_VIEWS_DIR


def _add_tree_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("root", help="Template root directory")
    parser.add_argument(
        "--views-dir",
        default=DEFAULT_VIEWS_DIR,
        help=f"Subdirectory holding views (default: {DEFAULT_VIEWS_DIR})",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=[],
        metavar="EXT",
        help="Only load files with this extension, e.g. .html (repeatable)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``viewloom`` command."""
    parser = argparse.ArgumentParser(
        prog="viewloom",
        description="Viewloom — views-and-partials template collections for kida.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- viewloom check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Build a template tree and list its views")
    _add_tree_arguments(check_parser)

    # -- viewloom render --------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render a template through a view")
    _add_tree_arguments(render_parser)
    render_parser.add_argument("view", help="View path, e.g. views/index.html")
    render_parser.add_argument("template", help="Sub-template to render, e.g. base.html")
    render_parser.add_argument(
        "--data",
        default=None,
        help="Template data as a JSON object",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from viewloom.cli._check import run_check

        run_check(args)
    elif args.command == "render":
        from viewloom.cli._render import run_render

        run_render(args)
