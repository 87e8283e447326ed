"""Shared registry construction for CLI commands."""

import argparse
import sys

from viewloom.config import LoaderConfig
from viewloom.errors import ViewloomError
from viewloom.loader import build
from viewloom.registry import Registry


def build_from_args(args: argparse.Namespace) -> Registry:
    """Build a registry from ``root``, ``views_dir`` and ``ext`` arguments.

    Prints ``Error: ...`` to stderr and exits 1 on any viewloom error.
    """
    try:
        config = LoaderConfig(views_dir=args.views_dir, extensions=frozenset(args.ext))
        return build(args.root, config)
    except ViewloomError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
