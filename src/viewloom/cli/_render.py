"""``viewloom render`` — render a sub-template through a view to stdout."""

import argparse
import json
import sys

from viewloom.cli._build import build_from_args
from viewloom.errors import ViewloomError


def run_render(args: argparse.Namespace) -> None:
    """Build ``args.root`` and render ``args.template`` through ``args.view``.

    ``--data`` must be a JSON object; it becomes the template context.
    """
    data = None
    if args.data is not None:
        try:
            data = json.loads(args.data)
        except json.JSONDecodeError as exc:
            print(f"Error: --data is not valid JSON: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
        if not isinstance(data, dict):
            print("Error: --data must be a JSON object", file=sys.stderr)
            raise SystemExit(1)

    registry = build_from_args(args)

    try:
        registry.lookup(args.view).render(args.template, sys.stdout, data)
    except ViewloomError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    sys.stdout.flush()
