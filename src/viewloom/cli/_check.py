"""``viewloom check`` — build a template tree and report what was found.

Prints every view with the number of partials attached to it, then a
summary line.  Exits with code 1 if the build fails.
"""

import argparse
import sys

from viewloom.cli._build import build_from_args


def run_check(args: argparse.Namespace) -> None:
    """Build ``args.root`` and print its views."""
    registry = build_from_args(args)

    for name in registry:
        unit = registry.units[name]
        attached = len(unit.templates) - 1
        print(f"  {name}  ({attached} partials)")

    print(f"{len(registry.views)} views, {len(registry.partials)} partials")
    sys.stdout.flush()
