"""CLI entry point for the normplot example gallery.

Invoke as:  python -m normplot --example upper_tail
"""

import argparse
import sys

import matplotlib

# The gallery only writes files
matplotlib.use("Agg")

from .gallery import (  # noqa: E402
    diagram_interval,
    diagram_lower_tail,
    diagram_minimal,
    diagram_narrow_upper_tail,
    diagram_upper_tail,
)

# ---------------------------------------------------------------------------
# Example registry
# ---------------------------------------------------------------------------

EXAMPLES = {
    "upper_tail": diagram_upper_tail,
    "interval": diagram_interval,
    "narrow_upper_tail": diagram_narrow_upper_tail,
    "lower_tail": diagram_lower_tail,
    "minimal": diagram_minimal,
}


def match_example(query):
    """Match 'upper_tail', 'upper-tail' or 'upper_tail.png' to a registry key."""
    q = query.strip().lower().replace("-", "_")
    if q.endswith(".png"):
        q = q[: -len(".png")]
    if q in EXAMPLES:
        return q
    return None


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Render example Normal distribution plots."
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--example", help="Example to render (e.g. upper_tail)")
    group.add_argument("--all", action="store_true", help="Render all examples")
    group.add_argument("--list", action="store_true", help="List available examples")
    parser.add_argument(
        "--out", default="figures", help="Output directory (default: figures)"
    )
    args = parser.parse_args(argv)

    if args.list:
        print("Available examples:")
        for key, func in EXAMPLES.items():
            print(f"  {key:<20} {func.__doc__}")
        print(f"\n{len(EXAMPLES)} examples total.")
        return 0

    if args.all:
        keys = list(EXAMPLES)
    else:
        key = match_example(args.example)
        if key is None:
            print(f"No example named '{args.example}'.")
            print("Use --list to see available examples.")
            return 1
        keys = [key]

    print(f"{args.out}/")
    for key in keys:
        EXAMPLES[key](args.out)

    print(f"\nGenerated {len(keys)} figure(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
