"""
CLI entry point. Run as: python -m kleene --example <name>
"""

import argparse

from .examples import EXAMPLES
from .visualization import print_proposition, print_derivation, export_dot


def main(argv=None):
    parser = argparse.ArgumentParser(description="Three-valued proposition algebra")
    parser.add_argument(
        "--example",
        choices=list(EXAMPLES.keys()),
        default="demo",
        help="Which example to run",
    )
    parser.add_argument("--dot",   type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--list",  action="store_true",    help="List examples and exit")
    parser.add_argument("--quiet", action="store_true",    help="Less output")
    args = parser.parse_args(argv)

    if args.list:
        for name, example in EXAMPLES.items():
            print(f"  {name:<12} {example['description']}")
        return 0

    example = EXAMPLES[args.example]
    print(f"Example: {args.example}")
    result = example["run"](verbose=not args.quiet)

    print_proposition(result)
    if not args.quiet:
        print_derivation(result)

    if args.dot:
        export_dot(result, args.dot)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
