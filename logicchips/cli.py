"""Command line entry point that prints chip truth tables."""

from __future__ import annotations

import argparse
import sys

from logicchips.chips import available_parts, get_chip


def main(argv: list[str] | None = None) -> int:
    """Print the truth tables of the chips named on the command line."""
    parser = argparse.ArgumentParser(
        prog="logicchips", description="Print truth tables of logic chips."
    )
    parser.add_argument("parts", nargs="*", metavar="PART", help="part number, e.g. 7400")
    parser.add_argument("-l", "--list", action="store_true", help="list known part numbers")
    args = parser.parse_args(argv)

    if args.list:
        sys.stdout.write("".join(f"{part}\n" for part in available_parts()))
        return 0
    if not args.parts:
        parser.error("at least one part number is required")
    try:
        chips = [get_chip(part) for part in args.parts]
    except ValueError as exc:
        parser.error(str(exc))
    sys.stdout.write("".join(chip.render() for chip in chips))
    return 0


if __name__ == "__main__":
    sys.exit(main())