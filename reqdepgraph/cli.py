"""Command line entry point: parse a requirements document and write a report."""

from __future__ import annotations

import argparse
import sys

from .dependency_map import DependencyMap
from .draw_diagram import draw_diagram
from .io import create_output_file, prompt_for_file
from .parse import parse_file

DEFAULT_REPORT = "rdgg-report-57045714.md"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reqdepgraph",
        description="Build a requirement dependency report from a document.",
    )
    parser.add_argument("path", nargs="?", help="input document; asked for if omitted")
    parser.add_argument("-o", "--output", default=DEFAULT_REPORT, help="report file")
    parser.add_argument(
        "--no-pause", action="store_true", help="do not wait for Enter before exiting"
    )
    return parser


def main(argv=None) -> int:
    args = _parser().parse_args(argv)

    try:
        path = args.path or prompt_for_file()
    except EOFError:
        print("Error reading input.", file=sys.stderr)
        return 1

    dependency_map = DependencyMap()
    try:
        parse_file(path, dependency_map, log=print)
    except OSError:
        print(f"Could not open file: {path}")
        return 1

    try:
        report = create_output_file(args.output)
    except OSError:
        print("Could not open output file for writing.", file=sys.stderr)
        return 1
    with report:
        draw_diagram(dependency_map, path, report)

    print(dependency_map.describe(), end="")

    if args.no_pause:
        print("Report generated successfully.")
    else:
        print("Report generated successfully. Press Enter to exit.")
        try:
            input()
        except EOFError:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())