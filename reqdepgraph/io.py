"""Console and file helpers for choosing the input and writing the report."""

from __future__ import annotations

import sys
from itertools import islice
from typing import Callable, TextIO


def head_lines(path, count: int) -> list[str]:
    """Return up to count lines from the start of a file, newlines kept."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return list(islice(handle, count))


def prompt_for_file(
    input_func: Callable[[], str] | None = None, output: TextIO | None = None
) -> str:
    """Ask until an existing, readable file path is given and return it.

    The first three lines of the chosen file are echoed as a check.
    EOFError from input_func is propagated.
    """
    read = input_func if input_func is not None else input
    out = output if output is not None else sys.stdout
    while True:
        out.write("Enter the full path to the file: ")
        out.flush()
        path = read().split("\n", 1)[0]
        if not path:
            out.write("Path cannot be empty.\n")
            continue
        try:
            preview = head_lines(path, 3)
        except OSError:
            print(f"Error: File '{path}' does not exist.", file=sys.stderr)
            continue
        out.write("IO: Test if the file exists and print the first 3 lines.\n")
        out.writelines(preview)
        out.write("\n")
        return path


def create_output_file(path) -> TextIO:
    """Open path for writing the report, truncating it."""
    return open(path, "w", encoding="utf-8")