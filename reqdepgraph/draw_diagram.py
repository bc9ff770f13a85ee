"""Write the relationships of a dependency map as a text report."""

from __future__ import annotations

from typing import Iterator, TextIO

from .dependency_map import DependencyMap
from .io import head_lines


def diagram_lines(dependency_map: DependencyMap) -> Iterator[str]:
    """Yield one report line per requirement and per link, without newlines."""
    for requirement in dependency_map:
        yield f"Line {requirement.line_number}: {requirement.req_id} --"
        for parent in requirement.parents:
            yield f"Line {parent.line_number}: {parent.req_id} -> {requirement.req_id}"
        for child in requirement.children:
            yield f"Line {child.line_number}: {requirement.req_id} -> {child.req_id}"


def draw_diagram(dependency_map: DependencyMap, input_path, output: TextIO) -> None:
    """Copy the first three input lines to output, then the relationships."""
    output.writelines(head_lines(input_path, 3))
    output.write("\n")
    for line in diagram_lines(dependency_map):
        output.write(line + "\n")