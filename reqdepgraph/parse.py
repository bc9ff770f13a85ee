"""Extract requirement IDs and their links from fenced YAML blocks."""

from __future__ import annotations

import re
from typing import Callable, Iterable, Iterator

from .dependency_map import DependencyError, DependencyMap

_TAG = re.compile(r"REQ-[A-Z]{2}-[A-Z]{4}-[0-9]{4}(?![A-Za-z0-9])")
_MAX_ID = 127

Log = Callable[[str], object]


def is_req_tag(text: str) -> bool:
    """True if text starts with a tag of the form REQ-XX-YYYY-DDDD."""
    return _TAG.match(text) is not None


def _first_word(text: str) -> str | None:
    words = text.split(maxsplit=1)
    return words[0][:_MAX_ID] if words else None


def _linked_ids(text: str) -> Iterator[str]:
    for token in text.split(","):
        if not token:
            continue
        word = _first_word(token)
        if word and word != "--" and is_req_tag(word):
            yield word


def parse_lines(
    lines: Iterable[str], dependency_map: DependencyMap, log: Log | None = None
) -> DependencyMap:
    """Fill dependency_map from the lines of a document."""
    emit: Log = log if log is not None else (lambda message: None)
    emit("THIS IS FROM PARSE_FILE:")

    in_yaml = False
    req_id = ""
    for number, line in enumerate(lines, start=1):
        if "```yaml" in line:
            in_yaml = True
            continue
        if in_yaml and "```" in line:
            in_yaml = False
            req_id = ""
            continue
        if not in_yaml:
            continue

        start = line.find("ID:")
        if start >= 0:
            word = _first_word(line[start + len("ID:"):])
            if word is not None:
                req_id = word
            if is_req_tag(req_id):
                try:
                    dependency_map.add_requirement(req_id, number)
                except DependencyError as error:
                    emit(str(error))
                emit(f" {number:04d}: {req_id}")

        start = line.find("Parents:")
        if start >= 0 and is_req_tag(req_id):
            for parent_id in _linked_ids(line[start + len("Parents:"):]):
                try:
                    dependency_map.add_parent(req_id, parent_id, number)
                except DependencyError as error:
                    emit(str(error))
                emit(f" {number:04d}: {parent_id} -> {req_id}")

        start = line.find("Children:")
        if start >= 0 and is_req_tag(req_id):
            for child_id in _linked_ids(line[start + len("Children:"):]):
                try:
                    dependency_map.add_child(req_id, child_id, number)
                except DependencyError as error:
                    emit(str(error))
                emit(f" {number:04d}: {req_id} -> {child_id}")

    emit("")
    return dependency_map


def parse_file(
    path, dependency_map: DependencyMap, log: Log | None = None
) -> DependencyMap:
    """Fill dependency_map from the document at path."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_lines(handle, dependency_map, log)