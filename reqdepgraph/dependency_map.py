"""In-memory map of requirements and their parent/child links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


class DependencyError(ValueError):
    """Raised when a requirement or link cannot be added to the map."""


@dataclass(frozen=True)
class Link:
    """A reference to another requirement and the line it was found on."""

    req_id: str
    line_number: int


@dataclass
class Requirement:
    """A requirement ID with the links declared for it."""

    req_id: str
    line_number: int
    parents: list[Link] = field(default_factory=list)
    children: list[Link] = field(default_factory=list)

    def has_parent(self, parent_id: str) -> bool:
        return any(link.req_id == parent_id for link in self.parents)

    def has_child(self, child_id: str) -> bool:
        return any(link.req_id == child_id for link in self.children)


def _links_text(links: list[Link]) -> str:
    if not links:
        return "--"
    return "".join(f"{link.req_id} (line {link.line_number}), " for link in links)


class DependencyMap:
    """Requirements in the order they were added, keyed by ID."""

    def __init__(self) -> None:
        self._requirements: dict[str, Requirement] = {}

    def __len__(self) -> int:
        return len(self._requirements)

    def __iter__(self) -> Iterator[Requirement]:
        return iter(self._requirements.values())

    def __contains__(self, req_id: object) -> bool:
        return req_id in self._requirements

    def find(self, req_id: str) -> Requirement | None:
        """Return the requirement with this ID, or None."""
        return self._requirements.get(req_id)

    def is_empty(self) -> bool:
        return not self._requirements

    def add_requirement(self, req_id: str, line_number: int) -> Requirement:
        """Add a new requirement; an ID may be added only once."""
        if req_id in self._requirements:
            raise DependencyError(f"req_ID {req_id} already exists in the map")
        requirement = Requirement(req_id, line_number)
        self._requirements[req_id] = requirement
        return requirement

    def _existing(self, req_id: str) -> Requirement:
        requirement = self._requirements.get(req_id)
        if requirement is None:
            raise DependencyError(f"req_ID {req_id} not found in map")
        return requirement

    def add_parent(self, req_id: str, parent_id: str, line_number: int) -> Link:
        """Record that parent_id is a parent of req_id."""
        requirement = self._existing(req_id)
        if requirement.has_parent(parent_id):
            raise DependencyError(
                f"parent_ID {parent_id} already exists for req_ID {req_id}"
            )
        link = Link(parent_id, line_number)
        requirement.parents.append(link)
        return link

    def add_child(self, req_id: str, child_id: str, line_number: int) -> Link:
        """Record that child_id is a child of req_id."""
        requirement = self._existing(req_id)
        if requirement.has_child(child_id):
            raise DependencyError(
                f"child_ID {child_id} already exists for req_ID {req_id}"
            )
        link = Link(child_id, line_number)
        requirement.children.append(link)
        return link

    def describe(self) -> str:
        """Return a human-readable dump of the whole map."""
        parts = ["THIS IS WHAT IS IN THE MAP:\n"]
        for requirement in self:
            parts.append(
                f"reqID: {requirement.req_id} (line {requirement.line_number})\n"
            )
            parts.append(f"  Parents: {_links_text(requirement.parents)}\n")
            parts.append(f"  Children: {_links_text(requirement.children)}\n\n")
        return "".join(parts)