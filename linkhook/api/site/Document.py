"""Document model (UNO: single model)."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ResourceStore import ResourceStore


@dataclass(frozen=True)
class Document:
    """An addressable page in the content tree.

    Heading identifiers are kept in document order, duplicates included, so
    ambiguous anchors can be detected.
    """

    path: str
    rel_permalink: str
    bundle_type: str = ""
    section: Document | None = None
    resources: ResourceStore = field(default_factory=ResourceStore)
    heading_ids: tuple[str, ...] = ()

    def contains_identifier(self, identifier: str) -> bool:
        return identifier in self.heading_ids

    def count_identifier(self, identifier: str) -> int:
        return self.heading_ids.count(identifier)
