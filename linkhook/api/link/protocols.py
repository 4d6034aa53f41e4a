"""Protocols for the stores a resolver looks destinations up in.

``Site``, ``Document`` and ``ResourceStore`` in ``linkhook.api.site`` satisfy
them; any other content tree can be plugged in the same way.
"""

from __future__ import annotations

from typing import Protocol


class LinkTarget(Protocol):
    """Anything a link can point at."""

    rel_permalink: str


class ResourceLookup(Protocol):
    """Lookup of resources in one scope."""

    def get_resource_by_path(self, path: str) -> LinkTarget | None: ...


class PageLookup(Protocol):
    """Lookup of pages in the content tree."""

    def get_page_by_path(self, path: str) -> HeadingDocument | None: ...


class HeadingDocument(Protocol):
    """A document exposing its heading-identifier index."""

    path: str
    rel_permalink: str

    def contains_identifier(self, identifier: str) -> bool: ...

    def count_identifier(self, identifier: str) -> int: ...
