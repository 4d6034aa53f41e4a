"""LinkContext model (UNO: single model)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..site.Document import Document


@dataclass(frozen=True)
class LinkContext:
    """The documents involved in rendering one link.

    ``page`` is the document being rendered. ``inner`` is the document whose
    content holds the link, which differs from ``page`` when content from another
    document is composed into it. Lookups and same-page fragments use ``inner``.
    """

    page: Document
    inner: Document | None = None

    @property
    def current(self) -> Document:
        """Document in which the link is rendered inline."""
        return self.inner if self.inner is not None else self.page
