"""ResolvedTarget model (UNO: single model)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .TargetKind import TargetKind

if TYPE_CHECKING:
    from ..site.Document import Document


@dataclass(frozen=True)
class ResolvedTarget:
    """Outcome of classifying a destination; exactly one kind holds.

    ``rel_link`` is set for page and resource matches. ``document`` is the page a
    fragment is validated against (page matches and same-page fragments).
    """

    kind: TargetKind
    rel_link: str = ""
    document: Document | None = None

    @property
    def resolved(self) -> bool:
        return self.kind is not TargetKind.UNRESOLVED
