"""ResolvedLink model (UNO: single model)."""

from dataclasses import dataclass

from .AnchorAttributes import AnchorAttributes
from .ResolvedTarget import ResolvedTarget


@dataclass(frozen=True)
class ResolvedLink:
    """Everything the renderer needs to emit one anchor."""

    target: ResolvedTarget
    attributes: AnchorAttributes
    text: str
