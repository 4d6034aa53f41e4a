"""Resource model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Resource:
    """A non-page asset addressable by path."""

    path: str
    rel_permalink: str
