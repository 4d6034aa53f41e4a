"""RawDestination model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawDestination:
    """A link destination as written, with its display text and optional title."""

    destination: str
    text: str = ""
    title: str = ""
