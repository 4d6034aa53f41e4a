"""ParsedURL model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedURL:
    """Decomposition of a raw link destination."""

    is_absolute: bool
    path: str
    raw_query: str
    fragment: str
    string: str
