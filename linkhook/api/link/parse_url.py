"""URL string parser (UNO: single function)."""

from urllib.parse import unquote, urlsplit, urlunsplit

from .ParsedURL import ParsedURL


def parse_url(raw: str) -> ParsedURL:
    """Parse a raw link destination.

    A destination is absolute when it carries a scheme. Path and fragment are
    percent-decoded; the query is kept exactly as written.

    Args:
        raw: The destination as written in the source document

    Returns:
        ParsedURL for the destination

    Raises:
        ValueError: If the string cannot be parsed as a URL
    """
    parts = urlsplit(raw.strip())
    return ParsedURL(
        is_absolute=bool(parts.scheme),
        path=unquote(parts.path),
        raw_query=parts.query,
        fragment=unquote(parts.fragment),
        string=urlunsplit(parts),
    )
