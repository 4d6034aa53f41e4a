"""Diagnostic kind enum."""

from enum import Enum


class DiagnosticKind(str, Enum):
    """Classification of a link problem before the error-level gate."""

    UNRESOLVED_DESTINATION = "unresolved_destination"
    UNRESOLVED_FRAGMENT = "unresolved_fragment"
    DUPLICATE_FRAGMENT = "duplicate_fragment"
