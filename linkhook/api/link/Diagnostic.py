"""Diagnostic model (UNO: single model)."""

from dataclasses import dataclass

from .DiagnosticKind import DiagnosticKind


@dataclass(frozen=True)
class Diagnostic:
    """A classified link problem and its human-readable message."""

    kind: DiagnosticKind
    message: str

    def __str__(self) -> str:
        return self.message
