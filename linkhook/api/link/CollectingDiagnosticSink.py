"""Diagnostic sink that keeps diagnostics in memory."""

from .Diagnostic import Diagnostic
from .DiagnosticSink import DiagnosticSink


class CollectingDiagnosticSink(DiagnosticSink):
    """Collects diagnostics for reporting in command output.

    Optionally forwards every diagnostic to another sink.
    """

    def __init__(self, forward: DiagnosticSink | None = None):
        self.forward = forward
        self.warnings: list[Diagnostic] = []
        self.errors: list[Diagnostic] = []

    def warn(self, diagnostic: Diagnostic) -> None:
        self.warnings.append(diagnostic)
        if self.forward is not None:
            self.forward.warn(diagnostic)

    def error(self, diagnostic: Diagnostic) -> None:
        self.errors.append(diagnostic)
        if self.forward is not None:
            self.forward.error(diagnostic)
