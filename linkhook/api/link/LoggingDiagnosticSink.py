"""Diagnostic sink backed by the logging module."""

import logging

from .Diagnostic import Diagnostic
from .DiagnosticSink import DiagnosticSink

logger = logging.getLogger(__name__)


class LoggingDiagnosticSink(DiagnosticSink):
    """Writes diagnostics to the linkhook logger."""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def warn(self, diagnostic: Diagnostic) -> None:
        self.log.warning("%s", diagnostic.message)

    def error(self, diagnostic: Diagnostic) -> None:
        self.log.error("%s", diagnostic.message)
