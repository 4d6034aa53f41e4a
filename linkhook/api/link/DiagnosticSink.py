"""Abstract diagnostic sink."""

from abc import ABC, abstractmethod
from typing import NoReturn

from .Diagnostic import Diagnostic
from .FatalRenderError import FatalRenderError


class DiagnosticSink(ABC):
    """Receives link diagnostics that survived the error-level gate."""

    @abstractmethod
    def warn(self, diagnostic: Diagnostic) -> None:
        """Report a diagnostic and continue."""
        pass

    @abstractmethod
    def error(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic that is about to abort the run."""
        pass

    def fatal(self, diagnostic: Diagnostic) -> NoReturn:
        """Record the diagnostic and abort the rendering pass."""
        self.error(diagnostic)
        raise FatalRenderError(diagnostic)
