"""Fatal render error type."""

from .Diagnostic import Diagnostic


class FatalRenderError(RuntimeError):
    """Aborts the whole rendering pass under the "error" level.

    Callers must let it propagate; it is not a per-document failure.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
