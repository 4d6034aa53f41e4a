"""Error-level gate (UNO: single function)."""

from ._constants import LEVEL_ERROR, LEVEL_IGNORE, LEVEL_WARNING
from .Diagnostic import Diagnostic
from .DiagnosticSink import DiagnosticSink


def apply_error_policy(diagnostic: Diagnostic, error_level: str, sink: DiagnosticSink) -> bool:
    """Route a diagnostic according to the configured error level.

    Args:
        diagnostic: The classified problem
        error_level: One of ignore, warning, error
        sink: Receives warnings and fatal diagnostics

    Returns:
        True if a warning was emitted, False if the diagnostic was ignored

    Raises:
        FatalRenderError: Under the "error" level
        ValueError: If error_level is not a known level
    """
    if error_level not in (LEVEL_IGNORE, LEVEL_WARNING, LEVEL_ERROR):
        raise ValueError(f"Unknown error level: {error_level!r}")
    if error_level == LEVEL_ERROR:
        sink.fatal(diagnostic)
    if error_level == LEVEL_WARNING:
        sink.warn(diagnostic)
        return True
    return False
