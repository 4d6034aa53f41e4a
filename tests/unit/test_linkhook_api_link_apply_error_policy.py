"""Unit tests for linkhook.api.link.apply_error_policy."""

import logging

import pytest

from linkhook.api.link.apply_error_policy import apply_error_policy
from linkhook.api.link.CollectingDiagnosticSink import CollectingDiagnosticSink
from linkhook.api.link.Diagnostic import Diagnostic
from linkhook.api.link.DiagnosticKind import DiagnosticKind
from linkhook.api.link.FatalRenderError import FatalRenderError
from linkhook.api.link.LoggingDiagnosticSink import LoggingDiagnosticSink

pytestmark = pytest.mark.link

DIAGNOSTIC = Diagnostic(DiagnosticKind.UNRESOLVED_DESTINATION, "cannot resolve /x")


def test_ignore(sink):
    assert apply_error_policy(DIAGNOSTIC, "ignore", sink) is False
    assert sink.warnings == [] and sink.errors == []


def test_warning(sink):
    assert apply_error_policy(DIAGNOSTIC, "warning", sink) is True
    assert sink.warnings == [DIAGNOSTIC]


def test_error(sink):
    with pytest.raises(FatalRenderError) as excinfo:
        apply_error_policy(DIAGNOSTIC, "error", sink)
    assert excinfo.value.diagnostic is DIAGNOSTIC
    assert str(excinfo.value) == "cannot resolve /x"
    assert sink.errors == [DIAGNOSTIC]


def test_unknown_level(sink):
    with pytest.raises(ValueError, match="Unknown error level"):
        apply_error_policy(DIAGNOSTIC, "loud", sink)


def test_logging_sink(caplog):
    with caplog.at_level(logging.WARNING, logger="linkhook"):
        apply_error_policy(DIAGNOSTIC, "warning", LoggingDiagnosticSink())
        with pytest.raises(FatalRenderError):
            apply_error_policy(DIAGNOSTIC, "error", LoggingDiagnosticSink())
    assert [r.levelno for r in caplog.records] == [logging.WARNING, logging.ERROR]


def test_collecting_sink_forwards():
    inner = CollectingDiagnosticSink()
    outer = CollectingDiagnosticSink(forward=inner)
    outer.warn(DIAGNOSTIC)
    outer.error(DIAGNOSTIC)
    assert inner.warnings == [DIAGNOSTIC]
    assert inner.errors == [DIAGNOSTIC]
