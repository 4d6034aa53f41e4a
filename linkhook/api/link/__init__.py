"""Link module - destination resolution and fragment validation."""

from .AnchorAttributes import AnchorAttributes
from .apply_error_policy import apply_error_policy
from .CollectingDiagnosticSink import CollectingDiagnosticSink
from .DestinationResolver import DestinationResolver
from .Diagnostic import Diagnostic
from .DiagnosticKind import DiagnosticKind
from .DiagnosticSink import DiagnosticSink
from .FatalRenderError import FatalRenderError
from .FragmentValidator import FragmentValidator
from .LinkContext import LinkContext
from .LoggingDiagnosticSink import LoggingDiagnosticSink
from .parse_url import parse_url
from .ParsedURL import ParsedURL
from .RawDestination import RawDestination
from .render_anchor import render_anchor
from .ResolvedLink import ResolvedLink
from .ResolvedTarget import ResolvedTarget
from .TargetKind import TargetKind

__all__ = [
    "AnchorAttributes",
    "CollectingDiagnosticSink",
    "DestinationResolver",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "FatalRenderError",
    "FragmentValidator",
    "LinkContext",
    "LoggingDiagnosticSink",
    "ParsedURL",
    "RawDestination",
    "ResolvedLink",
    "ResolvedTarget",
    "TargetKind",
    "apply_error_policy",
    "parse_url",
    "render_anchor",
]
