"""Fragment validation against heading identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._constants import HOOK_NAME
from .apply_error_policy import apply_error_policy
from .Diagnostic import Diagnostic
from .DiagnosticKind import DiagnosticKind
from .DiagnosticSink import DiagnosticSink

if TYPE_CHECKING:
    from .protocols import HeadingDocument


class FragmentValidator:
    """Checks that a fragment names exactly one heading in its target document.

    Validation is advisory: it never changes the href. Problems go through the
    error-level gate and can only abort the run under the "error" level.
    """

    def __init__(self, sink: DiagnosticSink):
        self.sink = sink

    def validate(
        self,
        target: HeadingDocument,
        fragment: str,
        error_level: str,
        source: HeadingDocument | None = None,
    ) -> Diagnostic | None:
        """Validate ``fragment`` against the heading identifiers of ``target``.

        Args:
            target: Document the fragment points into
            fragment: Heading identifier without the leading "#"
            error_level: One of ignore, warning, error
            source: Document holding the link; named in the message when it differs from target

        Returns:
            The diagnostic that was classified, or None if the fragment is valid
        """
        diagnostic = self.check(target, fragment, source)
        if diagnostic is not None:
            apply_error_policy(diagnostic, error_level, self.sink)
        return diagnostic

    def check(
        self,
        target: HeadingDocument,
        fragment: str,
        source: HeadingDocument | None = None,
    ) -> Diagnostic | None:
        """Classify a fragment without reporting it."""
        if not target.contains_identifier(fragment):
            message = f'The "{HOOK_NAME}" render hook was unable to find heading "{fragment}" in {target.path}'
            if source is not None and source.path != target.path:
                message += f" (linked from {source.path})"
            return Diagnostic(DiagnosticKind.UNRESOLVED_FRAGMENT, message)

        count = target.count_identifier(fragment)
        if count > 1:
            return Diagnostic(
                DiagnosticKind.DUPLICATE_FRAGMENT,
                f'The "{HOOK_NAME}" render hook found {count} headings with identifier "{fragment}" in {target.path}',
            )
        return None
