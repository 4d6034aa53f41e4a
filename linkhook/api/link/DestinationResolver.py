"""Destination resolution for the render-link hook."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from markupsafe import escape

from ._constants import BUNDLE_LEAF, CLASS_BROKEN, HOOK_NAME, REL_EXTERNAL
from .AnchorAttributes import AnchorAttributes
from .apply_error_policy import apply_error_policy
from .Diagnostic import Diagnostic
from .DiagnosticKind import DiagnosticKind
from .DiagnosticSink import DiagnosticSink
from .FragmentValidator import FragmentValidator
from .LinkContext import LinkContext
from .LoggingDiagnosticSink import LoggingDiagnosticSink
from .parse_url import parse_url
from .ParsedURL import ParsedURL
from .RawDestination import RawDestination
from .ResolvedLink import ResolvedLink
from .ResolvedTarget import ResolvedTarget
from .TargetKind import TargetKind

if TYPE_CHECKING:
    from ..config.LinkConfig import LinkConfig
    from ..site.Document import Document
    from .protocols import LinkTarget, PageLookup, ResourceLookup

_RESOURCE_KINDS = (TargetKind.PAGE_RESOURCE, TargetKind.SECTION_RESOURCE, TargetKind.GLOBAL_RESOURCE)


class DestinationResolver:
    """Resolves raw link destinations to deployment-aware hrefs.

    Relative paths are tried against an ordered list of lookups; the first
    match wins:

    1. page (as written, then with one trailing slash trimmed)
    2. resource of the current document
    3. resource of the enclosing section (not for leaf bundles)
    4. site-global resource

    The resolver holds no per-call state and may be shared between threads as
    long as the stores tolerate concurrent reads.
    """

    def __init__(
        self,
        pages: PageLookup,
        resources: ResourceLookup,
        sink: DiagnosticSink | None = None,
        parse: Callable[[str], ParsedURL] = parse_url,
    ):
        """Initialize resolver.

        Args:
            pages: Page store
            resources: Site-global resource store
            sink: Receives diagnostics; defaults to the linkhook logger
            parse: URL parser
        """
        self.pages = pages
        self.resources = resources
        self.sink = sink if sink is not None else LoggingDiagnosticSink()
        self.parse = parse
        self.fragments = FragmentValidator(self.sink)
        self.lookups: list[tuple[TargetKind, Callable[[Document, str], LinkTarget | None]]] = [
            (TargetKind.PAGE, self._lookup_page),
            (TargetKind.PAGE_RESOURCE, self._lookup_page_resource),
            (TargetKind.SECTION_RESOURCE, self._lookup_section_resource),
            (TargetKind.GLOBAL_RESOURCE, self._lookup_global_resource),
        ]

    def resolve(
        self,
        context: LinkContext,
        dest: RawDestination,
        config: LinkConfig,
        is_development: bool = False,
    ) -> AnchorAttributes:
        """Resolve one link to its anchor attributes.

        Args:
            context: Documents involved in rendering the link
            dest: The destination as written
            config: Error level and highlight settings
            is_development: Whether this is a development-mode run

        Returns:
            AnchorAttributes; href falls back to the raw destination when unresolved

        Raises:
            FatalRenderError: Under the "error" level when the destination or a fragment fails
        """
        return self.resolve_link(context, dest, config, is_development).attributes

    def resolve_link(
        self,
        context: LinkContext,
        dest: RawDestination,
        config: LinkConfig,
        is_development: bool = False,
    ) -> ResolvedLink:
        """Like resolve(), also returning the classified target and the link text."""
        current = context.current
        try:
            parsed: ParsedURL | None = self.parse(dest.destination)
        except ValueError:
            parsed = None

        target = self.classify(context, parsed) if parsed is not None else ResolvedTarget(TargetKind.UNRESOLVED)

        href = dest.destination
        rel = ""
        css_class = ""
        if target.kind is TargetKind.EXTERNAL:
            href = parsed.string
            rel = REL_EXTERNAL
        elif target.kind is TargetKind.PAGE:
            href = target.rel_link
            if parsed.raw_query:
                href += f"?{parsed.raw_query}"
            if parsed.fragment:
                self.fragments.validate(target.document, parsed.fragment, config.error_level, source=current)
                href += f"#{parsed.fragment}"
        elif target.kind in _RESOURCE_KINDS:
            href = target.rel_link
        elif target.kind is TargetKind.SAME_PAGE_FRAGMENT:
            self.fragments.validate(current, parsed.fragment, config.error_level, source=current)
            href = f"{current.rel_permalink}#{parsed.fragment}"
        else:
            diagnostic = Diagnostic(
                DiagnosticKind.UNRESOLVED_DESTINATION,
                f'The "{HOOK_NAME}" render hook was unable to resolve the destination '
                f'"{dest.destination}" in {current.path}',
            )
            warned = apply_error_policy(diagnostic, config.error_level, self.sink)
            if warned and config.highlight_broken and is_development:
                css_class = CLASS_BROKEN

        title = str(escape(dest.title)) if dest.title else ""
        attributes = AnchorAttributes(href=href, rel=rel, css_class=css_class, title=title)
        return ResolvedLink(target=target, attributes=attributes, text=dest.text)

    def classify(self, context: LinkContext, parsed: ParsedURL) -> ResolvedTarget:
        """Classify a parsed destination without reporting anything."""
        if parsed.is_absolute:
            return ResolvedTarget(TargetKind.EXTERNAL)

        current = context.current
        if not parsed.path:
            if parsed.fragment:
                return ResolvedTarget(TargetKind.SAME_PAGE_FRAGMENT, document=current)
            return ResolvedTarget(TargetKind.UNRESOLVED)

        for kind, lookup in self.lookups:
            match = lookup(current, parsed.path)
            if match is not None:
                document = match if kind is TargetKind.PAGE else None
                return ResolvedTarget(kind, rel_link=match.rel_permalink, document=document)
        return ResolvedTarget(TargetKind.UNRESOLVED)

    # Lookups
    def _lookup_page(self, current: Document, path: str) -> LinkTarget | None:
        page = self.pages.get_page_by_path(path)
        if page is None and len(path) > 1 and path.endswith("/"):
            page = self.pages.get_page_by_path(path[:-1])
        return page

    def _lookup_page_resource(self, current: Document, path: str) -> LinkTarget | None:
        return current.resources.get_resource_by_path(path)

    def _lookup_section_resource(self, current: Document, path: str) -> LinkTarget | None:
        if current.bundle_type == BUNDLE_LEAF or current.section is None:
            return None
        return current.section.resources.get_resource_by_path(path)

    def _lookup_global_resource(self, current: Document, path: str) -> LinkTarget | None:
        return self.resources.get_resource_by_path(path)
