"""Link resolve API command."""

from collections.abc import Iterator
from pathlib import Path

from ..config.ConfigurationError import ConfigurationError
from ..config.is_development_environment import is_development_environment
from ..config.LinkConfig import LinkConfig
from ..config.LinkhookConfig import LinkhookConfig
from ..site.Site import Site
from ..StageResult import StageResult
from .._output_schemas.link import LinkResolveOutput
from .CollectingDiagnosticSink import CollectingDiagnosticSink
from .DestinationResolver import DestinationResolver
from .FatalRenderError import FatalRenderError
from .LinkContext import LinkContext
from .LoggingDiagnosticSink import LoggingDiagnosticSink
from .RawDestination import RawDestination
from .render_anchor import render_anchor


def cmd_resolve(
    destination: str,
    site: str,
    page: str,
    inner: str | None = None,
    text: str = "",
    title: str = "",
    error_level: str | None = None,
    highlight_broken: bool | None = None,
    development: bool | None = None,
) -> StageResult:
    """Resolve one link destination against a site manifest.

    Args:
        destination: Destination as written in the document
        site: Path to the JSON site manifest
        page: Path of the page being rendered
        inner: Path of the page whose content holds the link, if different
        text: Link text
        title: Link title
        error_level: Overrides link.error_level from the configuration
        highlight_broken: Overrides link.highlight_broken from the configuration
        development: Overrides the LINKHOOK_ENVIRONMENT predicate
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        def fail(message: str, errors: list[str], warnings: list[str] | None = None) -> None:
            result_obj.output = LinkResolveOutput(
                errors=errors,
                warnings=warnings or [],
                destination=destination,
                page=page,
                kind="",
                href="",
                attributes={},
                html="",
            ).model_dump(mode="python")
            result_obj.result = message
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            # Without a config file the link defaults apply; an invalid file still fails
            if LinkhookConfig.get_config_path().exists():
                link_config = LinkhookConfig.load().link
            else:
                link_config = LinkConfig()
            overrides: dict[str, object] = {}
            if error_level is not None:
                overrides["error_level"] = error_level
            if highlight_broken is not None:
                overrides["highlight_broken"] = highlight_broken
            if overrides:
                link_config = LinkConfig.from_config_dict({"link": {**link_config.model_dump(), **overrides}})
        except ConfigurationError as e:
            fail(f"Configuration error: {e}", [str(e)])
            return
        is_development = development if development is not None else is_development_environment()

        yield (0.3, "Loading site manifest...")
        try:
            site_obj = Site.load(Path(site).expanduser())
        except ValueError as e:
            fail(f"Cannot load site: {e}", [str(e)])
            return

        page_doc = site_obj.get_page_by_path(page)
        inner_doc = site_obj.get_page_by_path(inner) if inner else None
        missing = [p for p, doc in ((page, page_doc), (inner, inner_doc)) if p and doc is None]
        if missing:
            fail(f"Page not found: {missing[0]}", [f"Page not found in site: {p}" for p in missing])
            return

        yield (0.6, "Resolving destination...")
        sink = CollectingDiagnosticSink(forward=LoggingDiagnosticSink())
        resolver = DestinationResolver(site_obj, site_obj.resources, sink)
        context = LinkContext(page=page_doc, inner=inner_doc)
        try:
            resolved = resolver.resolve_link(
                context,
                RawDestination(destination=destination, text=text, title=title),
                link_config,
                is_development,
            )
        except FatalRenderError as e:
            fail(
                f"Rendering aborted: {e}",
                [str(d) for d in sink.errors],
                [str(d) for d in sink.warnings],
            )
            return
        attributes = resolved.attributes

        yield (1.0, "Complete")
        kind = resolved.target.kind.value
        result_obj.output = LinkResolveOutput(
            errors=[],
            warnings=[str(d) for d in sink.warnings],
            destination=destination,
            page=page,
            kind=kind,
            href=attributes.href,
            attributes=attributes.to_dict(),
            html=render_anchor(attributes, resolved.text or destination),
        ).model_dump(mode="python")
        if resolved.target.resolved:
            result_obj.result = f"Resolved {destination!r} to {attributes.href!r} ({kind})"
        else:
            result_obj.result = f"Left {destination!r} unresolved"
        result_obj.success = True

    return StageResult(announce=f"Resolving {destination!r} in {page}...", progress_callback=do_work)
