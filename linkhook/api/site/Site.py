"""In-memory page store loaded from a JSON site manifest."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from ._SiteManifest import _PageEntry, _SiteManifest
from .Document import Document
from .Resource import Resource
from .ResourceStore import ResourceStore

logger = logging.getLogger(__name__)


class Site:
    """Page store plus site-global resources.

    Pages are looked up by their exact path; callers that tolerate a trailing
    slash try both spellings.
    """

    def __init__(self, pages: Iterable[Document] = (), resources: ResourceStore | None = None):
        self._pages: dict[str, Document] = {}
        for page in pages:
            if page.path in self._pages:
                raise ValueError(f"Duplicate page path: {page.path}")
            self._pages[page.path] = page
        self.resources = resources if resources is not None else ResourceStore()

    def get_page_by_path(self, path: str) -> Document | None:
        return self._pages.get(path)

    def get_resource_by_path(self, path: str) -> Resource | None:
        return self.resources.get_resource_by_path(path)

    @property
    def pages(self) -> list[Document]:
        return list(self._pages.values())

    @classmethod
    def from_dict(cls, raw: dict) -> Site:
        """Build a site from a manifest dict.

        Raises:
            ValueError: If the manifest is malformed or references an unknown section
        """
        try:
            manifest = _SiteManifest(**raw)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(x) for x in first.get("loc", ()))
            raise ValueError(f"Invalid site manifest: {field}: {first.get('msg', str(e))}") from e

        entries: dict[str, _PageEntry] = {}
        for entry in manifest.pages:
            if entry.path in entries:
                raise ValueError(f"Duplicate page path: {entry.path}")
            entries[entry.path] = entry

        built: dict[str, Document] = {}

        def build(path: str, chain: tuple[str, ...]) -> Document:
            if path in built:
                return built[path]
            if path in chain:
                raise ValueError(f"Section cycle: {' -> '.join(chain + (path,))}")
            entry = entries[path]
            section = None
            if entry.section is not None:
                if entry.section not in entries:
                    raise ValueError(f"Page {entry.path} references unknown section {entry.section}")
                section = build(entry.section, chain + (path,))
            document = Document(
                path=entry.path,
                rel_permalink=entry.rel_permalink,
                bundle_type=entry.bundle_type,
                section=section,
                resources=ResourceStore(Resource(r.path, r.rel_permalink) for r in entry.resources),
                heading_ids=tuple(entry.headings),
            )
            built[path] = document
            return document

        for path in entries:
            build(path, ())

        global_resources = ResourceStore(Resource(r.path, r.rel_permalink) for r in manifest.resources)
        logger.debug("Loaded site with %d pages and %d global resources", len(built), len(global_resources))
        return cls(built.values(), global_resources)

    @classmethod
    def load(cls, path: Path) -> Site:
        """Load a site manifest from a JSON file.

        Raises:
            ValueError: If the file is missing, not valid JSON, or not a valid manifest
        """
        if not path.exists():
            raise ValueError(f"Site manifest not found at {path}")
        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in site manifest {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"Site manifest {path} must be a JSON object")
        return cls.from_dict(raw)
