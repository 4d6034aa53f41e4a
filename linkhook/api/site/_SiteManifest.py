"""Site manifest schema (private)."""

from __future__ import annotations

__all__ = ["_PageEntry", "_ResourceEntry", "_SiteManifest"]

from pydantic import BaseModel, ConfigDict, Field


class _ResourceEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str = Field(..., min_length=1, description="Lookup path of the resource")
    rel_permalink: str = Field(..., description="Deployment-aware relative link")


class _PageEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str = Field(..., min_length=1, description="Content path of the page, e.g. /docs/foo")
    rel_permalink: str = Field(..., description="Deployment-aware relative link, e.g. /docs/foo/")
    bundle_type: str = Field("", description="Bundle classification: leaf, branch or empty")
    section: str | None = Field(None, description="Path of the enclosing section page")
    headings: list[str] = Field(default_factory=list, description="Heading identifiers in document order")
    resources: list[_ResourceEntry] = Field(default_factory=list)


class _SiteManifest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pages: list[_PageEntry] = Field(default_factory=list)
    resources: list[_ResourceEntry] = Field(default_factory=list, description="Site-global resources")
