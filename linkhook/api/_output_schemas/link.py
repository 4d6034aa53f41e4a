"""Output schemas for link commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkResolveOutput(BaseOutputSchema):
    """Output schema for link resolve command.

    On failure ``kind``, ``href`` and ``html`` are empty strings and ``attributes`` is empty.
    """

    destination: str = Field(..., description="Destination as written")
    page: str = Field(..., description="Path of the page the link is rendered in")
    kind: str = Field(..., description="Kind of target the destination resolved to")
    href: str = Field(..., description="Final href")
    attributes: dict[str, str] = Field(..., description="Anchor attributes with empty values omitted")
    html: str = Field(..., description="Rendered anchor element")


register_output_schema("link", "resolve", LinkResolveOutput)
