"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class LinkResolveOutput(BaseOutputSchema):
    """Output schema for link resolve command."""

    href: str = Field(..., description="Link target that was resolved")
    doc_id: str = Field(..., description="Paper document id extracted from the link, empty string if none")
    resolved: bool = Field(..., description="Whether the link resolved to a site page")
    path: str = Field(..., description="Rewritten site path, empty string if unresolved")


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command."""

    path: str = Field(..., description="Markdown file that was checked")
    links: list[dict[str, Any]] = Field(..., description="Paper links found, with resolution status")
    resolved_count: int = Field(..., description="Number of Paper links that resolved")
    unresolved_count: int = Field(..., description="Number of Paper links that did not resolve")


schema_registry.register_output_schema("link", "resolve", LinkResolveOutput)
schema_registry.register_output_schema("link", "check", LinkCheckOutput)
