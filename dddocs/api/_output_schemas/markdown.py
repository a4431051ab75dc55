"""Output schemas for markdown commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class MarkdownRenderOutput(BaseOutputSchema):
    """Output schema for page render command."""

    path: str = Field(..., description="Markdown file that was rendered")
    frontmatter: dict[str, Any] = Field(..., description="Parsed front matter, empty dict if none")
    html: str = Field(..., description="Rendered HTML, empty string on error")


schema_registry.register_output_schema("markdown", "render", MarkdownRenderOutput)
