"""Markdown rendering configuration."""

from pydantic import BaseModel, ConfigDict, Field


class MarkdownConfig(BaseModel):
    """Options for the markdown-it renderer and the site's extensions."""

    model_config = ConfigDict(extra="forbid")

    html: bool = Field(True, description="Allow raw HTML in markdown sources")
    typographer: bool = Field(False, description="Enable typographic replacements")
    internal_links: bool = Field(True, description="Rewrite Paper links to site pages")
    youtube_embeds: bool = Field(True, description="Replace YouTube links with embed markers")
