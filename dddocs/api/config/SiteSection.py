"""Site section of the configuration."""

from pydantic import BaseModel, ConfigDict, Field

from .HeadTag import HeadTag


class SiteSection(BaseModel):
    """Static site settings."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, description="Site title")
    ga: str = Field("", description="Google Analytics tracking id, empty to disable")
    dest: str = Field("./dist", description="Build output directory")
    evergreen: bool = Field(True, description="Target evergreen browsers only")
    meta_tree: str = Field(..., min_length=1, description="Path to the document metadata file")
    manifest: str = Field("", description="Path to the PWA manifest, empty if none")
    head: list[HeadTag] = Field(default_factory=list, description="Extra <head> tags")
