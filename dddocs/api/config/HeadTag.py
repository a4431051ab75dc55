"""Head tag configuration."""

from pydantic import BaseModel, ConfigDict, Field


class HeadTag(BaseModel):
    """A single tag injected into every page's <head>."""

    model_config = ConfigDict(extra="forbid")

    tag: str = Field(..., min_length=1, description="Tag name, e.g. 'link' or 'meta'")
    attrs: dict[str, str] = Field(default_factory=dict, description="Tag attributes")

    def to_entry(self) -> list:
        """Return the tag in [tag, attrs] form."""
        return [self.tag, dict(self.attrs)]
