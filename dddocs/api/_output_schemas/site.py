"""Output schemas for site commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class SiteShowOutput(BaseOutputSchema):
    """Output schema for site show command."""

    site: dict[str, Any] = Field(..., description="Resolved site configuration, empty dict on error")


schema_registry.register_output_schema("site", "show", SiteShowOutput)
