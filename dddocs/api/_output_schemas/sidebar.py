"""Output schemas for sidebar commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class SidebarShowOutput(BaseOutputSchema):
    """Output schema for sidebar show command."""

    sidebar: list[Any] = Field(..., description="Sidebar entries: groups and top-level links")


schema_registry.register_output_schema("sidebar", "show", SidebarShowOutput)
