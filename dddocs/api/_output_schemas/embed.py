"""Output schemas for embed commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class EmbedDetectOutput(BaseOutputSchema):
    """Output schema for embed detect command."""

    text: str = Field(..., description="Text that was scanned")
    embeds: list[dict[str, str]] = Field(..., description="Detected embeds as {type, id}")


schema_registry.register_output_schema("embed", "detect", EmbedDetectOutput)
