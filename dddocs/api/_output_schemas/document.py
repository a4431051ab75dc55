"""Output schemas for document commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class DocumentFindOutput(BaseOutputSchema):
    """Output schema for document find command."""

    id: str = Field(..., description="Document id that was searched for")
    found: bool = Field(..., description="Whether a document with that id exists")
    document: dict[str, Any] = Field(..., description="The matching record, empty dict if not found")


class DocumentListOutput(BaseOutputSchema):
    """Output schema for document list command."""

    meta_tree: str = Field(..., description="Path to the metadata file the documents were read from")
    count: int = Field(..., description="Number of documents")
    documents: list[dict[str, Any]] = Field(..., description="Document records in file order")


schema_registry.register_output_schema("document", "find", DocumentFindOutput)
schema_registry.register_output_schema("document", "list", DocumentListOutput)
