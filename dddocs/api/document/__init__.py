"""Document API domain."""

from .._output_schemas.document import DocumentFindOutput, DocumentListOutput
from .DocumentRecord import DocumentRecord
from .find_document import find_document
from .load_documents import load_documents

__all__ = [
    "DocumentFindOutput",
    "DocumentListOutput",
    "DocumentRecord",
    "find_document",
    "load_documents",
]
