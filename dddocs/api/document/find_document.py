"""Document lookup by id (UNO: single function)."""

from collections.abc import Iterable

from .DocumentRecord import DocumentRecord


def find_document(doc_id: str, documents: Iterable[DocumentRecord]) -> DocumentRecord | None:
    """Return the first record whose id equals doc_id, or None.

    Ids are compared exactly. Duplicate ids are not rejected; the first one wins.
    """
    for document in documents:
        if document.id == doc_id:
            return document
    return None
