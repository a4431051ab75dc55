"""Rewrite Paper links to internal site paths."""

from collections.abc import Iterable

from ..document.DocumentRecord import DocumentRecord
from ..document.find_document import find_document
from .match_paper_doc_id import match_paper_doc_id
from .to_site_path import to_site_path


def resolve_internal_link(href: str | None, documents: Iterable[DocumentRecord]) -> str | None:
    """Resolve a Paper URL to the site page of the document it points at.

    Returns None when the href is not a Paper URL or names an unknown document.
    Already rewritten site paths never match, so resolving twice is a no-op.
    """
    doc_id = match_paper_doc_id(href)
    if doc_id is None:
        return None
    document = find_document(doc_id, documents)
    if document is None:
        return None
    return to_site_path(document.location)
