"""Unit tests for dddocs.api.document.find_document."""

from dddocs.api.document.DocumentRecord import DocumentRecord
from dddocs.api.document.find_document import find_document


def test_find_document_returns_matching_record(documents):
    found = find_document("zyxwvutsrqponmlkjihgf", documents)
    assert found == DocumentRecord(id="zyxwvutsrqponmlkjihgf", location="design-patterns/cards.md", title="Cards")


def test_find_document_absent_returns_none(documents):
    assert find_document("nonexistentdocumentid", documents) is None


def test_find_document_is_case_sensitive(documents):
    assert find_document("ABCDEFGHIJKLMNOPQRSTu", documents) is None
    assert find_document("abcdefghijklmnopqrstu".upper(), documents).location == "guides/color-theory.md"


def test_find_document_first_match_wins():
    first = DocumentRecord(id="dup", location="a/first")
    second = DocumentRecord(id="dup", location="b/second")
    assert find_document("dup", [first, second]) is first


def test_find_document_empty_collection():
    assert find_document("anything", []) is None


def test_find_document_accepts_any_iterable(documents):
    assert find_document("homehomehomehomehomeh", iter(documents)).title == "Home"
