"""Unit tests for Paper link resolution."""

import pytest

from dddocs.api.link.match_paper_doc_id import match_paper_doc_id
from dddocs.api.link.resolve_internal_link import resolve_internal_link
from dddocs.api.link.to_site_path import to_site_path
from tests.unit.conftest import PAPER_INTRO_URL


def test_resolve_known_document(documents):
    assert resolve_internal_link(PAPER_INTRO_URL, documents) == "/guides/intro.html"


def test_resolve_uses_location_stem(documents):
    href = "https://paper.dropbox.com/doc/Cards--BBBBBBBBBBBBBBBBBBBBBBBBBB-zyxwvutsrqponmlkjihgf"
    assert resolve_internal_link(href, documents) == "/design-patterns/cards.html"


def test_resolve_non_paper_url(documents):
    assert resolve_internal_link("https://example.com/not-dropbox", documents) is None


def test_resolve_unknown_document_id(documents):
    href = "https://paper.dropbox.com/doc/Gone--AAAAAAAAAAAAAAAAAAAAAAAAAA-nonexistentdocumentid"
    assert resolve_internal_link(href, documents) is None


def test_resolve_is_noop_on_rewritten_path(documents):
    rewritten = resolve_internal_link(PAPER_INTRO_URL, documents)
    assert resolve_internal_link(rewritten, documents) is None


@pytest.mark.parametrize("href", [None, "", "#anchor", "/guides/intro.html", "paper.dropbox.com/doc/"])
def test_resolve_never_raises_on_odd_input(documents, href):
    assert resolve_internal_link(href, documents) is None


def test_match_paper_doc_id_extracts_id():
    assert match_paper_doc_id(PAPER_INTRO_URL) == "abcdefghijklmnopqrstu"


def test_match_paper_doc_id_title_with_dashes():
    href = "https://paper.dropbox.com/doc/Color--Theory--Basics--AAAAAAAAAAAAAAAAAAAAAAAAAA-abcdefghijklmnopqrstu"
    assert match_paper_doc_id(href) == "abcdefghijklmnopqrstu"


def test_match_paper_doc_id_requires_token_length():
    href = "https://paper.dropbox.com/doc/My-Doc--SHORT-abcdefghijklmnopqrstu"
    assert match_paper_doc_id(href) is None


def test_match_paper_doc_id_requires_full_id():
    href = "https://paper.dropbox.com/doc/My-Doc--AAAAAAAAAAAAAAAAAAAAAAAAAA-abcdef"
    assert match_paper_doc_id(href) is None


@pytest.mark.parametrize(
    ("location", "expected"),
    [
        ("guides/intro", "/guides/intro.html"),
        ("guides/intro.md", "/guides/intro.html"),
        ("docs/guides/intro.md", "/guides/intro.html"),
        ("guides\\intro.md", "/guides/intro.html"),
        ("index.md", "/index.html"),
        ("docs/v1.0/x.md", "/v1.0/x.html"),
    ],
)
def test_to_site_path(location, expected):
    assert to_site_path(location) == expected
