"""Unit tests for front matter splitting."""

import datetime

import pytest

from dddocs.api.markdown.split_frontmatter import split_frontmatter


def test_split_frontmatter():
    frontmatter, body = split_frontmatter("---\ndoc_id: abc\nlast_updated_date: 2020-01-02\n---\n# Title\n")
    assert frontmatter == {"doc_id": "abc", "last_updated_date": datetime.date(2020, 1, 2)}
    assert body == "# Title\n"


def test_split_frontmatter_none():
    assert split_frontmatter("# Title\n---\n") == ({}, "# Title\n---\n")


def test_split_frontmatter_empty_mapping():
    assert split_frontmatter("---\n\n---\nbody") == ({}, "body")


def test_split_frontmatter_invalid_yaml():
    with pytest.raises(ValueError, match="Invalid YAML"):
        split_frontmatter("---\nkey: [unclosed\n---\nbody")


def test_split_frontmatter_not_mapping():
    with pytest.raises(ValueError, match="mapping"):
        split_frontmatter("---\n- a\n- b\n---\nbody")
