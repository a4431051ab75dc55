"""Unit tests for link commands."""

from markdown_it import MarkdownIt

from dddocs.api.link.cmd_check import cmd_check
from dddocs.api.link.cmd_resolve import cmd_resolve
from dddocs.api.markdown.iter_link_targets import iter_link_targets
from tests.unit.conftest import PAPER_INTRO_URL, run_cmd

UNKNOWN_URL = "https://paper.dropbox.com/doc/Gone--AAAAAAAAAAAAAAAAAAAAAAAAAA-nonexistentdocumentid"


def test_cmd_resolve_known(site_dir):
    result = run_cmd(cmd_resolve, PAPER_INTRO_URL)
    assert result.success is True
    assert result.output["resolved"] is True
    assert result.output["path"] == "/guides/intro.html"
    assert result.output["doc_id"] == "abcdefghijklmnopqrstu"


def test_cmd_resolve_not_paper(site_dir):
    result = run_cmd(cmd_resolve, "https://example.com/not-dropbox")
    assert result.success is True
    assert result.output["resolved"] is False
    assert result.output["path"] == ""
    assert result.output["doc_id"] == ""
    assert "not a Paper document link" in result.output["warnings"][0]


def test_cmd_resolve_unknown_id(site_dir):
    result = run_cmd(cmd_resolve, UNKNOWN_URL)
    assert result.success is True
    assert result.output["resolved"] is False
    assert result.output["doc_id"] == "nonexistentdocumentid"


def test_cmd_resolve_without_config(tmp_path, monkeypatch):
    monkeypatch.setenv("DDDOCS_CONFIG", str(tmp_path / "missing.json"))
    result = run_cmd(cmd_resolve, PAPER_INTRO_URL)
    assert result.success is False
    assert result.output["errors"]


def test_cmd_check_reports_paper_links(site_dir):
    page = site_dir / "page.md"
    page.write_text(
        "---\n"
        "doc_id: abcdefghijklmnopqrstu\n"
        "---\n"
        "# Page\n"
        "\n"
        f"See [the intro]({PAPER_INTRO_URL}) and [example](https://example.com).\n"
        "\n"
        f"Also [a missing doc]({UNKNOWN_URL}).\n",
        encoding="utf-8",
    )
    result = run_cmd(cmd_check, str(page))
    assert result.success is True
    assert result.output["resolved_count"] == 1
    assert result.output["unresolved_count"] == 1
    first, second = result.output["links"]
    assert first["path"] == "/guides/intro.html"
    assert first["line_number"] == 6
    assert second["resolved"] is False
    assert second["line_number"] == 8
    assert result.output["warnings"] == ["Line 8: unknown document id nonexistentdocumentid"]


def test_cmd_check_missing_file(site_dir):
    result = run_cmd(cmd_check, str(site_dir / "nope.md"))
    assert result.success is False
    assert "File not found" in result.output["errors"][0]


def test_cmd_check_links_in_multi_line_paragraph(site_dir):
    page = site_dir / "page.md"
    page.write_text(
        "---\n"
        "doc_id: abcdefghijklmnopqrstu\n"
        "---\n"
        "First line of the paragraph\n"
        f"continues with [the intro]({PAPER_INTRO_URL})\n"
        f"and ends with [a missing doc]({UNKNOWN_URL}).\n",
        encoding="utf-8",
    )
    result = run_cmd(cmd_check, str(page))
    assert result.success is True
    assert [link["line_number"] for link in result.output["links"]] == [5, 6]
    assert result.output["warnings"] == ["Line 6: unknown document id nonexistentdocumentid"]


def test_iter_link_targets_counts_line_breaks():
    tokens = MarkdownIt("commonmark").parse("first line\nsecond [x](https://a)  \nthird [y](https://b)\n")
    assert list(iter_link_targets(tokens)) == [(2, "https://a"), (3, "https://b")]
