"""Unit tests for markdown cmd_render."""

from dddocs.api.markdown.cmd_render import cmd_render
from tests.unit.conftest import PAPER_INTRO_URL, run_cmd


def test_cmd_render(site_dir):
    page = site_dir / "guides" / "intro.md"
    page.parent.mkdir()
    page.write_text(
        "---\ndoc_id: abcdefghijklmnopqrstu\n---\n"
        f"Read [color theory]({PAPER_INTRO_URL}).\n\nhttps://youtu.be/dQw4w9WgXcQ\n",
        encoding="utf-8",
    )
    result = run_cmd(cmd_render, str(page))
    assert result.success is True
    assert result.output["frontmatter"] == {"doc_id": "abcdefghijklmnopqrstu"}
    html = result.output["html"]
    assert html.startswith('<metadata id="abcdefghijklmnopqrstu" isHomePage="false" />')
    assert 'href="/guides/intro.html"' in html
    assert '<youtube-embed id="dQw4w9WgXcQ" type="singleVideo" />' in html
    assert html.endswith("<app-footer />\n")


def test_cmd_render_respects_markdown_config(site_dir, minimal_config_dict):
    import json

    minimal_config_dict["markdown"] = {"youtube_embeds": False}
    (site_dir / "dddocs.json").write_text(json.dumps(minimal_config_dict), encoding="utf-8")
    page = site_dir / "page.md"
    page.write_text("https://youtu.be/dQw4w9WgXcQ\n", encoding="utf-8")
    result = run_cmd(cmd_render, str(page))
    assert result.success is True
    assert "youtube-embed" not in result.output["html"]
    assert "<p>https://youtu.be/dQw4w9WgXcQ</p>" in result.output["html"]
    assert result.output["html"].endswith("<app-footer />\n")


def test_cmd_render_missing_file(site_dir):
    result = run_cmd(cmd_render, str(site_dir / "missing.md"))
    assert result.success is False
    assert result.output["html"] == ""


def test_cmd_render_invalid_frontmatter(site_dir):
    page = site_dir / "broken.md"
    page.write_text("---\n- not a mapping\n---\nbody\n", encoding="utf-8")
    result = run_cmd(cmd_render, str(page))
    assert result.success is False
    assert "mapping" in result.output["errors"][0]
