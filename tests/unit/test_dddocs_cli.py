"""CLI tests driven through typer's CliRunner."""

from typer.testing import CliRunner

from dddocs.cli import main
from dddocs.cli._create_app import _create_app
from dddocs.cli.embed import embed
from dddocs.cli.link import link
from tests.unit.conftest import PAPER_INTRO_URL

runner = CliRunner()


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("dddocs ")


def test_main_without_command_shows_help(capsys):
    assert main([]) == 0
    assert "Usage" in capsys.readouterr().out


def test_link_resolve_cli(site_dir):
    result = runner.invoke(_create_app(), ["--display", "json", "link", "resolve", PAPER_INTRO_URL])
    assert result.exit_code == 0
    assert '"path": "/guides/intro.html"' in result.stdout
    assert '"resolved": true' in result.stdout


def test_link_resolve_cli_unknown_id_warns(site_dir):
    url = "https://paper.dropbox.com/doc/My-Doc--AAAAAAAAAAAAAAAAAAAAAAAAAA-qqqqqqqqqqqqqqqqqqqqq"
    result = runner.invoke(link(), ["resolve", url])
    assert result.exit_code == 0
    assert "resolved: false" in result.stdout
    assert "unknown document id qqqqqqqqqqqqqqqqqqqqq" in result.stdout


def test_link_resolve_cli_without_config(tmp_path, monkeypatch):
    monkeypatch.setenv("DDDOCS_CONFIG", str(tmp_path / "missing.json"))
    result = runner.invoke(link(), ["resolve", PAPER_INTRO_URL])
    assert result.exit_code == 1


def test_embed_detect_cli_yaml():
    result = runner.invoke(embed(), ["detect", "https://youtu.be/dQw4w9WgXcQ"])
    assert result.exit_code == 0
    assert "type: singleVideo" in result.stdout
    assert "id: dQw4w9WgXcQ" in result.stdout


def test_page_render_cli(site_dir):
    page = site_dir / "page.md"
    page.write_text("# Hello\n", encoding="utf-8")
    result = runner.invoke(_create_app(), ["--display", "json", "page", "render", str(page)])
    assert result.exit_code == 0
    assert "<h1>Hello</h1>" in result.stdout
    assert "<app-footer />" in result.stdout


def test_sidebar_show_cli(site_dir):
    result = runner.invoke(_create_app(), ["sidebar", "show"])
    assert result.exit_code == 0
    assert "title: Guides" in result.stdout


def test_invalid_display_format():
    result = runner.invoke(_create_app(), ["--display", "xml", "sidebar", "show"])
    assert result.exit_code == 1
