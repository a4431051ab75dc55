"""Shared pytest configuration and fixtures for all tests."""

import json
import os
from pathlib import Path

import pytest

from dddocs.api.document.DocumentRecord import DocumentRecord

PAPER_INTRO_URL = "https://paper.dropbox.com/doc/My-Doc--AAAAAAAAAAAAAAAAAAAAAAAAAA-abcdefghijklmnopqrstu"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def meta_tree() -> list[dict]:
    """Document metadata as stored in meta-tree.json."""
    return [
        {"id": "abcdefghijklmnopqrstu", "location": "guides/intro", "title": "Introduction"},
        {"id": "ABCDEFGHIJKLMNOPQRSTU", "location": "guides/color-theory.md"},
        {"id": "zyxwvutsrqponmlkjihgf", "location": "design-patterns/cards.md", "title": "Cards"},
        {"id": "homehomehomehomehomeh", "location": "index.md", "title": "Home"},
    ]


def documents() -> list[DocumentRecord]:
    return [
        DocumentRecord(id=entry["id"], location=entry["location"], title=entry.get("title", ""))
        for entry in meta_tree()
    ]


def minimal_config_dict() -> dict:
    """Minimal valid site configuration dict for testing."""
    return {
        "site": {
            "title": "Digital Design Dictionary",
            "ga": "UA-55852885-5",
            "meta_tree": "meta-tree.json",
            "manifest": "public/manifest.json",
            "head": [
                {
                    "tag": "link",
                    "attrs": {"rel": "icon", "type": "image/png", "href": "/icons/favicon-32x32.png", "sizes": "32x32"},
                },
                {
                    "tag": "link",
                    "attrs": {"rel": "manifest", "href": "/manifest.json", "crossorigin": "use-credentials"},
                },
            ],
        },
        "pwa": {"service_worker": True, "update_popup": False},
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def dddocs_home(tmp_path_factory) -> Path:
    """Keep the log file out of the real home directory."""
    home = tmp_path_factory.mktemp("dddocs_home")
    os.environ["DDDOCS_HOME"] = str(home)
    return home


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    return minimal_config_dict()


@pytest.fixture(name="documents")
def documents_fixture() -> list[DocumentRecord]:
    return documents()


@pytest.fixture
def site_dir(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Write a docs tree with config, meta tree and manifest, and point DDDOCS_CONFIG at it."""
    (tmp_path / "meta-tree.json").write_text(json.dumps(meta_tree()), encoding="utf-8")
    (tmp_path / "public").mkdir()
    (tmp_path / "public" / "manifest.json").write_text(
        json.dumps({"name": "Digital Design Dictionary", "theme_color": "#1a1a1a"}), encoding="utf-8"
    )
    config_path = tmp_path / "dddocs.json"
    config_path.write_text(json.dumps(minimal_config_dict), encoding="utf-8")
    monkeypatch.setenv("DDDOCS_CONFIG", str(config_path))
    return tmp_path
