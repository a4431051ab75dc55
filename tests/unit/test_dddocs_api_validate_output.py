"""Unit tests for dddocs.api.validate_output."""

import pytest
from pydantic import BaseModel

from dddocs.api.link.cmd_resolve import cmd_resolve
from dddocs.api.schema_registry import schema_registry
from dddocs.api.validate_output import validate_output


class MockOutput(BaseModel):
    key: str
    optional: str = "default"


def mock_cmd_func():
    pass


mock_cmd_func.__module__ = "dddocs.api.test_domain"
mock_cmd_func.__name__ = "cmd_mock_command"


def test_validate_output_success(monkeypatch):
    monkeypatch.setattr(schema_registry, "get_output_schema", lambda d, c: MockOutput)
    assert validate_output(mock_cmd_func, {"key": "value"}) == {"key": "value", "optional": "default"}


def test_validate_output_failure(monkeypatch):
    monkeypatch.setattr(schema_registry, "get_output_schema", lambda d, c: MockOutput)
    with pytest.raises(ValueError, match="test_domain.mock_command does not match MockOutput"):
        validate_output(mock_cmd_func, {"wrong": "value"})


def test_validate_output_skip_non_api():
    def non_api_func():
        pass

    non_api_func.__module__ = "other.module"
    assert validate_output(non_api_func, {"foo": "bar"}) == {"foo": "bar"}


def test_validate_output_uses_registered_schema():
    validated = validate_output(cmd_resolve, {"href": "x", "doc_id": "", "resolved": False, "path": ""})
    assert validated["errors"] == []
    assert validated["warnings"] == []


@pytest.mark.parametrize(
    ("domain", "command"),
    [
        ("config", "show"),
        ("config", "version"),
        ("document", "find"),
        ("document", "list"),
        ("link", "resolve"),
        ("link", "check"),
        ("embed", "detect"),
        ("markdown", "render"),
        ("sidebar", "show"),
        ("site", "show"),
    ],
)
def test_every_command_has_a_schema(domain, command):
    assert schema_registry.get_output_schema(domain, command) is not None
