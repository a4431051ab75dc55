"""Check a command's output against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from . import _output_schemas  # noqa: F401
from .schema_registry import schema_registry


def _schema_key(func: Callable) -> tuple[str, str] | None:
    """Return (domain, command) for ``dddocs.api.<domain>...cmd_<command>``, else None."""
    parts = func.__module__.split(".")
    if len(parts) < 3 or parts[:2] != ["dddocs", "api"] or not func.__name__.startswith("cmd_"):
        return None
    return parts[2], func.__name__.removeprefix("cmd_")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Return output with schema defaults filled in.

    Functions outside ``dddocs.api`` and commands without a schema pass through unchanged.

    Raises:
        ValueError: If output does not match the command's schema
    """
    key = _schema_key(func)
    schema_class = schema_registry.get_output_schema(*key) if key else None
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        domain, command = key
        raise ValueError(f"Output of {domain}.{command} does not match {schema_class.__name__}: {e}") from e
