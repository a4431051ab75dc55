"""Thin wrapper around Jinja2 for component markers and their bindings."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable, Dict

from jinja2 import BaseLoader, ChainableUndefined, Environment, StrictUndefined
from jinja2.sandbox import ImmutableSandboxedEnvironment

_ENV = Environment(
    loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True, undefined=StrictUndefined
)

# Bindings come from page content: sandboxed, read-only, missing values evaluate to None.
_EXPRESSION_ENV = ImmutableSandboxedEnvironment(loader=BaseLoader(), undefined=ChainableUndefined)
_EXPRESSION_ENV.filters["boolean"] = bool


def render_template(template: str, context: Dict[str, Any]) -> str:
    tmpl = _ENV.from_string(template)
    return tmpl.render(**context)


@lru_cache(maxsize=128)
def compile_binding(expression: str) -> Callable[..., Any]:
    """Compile a binding expression such as ``page.frontmatter.home | boolean``.

    Raises:
        jinja2.TemplateSyntaxError: If the expression does not parse

    Calling the result raises jinja2.sandbox.SecurityError for unsafe attribute access.
    """
    return _EXPRESSION_ENV.compile_expression(expression, undefined_to_none=True)
