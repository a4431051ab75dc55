"""The ``component`` stage: resolve ``:name="expression"`` bindings on component markers."""

import html
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from jinja2 import TemplateError
from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from ...templating import compile_binding
from ...utils.logger import get_logger

BINDING_PATTERN = re.compile(r'\s+:([A-Za-z_][\w-]*)="([^"]*)"')


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def resolve_bindings(content: str, env: Mapping[str, Any]) -> str:
    """Replace each binding in content with a plain attribute evaluated against env.

    Bindings that evaluate to None are dropped. Bindings that fail to evaluate
    are logged and left as written.
    """
    logger = get_logger("markdown")

    def substitute(match: re.Match) -> str:
        name, expression = match.group(1), html.unescape(match.group(2))
        try:
            value = compile_binding(expression)(**env)
        except TemplateError as e:
            logger.warning("Cannot evaluate binding :%s=%r: %s", name, expression, e)
            return match.group(0)
        if value is None:
            return ""
        return f' {name}="{html.escape(_format_value(value), quote=True)}"'

    return BINDING_PATTERN.sub(substitute, content)


def _resolve_token(token: Token, env: Mapping[str, Any]) -> None:
    if token.type in ("html_block", "html_inline") and token.content.lstrip().startswith("<"):
        token.content = resolve_bindings(token.content, env)


def component_plugin(md: MarkdownIt) -> None:
    def rule(state: StateCore) -> None:
        for token in state.tokens:
            _resolve_token(token, state.env)
            for child in token.children or []:
                _resolve_token(child, state.env)

    md.core.ruler.push("component", rule)
