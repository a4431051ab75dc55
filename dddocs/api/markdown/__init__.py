"""Markdown rendering API domain."""

from .._output_schemas.markdown import MarkdownRenderOutput
from .create_markdown import create_markdown
from .decorate_tokens import add_footer, add_metadata
from .for_inline import for_inline
from .PluginChain import PluginChain
from .render_page import render_page

__all__ = [
    "MarkdownRenderOutput",
    "PluginChain",
    "add_footer",
    "add_metadata",
    "create_markdown",
    "for_inline",
    "render_page",
]
