"""markdown-it plugins that decorate every page."""

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore

from .decorate_tokens import add_footer, add_metadata


def add_metadata_plugin(md: MarkdownIt) -> None:
    def rule(state: StateCore) -> None:
        add_metadata(state.tokens)

    md.core.ruler.push("add-metadata", rule)


def add_footer_plugin(md: MarkdownIt) -> None:
    def rule(state: StateCore) -> None:
        add_footer(state.tokens)

    md.core.ruler.push("add-footer", rule)
