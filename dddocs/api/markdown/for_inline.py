"""Run a callback on inline tokens of one type (UNO: single function)."""

from collections.abc import Callable

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

InlineCallback = Callable[[list[Token], int], None]


def for_inline(md: MarkdownIt, rule_name: str, token_type: str, fn: InlineCallback) -> None:
    """Push a core rule calling ``fn(children, index)`` for every inline child of ``token_type``.

    Children are visited last to first so ``fn`` may replace ``children[index]``.
    """

    def scan(state: StateCore) -> None:
        for block_token in reversed(state.tokens):
            if block_token.type != "inline" or not block_token.children:
                continue
            children = block_token.children
            for index in range(len(children) - 1, -1, -1):
                if children[index].type == token_type:
                    fn(children, index)

    md.core.ruler.push(rule_name, scan)
