"""Yield link targets from a parsed token stream."""

from collections.abc import Iterator

from markdown_it.token import Token

_LINE_BREAKS = ("softbreak", "hardbreak")


def iter_link_targets(tokens: list[Token]) -> Iterator[tuple[int, str]]:
    """Yield (1-based line number, href) for each link in document order.

    Line numbers are relative to the parsed text. Inside a paragraph, each
    soft or hard break before a link moves it down one line.
    """
    for block_token in tokens:
        if block_token.type != "inline" or not block_token.children:
            continue
        line_number = block_token.map[0] + 1 if block_token.map else 0
        for child in block_token.children:
            if child.type in _LINE_BREAKS:
                line_number += 1
                continue
            if child.type != "link_open":
                continue
            href = child.attrGet("href")
            if isinstance(href, str):
                yield line_number, href
