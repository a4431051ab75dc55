"""Rewrite Paper links to site pages while rendering."""

from collections.abc import Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ...utils.logger import get_logger
from ..document.DocumentRecord import DocumentRecord
from ..link.resolve_internal_link import resolve_internal_link
from .for_inline import for_inline


def internal_link_plugin(md: MarkdownIt, documents: Sequence[DocumentRecord]) -> None:
    """Overwrite ``href`` on link_open tokens whose target resolves to a known document."""
    logger = get_logger("markdown")

    def rewrite(tokens: list[Token], index: int) -> None:
        token = tokens[index]
        href = token.attrGet("href")
        site_path = resolve_internal_link(href if isinstance(href, str) else None, documents)
        if site_path is None:
            return
        logger.debug("Rewrote %s -> %s", href, site_path)
        token.attrSet("href", site_path)

    for_inline(md, "internal-link", "link_open", rewrite)
