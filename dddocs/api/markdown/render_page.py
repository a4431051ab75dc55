"""Render one markdown page (UNO: single function)."""

from typing import Any

from markdown_it import MarkdownIt

from .split_frontmatter import split_frontmatter


def render_page(text: str, md: MarkdownIt, path: str = "") -> tuple[dict[str, Any], str]:
    """Render a page body with its front matter exposed to bindings as ``page.frontmatter``.

    Raises:
        ValueError: If the front matter is invalid
    """
    frontmatter, body = split_frontmatter(text)
    env: dict[str, Any] = {"page": {"frontmatter": frontmatter, "path": path}}
    return frontmatter, md.render(body, env)
