"""Builders for the html_block tokens that stand in for site components."""

from markdown_it.token import Token

from ...templating import render_template
from ..embed.EmbedType import EmbedType

YOUTUBE_EMBED_TEMPLATE = '<youtube-embed id="{{ id | e }}" type="{{ type }}" />\n'

METADATA_TEMPLATE = (
    "<metadata"
    ' :id="page.frontmatter.doc_id"'
    ' :date="page.frontmatter.last_updated_date"'
    ' :isHomePage="page.frontmatter.home | boolean"'
    " />\n"
)

FOOTER_TEMPLATE = "<app-footer />\n"


def html_block(content: str) -> Token:
    """Return a block-level raw HTML token carrying content."""
    return Token("html_block", "", 0, content=content, block=True)


def youtube_embed_token(embed_id: str, embed_type: EmbedType) -> Token:
    return html_block(render_template(YOUTUBE_EMBED_TEMPLATE, {"id": embed_id, "type": embed_type.value}))


def metadata_token() -> Token:
    return html_block(METADATA_TEMPLATE)


def footer_token() -> Token:
    return html_block(FOOTER_TEMPLATE)
