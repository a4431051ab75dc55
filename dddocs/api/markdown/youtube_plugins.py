"""Replace text spans holding YouTube URLs with embed markers."""

from collections.abc import Callable

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ..embed.EmbedType import EmbedType
from ..embed.get_youtube_playlist_url_id import get_youtube_playlist_url_id
from ..embed.get_youtube_url_id import get_youtube_url_id
from .component_markers import youtube_embed_token
from .for_inline import for_inline


def _embed_replacer(matcher: Callable[[str], str | None], embed_type: EmbedType) -> Callable[[list[Token], int], None]:
    def replace(tokens: list[Token], index: int) -> None:
        embed_id = matcher(tokens[index].content)
        if embed_id is not None:
            tokens[index] = youtube_embed_token(embed_id, embed_type)

    return replace


def youtube_link_plugin(md: MarkdownIt) -> None:
    for_inline(md, "youtube-link", "text", _embed_replacer(get_youtube_url_id, EmbedType.SINGLE_VIDEO))


def youtube_playlist_link_plugin(md: MarkdownIt) -> None:
    for_inline(md, "youtube-playlist-link", "text", _embed_replacer(get_youtube_playlist_url_id, EmbedType.PLAYLIST))
