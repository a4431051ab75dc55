"""Embed API domain."""

from .._output_schemas.embed import EmbedDetectOutput
from .EmbedType import EmbedType
from .get_youtube_playlist_url_id import get_youtube_playlist_url_id
from .get_youtube_url_id import get_youtube_url_id

__all__ = [
    "EmbedDetectOutput",
    "EmbedType",
    "get_youtube_playlist_url_id",
    "get_youtube_url_id",
]
