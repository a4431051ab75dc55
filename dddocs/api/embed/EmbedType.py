"""Embed type enum."""

from enum import Enum


class EmbedType(str, Enum):
    SINGLE_VIDEO = "singleVideo"
    PLAYLIST = "playlist"
