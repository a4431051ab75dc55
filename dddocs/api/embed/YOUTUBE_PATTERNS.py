"""Patterns for YouTube video and playlist URLs."""

import re

# watch?v=, embed/, v/ and youtu.be short links; video ids are 11 chars
YOUTUBE_VIDEO_PATTERN = re.compile(
    r"(?:https?://)?(?:www\.|m\.)?"
    r"(?:youtube\.com/(?:watch\?(?:\S*?&)?v=|embed/|v/)|youtu\.be/)"
    r"([\w-]{11})(?![\w-])",
    re.ASCII,
)

YOUTUBE_PLAYLIST_PATTERN = re.compile(
    r"(?:https?://)?(?:www\.|m\.)?youtube\.com/playlist\?(?:\S*?&)?list=([\w-]+)",
    re.ASCII,
)
