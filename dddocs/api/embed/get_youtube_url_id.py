"""YouTube video id matcher (UNO: single function)."""

from .YOUTUBE_PATTERNS import YOUTUBE_VIDEO_PATTERN


def get_youtube_url_id(text: str | None) -> str | None:
    """Return the id of the first YouTube video URL in text, or None."""
    if not text:
        return None
    match = YOUTUBE_VIDEO_PATTERN.search(text)
    return match.group(1) if match else None
