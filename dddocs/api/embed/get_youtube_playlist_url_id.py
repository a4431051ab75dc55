"""YouTube playlist id matcher (UNO: single function)."""

from .YOUTUBE_PATTERNS import YOUTUBE_PLAYLIST_PATTERN


def get_youtube_playlist_url_id(text: str | None) -> str | None:
    """Return the list id of the first YouTube playlist URL in text, or None."""
    if not text:
        return None
    match = YOUTUBE_PLAYLIST_PATTERN.search(text)
    return match.group(1) if match else None
