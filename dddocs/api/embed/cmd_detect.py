"""Embed detect API command.

CLI: dddocs embed detect <text>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .EmbedType import EmbedType
from .get_youtube_playlist_url_id import get_youtube_playlist_url_id
from .get_youtube_url_id import get_youtube_url_id


def cmd_detect(text: str) -> StageResult:
    """Report the YouTube embeds each matcher finds in text."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Matching video and playlist URLs...")
        embeds: list[dict[str, str]] = []
        video_id = get_youtube_url_id(text)
        if video_id is not None:
            embeds.append({"type": EmbedType.SINGLE_VIDEO.value, "id": video_id})
        playlist_id = get_youtube_playlist_url_id(text)
        if playlist_id is not None:
            embeds.append({"type": EmbedType.PLAYLIST.value, "id": playlist_id})

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(embeds)} embed(s)"
        result_obj.output = {"errors": [], "warnings": [], "text": text, "embeds": embeds}
        result_obj.success = True

    return StageResult(announce="Detecting embeds...", progress_callback=do_work)
