"""Extract a Paper document id from a link target."""

from .PAPER_URL_PATTERN import PAPER_URL_PATTERN


def match_paper_doc_id(href: str | None) -> str | None:
    """Return the 21-character document id embedded in a Paper URL, or None."""
    if not href:
        return None
    match = PAPER_URL_PATTERN.search(href)
    return match.group(1) if match else None
