"""Map a document location to its built page path."""

from pathlib import PurePosixPath


def to_site_path(location: str) -> str:
    """Return ``/<parent-dir>/<stem>.html`` for a location like ``guides/intro.md``.

    Only the immediate parent directory is kept. Root-level locations map to ``/<stem>.html``.
    """
    path = PurePosixPath(location.replace("\\", "/"))
    parent = path.parent.name
    return f"/{parent}/{path.stem}.html" if parent else f"/{path.stem}.html"
