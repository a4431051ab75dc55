"""Generate sidebar navigation from document records."""

from collections.abc import Iterable
from pathlib import PurePosixPath

from ..document.DocumentRecord import DocumentRecord
from ..link.to_site_path import to_site_path
from .SidebarGroup import SidebarGroup, SidebarLink


def _group_title(directory: str) -> str:
    title = directory.replace("-", " ").replace("_", " ").strip()
    return title[:1].upper() + title[1:]


def generate_sidebar(documents: Iterable[DocumentRecord]) -> list[SidebarGroup | SidebarLink]:
    """Group documents by their immediate parent directory.

    Groups appear in the order their first document appears. Documents at the
    root of the tree become top-level links.
    """
    entries: list[SidebarGroup | SidebarLink] = []
    groups: dict[str, SidebarGroup] = {}

    for document in documents:
        location = PurePosixPath(document.location.replace("\\", "/"))
        link = SidebarLink(path=to_site_path(document.location), title=document.title or location.stem)
        directory = location.parent.name
        if not directory:
            entries.append(link)
            continue
        group = groups.get(directory)
        if group is None:
            group = groups[directory] = SidebarGroup(title=_group_title(directory))
            entries.append(group)
        group.children.append(link)

    return entries
