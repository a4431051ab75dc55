"""Sidebar entry models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SidebarLink:
    """A single page in the sidebar."""

    path: str
    title: str

    def to_entry(self) -> list[str]:
        return [self.path, self.title]


@dataclass
class SidebarGroup:
    """A titled group of pages sharing a directory."""

    title: str
    children: list[SidebarLink] = field(default_factory=list)
    collapsable: bool = False

    def to_entry(self) -> dict:
        return {
            "title": self.title,
            "collapsable": self.collapsable,
            "children": [child.to_entry() for child in self.children],
        }
