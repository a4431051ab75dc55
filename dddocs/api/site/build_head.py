"""Assemble the <head> tags for every page."""

import json
from pathlib import Path

from ..config.SiteConfig import SiteConfig


def read_theme_color(manifest_path: Path) -> str | None:
    """Return ``theme_color`` from a PWA manifest, or None if it has none.

    Raises:
        ValueError: If the manifest is missing or not valid JSON
    """
    if not manifest_path.exists():
        raise ValueError(f"PWA manifest not found at {manifest_path}")
    try:
        with manifest_path.open(encoding="utf-8") as fh:
            manifest = json.load(fh)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in PWA manifest {manifest_path}: {e}") from e
    theme_color = manifest.get("theme_color") if isinstance(manifest, dict) else None
    return theme_color if isinstance(theme_color, str) else None


def build_head(config: SiteConfig) -> list[list]:
    """Configured head tags followed by the manifest's theme-color meta tag."""
    head = [tag.to_entry() for tag in config.site.head]
    if config.site.manifest:
        theme_color = read_theme_color(config.resolve_path(config.site.manifest))
        if theme_color is not None:
            head.append(["meta", {"name": "theme-color", "content": theme_color}])
    return head
