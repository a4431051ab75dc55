"""Resolve the full static site configuration."""

from collections.abc import Sequence
from typing import Any

from ..config.SiteConfig import SiteConfig
from ..document.DocumentRecord import DocumentRecord
from ..sidebar.generate_sidebar import generate_sidebar
from .build_head import build_head


def build_plugins(config: SiteConfig) -> list[list]:
    plugins: list[list] = []
    if config.site.ga:
        plugins.append(["google-analytics", {"ga": config.site.ga}])
    plugins.append(
        [
            "pwa",
            {
                "serviceWorker": config.pwa.service_worker,
                "updatePopup": config.pwa.update_popup,
            },
        ]
    )
    return plugins


def build_site_config(config: SiteConfig, documents: Sequence[DocumentRecord]) -> dict[str, Any]:
    """Return the site settings handed to the build: title, head, sidebar, plugins, output.

    Raises:
        ValueError: If the PWA manifest cannot be read
    """
    return {
        "title": config.site.title,
        "ga": config.site.ga,
        "dest": str(config.resolve_path(config.site.dest)),
        "evergreen": config.site.evergreen,
        "head": build_head(config),
        "theme_config": {"sidebar": [entry.to_entry() for entry in generate_sidebar(documents)]},
        "plugins": build_plugins(config),
    }
