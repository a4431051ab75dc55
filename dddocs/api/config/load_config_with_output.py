"""Shared helper to load the site configuration with standard error output."""

from typing import Any

from ...utils.logger import configure_logging
from .SiteConfig import SiteConfig


def load_config_with_output(error_output: dict[str, Any]) -> tuple[SiteConfig | None, dict[str, Any] | None]:
    """Load SiteConfig; on load error return the caller's output with the error recorded.

    Args:
        error_output: Schema-conformant output fields to report when loading fails

    Returns:
        (config, None) on success; (None, output_dict) on failure
    """
    try:
        config = SiteConfig.load()
    except ValueError as e:
        return None, {"errors": [str(e)], "warnings": [], **error_output}
    configure_logging(level=config.log.level, max_bytes=config.log.max_bytes, backup_count=config.log.backup_count)
    return config, None
