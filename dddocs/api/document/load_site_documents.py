"""Load the site config and its document records together."""

from typing import Any

from ..config.load_config_with_output import load_config_with_output
from ..config.SiteConfig import SiteConfig
from .DocumentRecord import DocumentRecord
from .load_documents import load_documents


def load_site_documents(
    error_output: dict[str, Any],
) -> tuple[SiteConfig | None, list[DocumentRecord], dict[str, Any] | None]:
    """Load SiteConfig and the documents of its meta tree.

    Returns:
        (config, documents, None) on success; (None, [], output_dict) on failure
    """
    config, failure = load_config_with_output(error_output)
    if config is None:
        return None, [], failure

    try:
        documents = load_documents(config.resolve_path(config.site.meta_tree))
    except ValueError as e:
        return None, [], {"errors": [str(e)], "warnings": [], **error_output}
    return config, documents, None
