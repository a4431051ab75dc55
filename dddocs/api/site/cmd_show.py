"""Site show API command.

CLI: dddocs site show
"""

from collections.abc import Iterator

from ..document.load_site_documents import load_site_documents
from ..StageResult import StageResult
from .build_site_config import build_site_config


def cmd_show() -> StageResult:
    """Show the resolved static site configuration."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config, documents, failure = load_site_documents({"site": {}})
        if config is None:
            yield (1.0, "Complete")
            result_obj.result = "Failed to load site configuration"
            result_obj.output = failure or {}
            result_obj.success = False
            return

        yield (0.7, "Resolving head tags and sidebar...")
        try:
            site = build_site_config(config, documents)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = "Failed to resolve site configuration"
            result_obj.output = {"errors": [str(e)], "warnings": [], "site": {}}
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Resolved configuration for '{site['title']}'"
        result_obj.output = {"errors": [], "warnings": [], "site": site}
        result_obj.success = True

    return StageResult(announce="Resolving site configuration...", progress_callback=do_work)
