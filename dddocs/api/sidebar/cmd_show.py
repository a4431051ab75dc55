"""Sidebar show API command.

CLI: dddocs sidebar show
"""

from collections.abc import Iterator

from ..document.load_site_documents import load_site_documents
from ..StageResult import StageResult
from .generate_sidebar import generate_sidebar


def cmd_show() -> StageResult:
    """Show the sidebar generated from the metadata tree."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading document metadata...")
        config, documents, failure = load_site_documents({"sidebar": []})
        if config is None:
            yield (1.0, "Complete")
            result_obj.result = "Failed to load document metadata"
            result_obj.output = failure or {}
            result_obj.success = False
            return

        yield (0.7, "Generating sidebar...")
        sidebar = [entry.to_entry() for entry in generate_sidebar(documents)]

        yield (1.0, "Complete")
        result_obj.result = f"Generated {len(sidebar)} sidebar entr{'y' if len(sidebar) == 1 else 'ies'}"
        result_obj.output = {"errors": [], "warnings": [], "sidebar": sidebar}
        result_obj.success = True

    return StageResult(announce="Generating sidebar...", progress_callback=do_work)
