"""Link resolve API command.

CLI: dddocs link resolve <href>
"""

from collections.abc import Iterator

from ..document.load_site_documents import load_site_documents
from ..StageResult import StageResult
from .match_paper_doc_id import match_paper_doc_id
from .resolve_internal_link import resolve_internal_link


def cmd_resolve(href: str) -> StageResult:
    """Resolve a Paper link to its internal site path."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        doc_id = match_paper_doc_id(href) or ""
        empty = {"href": href, "doc_id": doc_id, "resolved": False, "path": ""}

        yield (0.3, "Loading document metadata...")
        _, documents, failure = load_site_documents(empty)
        if failure is not None:
            yield (1.0, "Complete")
            result_obj.result = "Failed to load document metadata"
            result_obj.output = failure
            result_obj.success = False
            return

        yield (0.7, "Resolving link...")
        path = resolve_internal_link(href, documents)

        yield (1.0, "Complete")
        if path is None:
            reason = "not a Paper document link" if not doc_id else f"unknown document id {doc_id}"
            result_obj.result = f"Link left unchanged: {reason}"
            result_obj.output = {"errors": [], "warnings": [f"Unresolved link: {reason}"], **empty}
        else:
            result_obj.result = f"Resolved to {path}"
            result_obj.output = {"errors": [], "warnings": [], **empty, "resolved": True, "path": path}
        result_obj.success = True

    return StageResult(announce=f"Resolving {href}...", progress_callback=do_work)
