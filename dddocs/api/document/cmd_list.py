"""Document list API command.

CLI: dddocs document list
"""

from collections.abc import Iterator
from dataclasses import asdict

from ..StageResult import StageResult
from .load_site_documents import load_site_documents


def cmd_list() -> StageResult:
    """List every document record in the metadata tree."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading document metadata...")
        config, documents, failure = load_site_documents({"meta_tree": "", "count": 0, "documents": []})
        if config is None:
            yield (1.0, "Complete")
            result_obj.result = "Failed to load document metadata"
            result_obj.output = failure or {}
            result_obj.success = False
            return

        ids = [document.id for document in documents]
        duplicates = sorted({doc_id for doc_id in ids if ids.count(doc_id) > 1})

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(documents)} document(s)"
        result_obj.output = {
            "errors": [],
            "warnings": [f"Duplicate document id: {doc_id}" for doc_id in duplicates],
            "meta_tree": str(config.resolve_path(config.site.meta_tree)),
            "count": len(documents),
            "documents": [asdict(document) for document in documents],
        }
        result_obj.success = True

    return StageResult(announce="Listing documents...", progress_callback=do_work)
