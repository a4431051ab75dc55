"""Document find API command.

CLI: dddocs document find <id>
"""

from collections.abc import Iterator
from dataclasses import asdict

from ..StageResult import StageResult
from .find_document import find_document
from .load_site_documents import load_site_documents


def cmd_find(doc_id: str) -> StageResult:
    """Find a document record by its Paper id."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading document metadata...")
        _, documents, failure = load_site_documents({"id": doc_id, "found": False, "document": {}})
        if failure is not None:
            yield (1.0, "Complete")
            result_obj.result = "Failed to load document metadata"
            result_obj.output = failure
            result_obj.success = False
            return

        yield (0.6, f"Searching {len(documents)} documents...")
        document = find_document(doc_id, documents)

        yield (1.0, "Complete")
        if document is None:
            result_obj.result = f"No document with id {doc_id}"
            result_obj.output = {
                "errors": [f"Document not found: {doc_id}"],
                "warnings": [],
                "id": doc_id,
                "found": False,
                "document": {},
            }
            result_obj.success = False
            return

        result_obj.result = f"Found document at {document.location}"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "id": doc_id,
            "found": True,
            "document": asdict(document),
        }
        result_obj.success = True

    return StageResult(announce=f"Finding document {doc_id}...", progress_callback=do_work)
