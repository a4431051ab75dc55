"""Load the document metadata tree (UNO: single function)."""

import json
from pathlib import Path

from ...utils.logger import get_logger
from .DocumentRecord import DocumentRecord


def load_documents(path: Path) -> list[DocumentRecord]:
    """Read document records from a meta-tree JSON file.

    The file holds a JSON array of objects with string ``id`` and ``location``
    keys and an optional ``title``. Other keys are ignored.

    Raises:
        ValueError: If the file is missing, not JSON, or has malformed entries
    """
    if not path.exists():
        raise ValueError(f"Document metadata file not found at {path}")

    try:
        with path.open(encoding="utf-8") as fh:
            raw = json.load(fh)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in document metadata file {path}: {e}") from e

    if not isinstance(raw, list):
        raise ValueError(f"Document metadata file {path} must contain a JSON array")

    documents: list[DocumentRecord] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise ValueError(f"Entry {index} in {path} is not an object")
        doc_id = entry.get("id")
        location = entry.get("location")
        if not isinstance(doc_id, str) or not isinstance(location, str):
            raise ValueError(f"Entry {index} in {path} needs string 'id' and 'location' fields")
        title = entry.get("title")
        documents.append(DocumentRecord(id=doc_id, location=location, title=title if isinstance(title, str) else ""))

    get_logger("document").debug("Loaded %d document records from %s", len(documents), path)
    return documents
