"""Link check API command.

CLI: dddocs link check <path>
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from markdown_it import MarkdownIt

from ..document.load_site_documents import load_site_documents
from ..markdown.iter_link_targets import iter_link_targets
from ..markdown.split_frontmatter import split_frontmatter
from ..StageResult import StageResult
from .match_paper_doc_id import match_paper_doc_id
from .resolve_internal_link import resolve_internal_link


def cmd_check(path: str) -> StageResult:
    """Check every Paper link in a markdown file against the metadata tree."""
    file_path = Path(path).expanduser()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        empty: dict[str, Any] = {"path": str(file_path), "links": [], "resolved_count": 0, "unresolved_count": 0}

        yield (0.2, "Loading document metadata...")
        _, documents, failure = load_site_documents(empty)
        if failure is not None:
            yield (1.0, "Complete")
            result_obj.result = "Failed to load document metadata"
            result_obj.output = failure
            result_obj.success = False
            return

        if not file_path.is_file():
            yield (1.0, "Complete")
            result_obj.result = f"File not found: {file_path}"
            result_obj.output = {"errors": [f"File not found: {file_path}"], "warnings": [], **empty}
            result_obj.success = False
            return

        yield (0.5, "Parsing markdown...")
        text = file_path.read_text(encoding="utf-8")
        _, body = split_frontmatter(text)
        line_offset = len(text.splitlines()) - len(body.splitlines())
        tokens = MarkdownIt("commonmark").parse(body)

        yield (0.8, "Resolving links...")
        links: list[dict[str, Any]] = []
        warnings: list[str] = []
        for line_number, href in iter_link_targets(tokens):
            doc_id = match_paper_doc_id(href)
            if doc_id is None:
                continue
            site_path = resolve_internal_link(href, documents)
            line_number += line_offset
            if site_path is None:
                warnings.append(f"Line {line_number}: unknown document id {doc_id}")
            links.append(
                {
                    "line_number": line_number,
                    "href": href,
                    "doc_id": doc_id,
                    "resolved": site_path is not None,
                    "path": site_path or "",
                }
            )

        resolved_count = sum(1 for link in links if link["resolved"])
        yield (1.0, "Complete")
        result_obj.result = f"Checked {len(links)} Paper link(s), {resolved_count} resolved"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "path": str(file_path),
            "links": links,
            "resolved_count": resolved_count,
            "unresolved_count": len(links) - resolved_count,
        }
        result_obj.success = True

    return StageResult(announce=f"Checking links in {file_path}...", progress_callback=do_work)
