"""Markdown render API command.

CLI: dddocs page render <path>
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..document.load_site_documents import load_site_documents
from ..StageResult import StageResult
from .create_markdown import create_markdown
from .render_page import render_page


def cmd_render(path: str) -> StageResult:
    """Render a markdown page with the site's extensions."""
    file_path = Path(path).expanduser()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        empty: dict[str, Any] = {"path": str(file_path), "frontmatter": {}, "html": ""}

        yield (0.2, "Loading document metadata...")
        config, documents, failure = load_site_documents(empty)
        if config is None:
            yield (1.0, "Complete")
            result_obj.result = "Failed to load document metadata"
            result_obj.output = failure or {}
            result_obj.success = False
            return

        if not file_path.is_file():
            yield (1.0, "Complete")
            result_obj.result = f"File not found: {file_path}"
            result_obj.output = {"errors": [f"File not found: {file_path}"], "warnings": [], **empty}
            result_obj.success = False
            return

        yield (0.6, "Rendering markdown...")
        md = create_markdown(documents, config.markdown)
        try:
            frontmatter, rendered = render_page(file_path.read_text(encoding="utf-8"), md, path=str(file_path))
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to render {file_path}"
            result_obj.output = {"errors": [str(e)], "warnings": [], **empty}
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Rendered {file_path.name}"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "path": str(file_path),
            "frontmatter": frontmatter,
            "html": rendered,
        }
        result_obj.success = True

    return StageResult(announce=f"Rendering {file_path}...", progress_callback=do_work)
