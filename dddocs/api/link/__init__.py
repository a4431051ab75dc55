"""Link API domain."""

from .._output_schemas.link import LinkCheckOutput, LinkResolveOutput
from .match_paper_doc_id import match_paper_doc_id
from .resolve_internal_link import resolve_internal_link
from .to_site_path import to_site_path

__all__ = [
    "LinkCheckOutput",
    "LinkResolveOutput",
    "match_paper_doc_id",
    "resolve_internal_link",
    "to_site_path",
]
