"""Output schemas for all API commands.

Importing this package registers every schema with the schema registry.
"""

from . import config, document, embed, link, markdown, sidebar, site  # noqa: F401
from ._base import BaseOutputSchema

__all__ = ["BaseOutputSchema"]
