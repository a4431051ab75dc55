"""DocumentRecord model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentRecord:
    """A metadata entry mapping a Paper document id to its location in the docs tree."""

    id: str
    location: str
    title: str = ""
