"""Split YAML front matter from a markdown page (UNO: single function)."""

import re
from typing import Any

import yaml

FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (front matter, body). Pages without front matter get an empty dict.

    Raises:
        ValueError: If the front matter is not valid YAML or not a mapping
    """
    match = FRONTMATTER_PATTERN.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML front matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Front matter must be a YAML mapping")
    return data, text[match.end():]
