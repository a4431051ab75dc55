"""Page decoration: metadata banner first, footer last."""

from markdown_it.token import Token

from .component_markers import footer_token, metadata_token


def add_metadata(tokens: list[Token]) -> list[Token]:
    """Prepend the metadata marker in place and return tokens."""
    tokens.insert(0, metadata_token())
    return tokens


def add_footer(tokens: list[Token]) -> list[Token]:
    """Append the footer marker in place and return tokens."""
    tokens.append(footer_token())
    return tokens
