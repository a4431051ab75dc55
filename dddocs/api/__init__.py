"""API module for dddocs.

Functions defined here serve as the single source of truth for the CLI commands.
"""

__all__ = []
