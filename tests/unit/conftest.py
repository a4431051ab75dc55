"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

from tests.conftest import PAPER_INTRO_URL, run_cmd

__all__ = ["PAPER_INTRO_URL", "run_cmd"]
