"""Test helper utilities for backlog tests.

This package provides reusable helpers for driving the interactive session
without a terminal.
"""

from tests.helpers.session_helpers import (
    descriptions,
    press,
    type_text,
    done_flags,
)

__all__ = [
    "descriptions",
    "press",
    "type_text",
    "done_flags",
]
