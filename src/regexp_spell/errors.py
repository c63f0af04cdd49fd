"""Exceptions raised by regexp-spell."""

from __future__ import annotations
import re


class SpellError(Exception):
    """Base class for all regexp-spell errors."""


class InvalidPatternError(SpellError, ValueError):
    """A pattern string could not be compiled."""

    def __init__(self, pattern: str, error: re.error) -> None:
        super().__init__(f"invalid pattern {pattern!r}: {error}")
        self.pattern = pattern
        self.error = error
