"""Core types."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Word:
    """A single token and its location in the source text."""
    start: int
    end: int               # exclusive
    text: str
