"""TokenDictionary: literal known-word store with per-token case handling.

Design goals:
  - Tokens containing an uppercase character only match with that exact case
    ("NASA", "Word")
  - Everything else matches regardless of case ("cheese" accepts "Cheese")
  - Fast: set lookups only, no scanning
"""

from __future__ import annotations
from typing import Iterable


class TokenDictionary:
    """Case-sensitive and case-insensitive literal token sets."""

    __slots__ = ("_sensitive", "_insensitive")

    def __init__(self) -> None:
        self._sensitive: set[str] = set()      # "Word" → matches "Word" only
        self._insensitive: set[str] = set()    # "word" → matches "word", "WORD"

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def add(self, token: str | None) -> None:
        """Add a token, keeping its case only if it contains an uppercase character."""
        if token is not None and any(ch.isupper() for ch in token):
            self.add_case_sensitive(token)
        else:
            self.add_case_insensitive(token)

    def add_case_sensitive(self, token: str | None) -> None:
        if _is_blank(token):
            return
        self._sensitive.add(token)

    def add_case_insensitive(self, token: str | None) -> None:
        # Stored as given; check() lower-cases the query side only.
        if _is_blank(token):
            return
        self._insensitive.add(token)

    def update(self, tokens: Iterable[str]) -> None:
        """add() every token in tokens."""
        for token in tokens:
            self.add(token)

    def check(self, token: str) -> bool:
        """True if token is a known word."""
        return token in self._sensitive or token.lower() in self._insensitive


def _is_blank(token: str | None) -> bool:
    return token is None or not token.strip()
