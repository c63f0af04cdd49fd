"""RegExpSpell, the main API.  Tokenize, then test tokens against known words.

Usage:
    from regexp_spell import RegExpSpell

    spell = RegExpSpell(["eat", "like", "store"])   # reusable, read-only after init

    spell.tokenize("I like cheese.")
    # [Word(start=0, end=1, text='I'), Word(start=2, end=6, text='like'), ...]

    spell.classify("I like cheese.")
    # [Word(start=2, end=6, text='like')]

    spell.get_incorrect_words("I like cheese.")
    # [Word(start=0, end=1, text='I'), Word(start=7, end=13, text='cheese')]

Pattern strings are regular expressions that must match a whole token, so
"like" does not accept "likely".  Use LiteralMatcher for text that should not
be read as a regex.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Sequence

from .matchers import PatternLike, TokenMatcher, to_matcher
from .tokenizer import DEFAULT_WORD_BOUNDARIES, Tokenizer
from .types import Word

logger = logging.getLogger(__name__)


@dataclass
class SpellerConfig:
    """Configuration for RegExpSpell."""
    word_boundaries: str | re.Pattern = DEFAULT_WORD_BOUNDARIES
    known_words: list[PatternLike] = field(default_factory=list)


class RegExpSpell:
    """Regex-based classifier of known (correct) and unknown words."""

    def __init__(
        self,
        known_words: Sequence[PatternLike] | None = None,
        *,
        config: SpellerConfig | None = None,
    ) -> None:
        self.config = config or SpellerConfig()
        patterns = _pattern_list(self.config.known_words)
        if known_words:
            patterns.extend(_pattern_list(known_words))

        self._tokenizer = Tokenizer(self.config.word_boundaries)
        self._matchers: tuple[TokenMatcher, ...] = tuple(to_matcher(p) for p in patterns)
        logger.debug("RegExpSpell ready with %d known-word matchers", len(self._matchers))

    @property
    def matchers(self) -> tuple[TokenMatcher, ...]:
        return self._matchers

    def tokenize(self, text: str | None) -> list[Word]:
        """Split text into word spans, dropping word boundaries."""
        return self._tokenizer.tokenize(text)

    def is_known(self, token: str) -> bool:
        """True if any matcher accepts the whole token."""
        return any(m.matches(token) for m in self._matchers)

    def classify(self, text: str | None) -> list[Word]:
        """Return the known words in text, in order of appearance."""
        # No known words means nothing is ever correct.
        if not self._matchers:
            return []
        return [w for w in self.tokenize(text) if self.is_known(w.text)]

    def get_incorrect_words(self, text: str | None) -> list[Word]:
        """Return the words in text that no matcher accepts."""
        return [w for w in self.tokenize(text) if not self.is_known(w.text)]


def _pattern_list(patterns: Sequence[PatternLike]) -> list[PatternLike]:
    # A lone str would otherwise be read as one pattern per character.
    if isinstance(patterns, (str, bytes, re.Pattern)):
        raise TypeError(
            f"known_words must be a sequence of patterns, not {type(patterns).__name__}"
        )
    return list(patterns)
