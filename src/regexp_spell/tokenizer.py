"""Split text into word spans with their character offsets.

Boundary runs (by default anything outside ``\\w``) separate words and are
dropped from the output.  Offsets always refer to the original string, so
``text[w.start:w.end] == w.text`` holds for every returned span.
"""

from __future__ import annotations
import re

from .matchers import compile_pattern
from .types import Word

DEFAULT_WORD_BOUNDARIES = r"\W+"

_BLANK = re.compile(r"\s*")


class Tokenizer:
    """Boundary-pattern tokenizer.  Stateless after init."""

    __slots__ = ("_boundaries",)

    def __init__(self, word_boundaries: str | re.Pattern = DEFAULT_WORD_BOUNDARIES) -> None:
        if isinstance(word_boundaries, re.Pattern):
            if not isinstance(word_boundaries.pattern, str):
                raise TypeError("bytes patterns cannot split str text")
            self._boundaries = word_boundaries
        else:
            self._boundaries = compile_pattern(word_boundaries)

    @property
    def word_boundaries(self) -> re.Pattern:
        return self._boundaries

    def tokenize(self, text: str | None) -> list[Word]:
        """Return the non-boundary segments of text, left to right."""
        words: list[Word] = []
        if text is None or _BLANK.fullmatch(text):
            return words

        index = 0
        for segment in self._segments(text):
            # Skip empty segments (text starting/ending on a boundary) and
            # anything that is itself a boundary run.
            if segment and not self._boundaries.search(segment):
                words.append(Word(start=index, end=index + len(segment), text=segment))
            index += len(segment)
        return words

    def _segments(self, text: str):
        """Yield alternating non-boundary and boundary segments covering text."""
        pos = 0
        for m in self._boundaries.finditer(text):
            yield text[pos:m.start()]
            yield m.group()
            pos = m.end()
        yield text[pos:]


_default = Tokenizer()


def tokenize(text: str | None, word_boundaries: str | re.Pattern | None = None) -> list[Word]:
    """Tokenize with the default boundaries, or with a one-off pattern."""
    if word_boundaries is None:
        return _default.tokenize(text)
    return Tokenizer(word_boundaries).tokenize(text)
