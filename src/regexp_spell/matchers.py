"""Whole-token matchers used by the classifier.

A matcher answers one question: does this token, in its entirety, count as
a known word?  Two variants exist:

    RegexMatcher:   the token must fullmatch a regular expression
    LiteralMatcher: the token must equal a fixed string

`to_matcher` turns the loose inputs accepted by `RegExpSpell` (compiled
patterns, pattern strings, ready-made matchers) into one of these.
"""

from __future__ import annotations
import logging
import re
from typing import Protocol, Union, runtime_checkable

from .errors import InvalidPatternError

logger = logging.getLogger(__name__)


@runtime_checkable
class TokenMatcher(Protocol):
    def matches(self, token: str) -> bool: ...


class RegexMatcher:
    """Matches tokens that fullmatch a compiled pattern."""

    __slots__ = ("pattern",)

    def __init__(self, pattern: re.Pattern) -> None:
        self.pattern = pattern

    def matches(self, token: str) -> bool:
        return self.pattern.fullmatch(token) is not None

    def __repr__(self) -> str:
        return f"RegexMatcher({self.pattern.pattern!r})"


class LiteralMatcher:
    """Matches exactly one literal token, no regex interpretation."""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def matches(self, token: str) -> bool:
        return token == self.text

    def __repr__(self) -> str:
        return f"LiteralMatcher({self.text!r})"


PatternLike = Union[re.Pattern, str, TokenMatcher]


def compile_pattern(source: str, flags: int = 0) -> re.Pattern:
    """Compile pattern source, raising InvalidPatternError on bad syntax."""
    try:
        return re.compile(source, flags)
    except re.error as exc:
        raise InvalidPatternError(source, exc) from exc


def to_matcher(pattern: PatternLike) -> TokenMatcher:
    """Normalize a single known-word pattern into a TokenMatcher."""
    if isinstance(pattern, re.Pattern):
        if not isinstance(pattern.pattern, str):
            raise TypeError("bytes patterns cannot match str tokens")
        return RegexMatcher(pattern)
    if isinstance(pattern, str):
        logger.debug("compiling known-word pattern %r", pattern)
        return RegexMatcher(compile_pattern(pattern))
    if isinstance(pattern, TokenMatcher):
        return pattern
    raise TypeError(f"unsupported pattern type: {type(pattern).__name__}")
