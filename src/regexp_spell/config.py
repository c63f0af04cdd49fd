"""YAML/dict config loader for regexp-spell.

Supports loading from a YAML file or a plain dict (for embedding
in a larger application config).

Example YAML:

    regexp_spell:
      word_boundaries: '\\W+'
      known_words:              # regexes, each must match a whole token
        - '\\d+'
        - 'colou?r'
      literal_words:            # matched verbatim, no regex syntax
        - 'C++'
      dictionary:
        words: [cheese, NASA]   # case decided per token
        case_sensitive: [Word]
        case_insensitive: [like]
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any

from .dictionary import TokenDictionary
from .matchers import LiteralMatcher
from .speller import RegExpSpell, SpellerConfig
from .tokenizer import DEFAULT_WORD_BOUNDARIES

logger = logging.getLogger(__name__)


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "regexp_spell" key or flat
    if "regexp_spell" in data:
        data = data["regexp_spell"] or {}

    dictionary = data.get("dictionary") or {}
    return {
        "word_boundaries": data.get("word_boundaries") or DEFAULT_WORD_BOUNDARIES,
        "known_words": _as_list(data.get("known_words")),
        "literal_words": _as_list(data.get("literal_words")),
        "dictionary_words": _as_list(dictionary.get("words")),
        "case_sensitive": _as_list(dictionary.get("case_sensitive")),
        "case_insensitive": _as_list(dictionary.get("case_insensitive")),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    logger.debug("loading regexp-spell config from %s", path)
    with open(path) as f:
        return load_config(yaml.safe_load(f))


def _as_list(value: Any) -> list[Any]:
    # YAML "known_words: like" gives a scalar, not a one-item list.
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def _normalized(config: dict[str, Any]) -> dict[str, Any]:
    return load_config(config) if "dictionary_words" not in config else config


def create_speller(config: dict[str, Any]) -> RegExpSpell:
    """Create a classifier from a config dict.

    Invalid patterns raise InvalidPatternError here, not at classify time.
    """
    cfg = _normalized(config)
    known = list(cfg["known_words"])
    known.extend(LiteralMatcher(w) for w in cfg["literal_words"])
    return RegExpSpell(config=SpellerConfig(
        word_boundaries=cfg["word_boundaries"],
        known_words=known,
    ))


def create_dictionary(config: dict[str, Any]) -> TokenDictionary:
    """Create a token dictionary populated from a config dict."""
    cfg = _normalized(config)
    dictionary = TokenDictionary()
    dictionary.update(cfg["dictionary_words"])
    for token in cfg["case_sensitive"]:
        dictionary.add_case_sensitive(token)
    for token in cfg["case_insensitive"]:
        dictionary.add_case_insensitive(token)
    return dictionary
