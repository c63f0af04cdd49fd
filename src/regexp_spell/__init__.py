"""regexp-spell: regex-based known-word classification for free text."""

from .speller import RegExpSpell, SpellerConfig
from .tokenizer import Tokenizer, tokenize
from .matchers import TokenMatcher, RegexMatcher, LiteralMatcher, to_matcher
from .dictionary import TokenDictionary
from .config import create_dictionary, create_speller, load_config, load_from_yaml
from .errors import SpellError, InvalidPatternError
from .types import Word

__all__ = [
    "RegExpSpell", "SpellerConfig",
    "Tokenizer", "tokenize",
    "TokenMatcher", "RegexMatcher", "LiteralMatcher", "to_matcher",
    "TokenDictionary",
    "create_dictionary", "create_speller", "load_config", "load_from_yaml",
    "SpellError", "InvalidPatternError",
    "Word",
]
__version__ = "0.1.0"
