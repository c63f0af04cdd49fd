"""Tests for the dict/YAML config loader."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from regexp_spell import InvalidPatternError, Word
from regexp_spell.config import create_dictionary, create_speller, load_config, load_from_yaml


YAML_CONFIG = r"""
regexp_spell:
  word_boundaries: '[\s.,!?]+'
  known_words:
    - '\d+'
    - 'colou?r'
  literal_words:
    - 'C++'
  dictionary:
    words: [cheese, NASA]
    case_sensitive: [Word]
    case_insensitive: [like]
"""


def test_load_config_defaults():
    cfg = load_config({})
    assert cfg["word_boundaries"] == r"\W+"
    assert cfg["known_words"] == []
    assert cfg["literal_words"] == []
    assert cfg["dictionary_words"] == []


def test_load_config_nested_and_flat_agree():
    flat = {"known_words": ["a"], "dictionary": {"words": ["b"]}}
    assert load_config({"regexp_spell": flat}) == load_config(flat)


def test_create_speller_from_dict():
    spell = create_speller({"known_words": ["eat", "like", "store"]})
    assert spell.classify("I like cheese.") == [Word(2, 6, "like")]


def test_create_speller_empty_config():
    assert create_speller({}).classify("I like cheese.") == []


def test_create_speller_invalid_pattern():
    with pytest.raises(InvalidPatternError):
        create_speller({"known_words": ["(unclosed"]})


def test_load_from_yaml(tmp_path):
    path = tmp_path / "spell.yaml"
    path.write_text(YAML_CONFIG)
    cfg = load_from_yaml(path)

    spell = create_speller(cfg)
    known = spell.classify("Color 12, colour and C++ rock!")
    assert [w.text for w in known] == ["12", "colour", "C++"]

    d = create_dictionary(cfg)
    assert d.check("Cheese")
    assert d.check("NASA")
    assert not d.check("nasa")
    assert d.check("Word")
    assert not d.check("word")
    assert d.check("LIKE")


def test_create_dictionary_from_flat_dict():
    d = create_dictionary({"dictionary": {"words": ["Oslo", "fjord"]}})
    assert d.check("Oslo")
    assert d.check("Fjord")
    assert not d.check("oslo")


def test_create_speller_invalid_word_boundaries():
    with pytest.raises(InvalidPatternError):
        create_speller({"word_boundaries": "[oops"})


def test_scalar_known_words_is_one_pattern():
    cfg = load_config({"known_words": "like", "literal_words": "C++"})
    assert cfg["known_words"] == ["like"]
    assert cfg["literal_words"] == ["C++"]

    spell = create_speller({"known_words": "like"})
    assert len(spell.matchers) == 1
    assert spell.classify("I like k e") == [Word(2, 6, "like")]


def test_scalar_known_words_from_yaml(tmp_path):
    path = tmp_path / "spell.yaml"
    path.write_text("regexp_spell:\n  known_words: like\n  dictionary:\n    words: NASA\n")
    cfg = load_from_yaml(path)
    assert create_speller(cfg).classify("I like k e") == [Word(2, 6, "like")]
    d = create_dictionary(cfg)
    assert d.check("NASA")
    assert not d.check("N")
