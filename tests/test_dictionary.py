"""
Tests for core.dictionary module.
"""

import pytest

from core.dictionary import Dictionary, is_candidate, WORD_LENGTH
from core.errors import EmptyDictionaryError, WordleError


def test_load_filters_candidates():
    """Test that curation keeps only five-letter, apostrophe-free, lowercase-initial words."""
    raw = ["crane", "Paris", "can't", "cranes", "cat", "robot", "don't", "Alice", "slate"]
    dictionary = Dictionary.load(raw)

    assert set(dictionary.words) == {"crane", "robot", "slate"}
    assert dictionary.size() == 3
    assert len(dictionary) == 3


@pytest.mark.parametrize("raw,expected", [
    ("crane", True),
    ("Crane", False),    # proper-noun heuristic
    ("ca'ne", False),    # apostrophe
    ("cran", False),     # too short
    ("cranes", False),   # too long
    ("cRANE", True),     # only the first raw character is checked
])
def test_is_candidate(raw, expected):
    assert is_candidate(raw) is expected


def test_every_member_satisfies_filters():
    raw = ["abcde", "Abcde", "ab'de", "abcdef", "xyz", "hello", "wORLD", "Ölig", "émile"]
    dictionary = Dictionary.load(raw)

    for word in dictionary:
        assert len(word) == WORD_LENGTH
        assert "'" not in word
        assert word == word.lower()


def test_mixed_case_stored_lowercase():
    dictionary = Dictionary.load(["wORLD"])

    assert dictionary.contains("world")
    assert not dictionary.contains("wORLD")


def test_contains_is_case_sensitive(small_dictionary):
    assert small_dictionary.contains("robot")
    assert "robot" in small_dictionary
    assert not small_dictionary.contains("ROBOT")
    assert not small_dictionary.contains("robo")


def test_duplicates_collapse():
    dictionary = Dictionary.load(["crane", "crane", "slate"])
    assert dictionary.size() == 2


def test_words_sorted_and_stable():
    dictionary = Dictionary.load(["slate", "crane", "robot"])
    assert dictionary.words == ("crane", "robot", "slate")


def test_empty_after_filtering_raises():
    with pytest.raises(EmptyDictionaryError):
        Dictionary.load(["Paris", "can't", "toolong"])


def test_empty_input_raises():
    with pytest.raises(EmptyDictionaryError):
        Dictionary.load([])


def test_empty_dictionary_error_is_wordle_error():
    assert issubclass(EmptyDictionaryError, WordleError)


def test_normalize_only_lowercases():
    assert Dictionary.normalize("CrAnE") == "crane"
    assert Dictionary.normalize(" crane") == " crane"


def test_load_accepts_generator():
    dictionary = Dictionary.load(w for w in ["crane", "slate"])
    assert dictionary.size() == 2


def test_lowercase_expansion_is_dropped():
    """Test that a capital which lowercases to two characters can't sneak in a 6-letter word."""
    dictionary = Dictionary.load(["aİbcd", "crane"])

    assert dictionary.words == ("crane",)
    assert not is_candidate("aİbcd")


@pytest.mark.parametrize("words", [
    ["Paris", "crane"],
    ["ab", "crane"],
    ["can't", "crane"],
    ["aİbcd"],
])
def test_constructor_rejects_uncurated_words(words):
    with pytest.raises(ValueError):
        Dictionary(words)


def test_constructor_accepts_curated_words():
    dictionary = Dictionary(["crane", "wORLD"])

    assert dictionary.words == ("crane", "world")
    assert all(len(w) == WORD_LENGTH for w in dictionary)
