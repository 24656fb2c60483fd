"""
Curated set of valid guess words.

Raw candidates (typically the lines of a system word list) are filtered down
to five-letter common words and stored lowercase. The result is immutable for
the lifetime of the process.
"""

from __future__ import annotations

from typing import Iterable, Iterator
import logging

from core.errors import EmptyDictionaryError

logger = logging.getLogger(__name__)

WORD_LENGTH = 5


def is_candidate(raw: str) -> bool:
    """
    Check whether a raw word survives curation.

    A word is kept when it is exactly WORD_LENGTH characters both as written
    and once lowercased, contains no apostrophe, and does not start with an
    uppercase letter. The last check runs on the raw text and is only a
    heuristic for skipping proper nouns.

    Args:
        raw: Candidate word as it appears in the source

    Returns:
        True if the word belongs in the dictionary
    """
    if len(raw) != WORD_LENGTH:
        return False
    # Some capitals expand when lowercased ("\u0130" -> "i\u0307")
    if len(Dictionary.normalize(raw)) != WORD_LENGTH:
        return False
    if "'" in raw:
        return False
    if raw[0].isupper():
        return False
    return True


class Dictionary:
    """
    Immutable set of playable words.

    Attributes:
        words: Sorted tuple of lowercase words (stable order for indexing)
    """

    def __init__(self, words: Iterable[str]):
        """
        Build a dictionary from already-curated words.

        Use Dictionary.load() for raw input, which drops words that fail
        curation. This constructor rejects them instead, then lowercases and
        deduplicates.

        Args:
            words: Curated words

        Raises:
            ValueError: If a word fails curation
            EmptyDictionaryError: If no words are given
        """
        words = list(words)
        for word in words:
            if not is_candidate(word):
                raise ValueError(f"{word!r} is not a valid {WORD_LENGTH}-letter dictionary word")

        self._words = frozenset(self.normalize(w) for w in words)
        if not self._words:
            raise EmptyDictionaryError("Dictionary has no valid words")
        self.words = tuple(sorted(self._words))

    @classmethod
    def load(cls, raw_words: Iterable[str]) -> Dictionary:
        """
        Curate raw candidate words into a dictionary.

        Args:
            raw_words: Candidate words, exactly as read from the source

        Returns:
            Dictionary of the surviving words

        Raises:
            EmptyDictionaryError: If filtering leaves zero words
        """
        total = 0
        kept = []
        for raw in raw_words:
            total += 1
            if is_candidate(raw):
                kept.append(raw)

        if not kept:
            raise EmptyDictionaryError(
                f"No valid {WORD_LENGTH}-letter words among {total} candidates"
            )

        dictionary = cls(kept)
        logger.info("curated %d words from %d candidates", dictionary.size(), total)
        return dictionary

    @staticmethod
    def normalize(raw: str) -> str:
        """Map a word to the stored casing convention (lowercase)."""
        return raw.lower()

    def contains(self, word: str) -> bool:
        """Case-sensitive membership test against the lowercase store."""
        return word in self._words

    def size(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __repr__(self) -> str:
        return f"Dictionary(size={self.size()})"
