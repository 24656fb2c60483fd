"""
Pytest configuration for the guessing game.

Pins tensor work to the CPU and provides small dictionaries so tests don't
depend on the system word list.
"""

import os

import pytest

# Force CPU so results don't depend on available accelerators.
os.environ.setdefault("WORDLE_DEVICE", "cpu")

from core.dictionary import Dictionary


SMALL_WORDS = [
    "robot", "boots", "crane", "slate", "error", "rotor", "hello", "world",
    "apple", "stare", "trace", "cared", "scoop", "level", "lemon", "belle",
]


@pytest.fixture
def small_dictionary():
    return Dictionary.load(SMALL_WORDS)
