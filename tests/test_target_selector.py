"""
Tests for core.target_selector module.
"""

import torch
import pytest

from core.dictionary import Dictionary
from core.target_selector import TargetSelector


def test_pick_returns_dictionary_word(small_dictionary):
    selector = TargetSelector(seed=0)
    for _ in range(20):
        assert selector.pick(small_dictionary) in small_dictionary


def test_same_seed_same_word(small_dictionary):
    first = TargetSelector(seed=123).pick(small_dictionary)
    second = TargetSelector(seed=123).pick(small_dictionary)
    assert first == second


def test_injected_generator(small_dictionary):
    gen_a = torch.Generator().manual_seed(7)
    gen_b = torch.Generator().manual_seed(7)

    picks_a = [TargetSelector(generator=gen_a).pick(small_dictionary) for _ in range(5)]
    picks_b = [TargetSelector(generator=gen_b).pick(small_dictionary) for _ in range(5)]

    assert picks_a == picks_b


def test_generator_overrides_seed(small_dictionary):
    gen = torch.Generator().manual_seed(99)
    expected = TargetSelector(seed=99).pick(small_dictionary)

    assert TargetSelector(seed=1, generator=gen).pick(small_dictionary) == expected


def test_single_word_dictionary():
    dictionary = Dictionary.load(["crane"])
    assert TargetSelector(seed=5).pick(dictionary) == "crane"


def test_pick_covers_dictionary(small_dictionary):
    """Test that selection reaches every word given enough draws."""
    selector = TargetSelector(seed=42)
    seen = {selector.pick(small_dictionary) for _ in range(500)}
    assert seen == set(small_dictionary.words)
