"""
Tests for guesser agents.
"""

import pytest

from agents.guesser import BaseGuesser, GuesserParams, RandomGuesser, CandidateGuesser
from core.dictionary import Dictionary
from core.session import Session, SessionStatus, Evaluated


def test_random_guesser_initialization(small_dictionary):
    """Test RandomGuesser initialization."""
    guesser = RandomGuesser(small_dictionary)
    assert isinstance(guesser, BaseGuesser)
    assert isinstance(guesser.params, GuesserParams)


def test_random_guesser_returns_dictionary_words(small_dictionary):
    guesser = RandomGuesser(small_dictionary, GuesserParams(seed=42))
    for _ in range(20):
        assert guesser.get_guess(()) in small_dictionary


def test_random_guesser_is_reproducible(small_dictionary):
    a = RandomGuesser(small_dictionary, GuesserParams(seed=7))
    b = RandomGuesser(small_dictionary, GuesserParams(seed=7))
    assert [a.get_guess(()) for _ in range(10)] == [b.get_guess(()) for _ in range(10)]


def test_first_guess_is_used(small_dictionary):
    guesser = RandomGuesser(small_dictionary, GuesserParams(seed=0, first_guess="crane"))
    assert guesser.get_guess(()) == "crane"


def test_candidate_guesser_prunes(small_dictionary):
    guesser = CandidateGuesser(small_dictionary, GuesserParams(seed=0))
    assert guesser.n_candidates == small_dictionary.size()

    session = Session(small_dictionary, target="robot")
    session.submit_guess("boots")
    guesser.observe(session.history)

    assert guesser.candidates() == ["robot"]
    assert guesser.get_guess(session.history) == "robot"


def test_candidate_guesser_reset(small_dictionary):
    guesser = CandidateGuesser(small_dictionary, GuesserParams(seed=0))
    session = Session(small_dictionary, target="robot")
    session.submit_guess("boots")
    guesser.observe(session.history)

    guesser.reset()

    assert guesser.n_candidates == small_dictionary.size()


def test_candidate_guesser_plays_strict_sessions(small_dictionary):
    """Test that every guess the agent makes is accepted in hard mode."""
    for seed in range(10):
        session = Session(small_dictionary, seed=seed, strict=True)
        guesser = CandidateGuesser(small_dictionary, GuesserParams(seed=seed))
        while not session.is_over:
            outcome = session.submit_guess(guesser.get_guess(session.history))
            assert isinstance(outcome, Evaluated)


def test_candidate_guesser_always_wins_tiny_dictionary():
    dictionary = Dictionary.load(["crane", "crate", "trace", "react"])
    for seed in range(10):
        session = Session(dictionary, seed=seed)
        guesser = CandidateGuesser(dictionary, GuesserParams(seed=seed))
        while not session.is_over:
            session.submit_guess(guesser.get_guess(session.history))
        assert session.status == SessionStatus.WON


def test_candidate_guesser_no_candidates_raises():
    dictionary = Dictionary.load(["crane", "slate"])
    other = Dictionary.load(["crane", "robot"])
    session = Session(other, target="robot")
    session.submit_guess("crane")

    guesser = CandidateGuesser(dictionary, GuesserParams(seed=0))
    with pytest.raises(ValueError):
        guesser.get_guess(session.history)
