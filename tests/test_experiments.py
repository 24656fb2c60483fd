"""
Tests for the experiment runner and trackers.
"""

import pytest

from agents.guesser import GuesserParams, RandomGuesser, CandidateGuesser
from core.dictionary import Dictionary
from core.session import Session
from experiments import SessionExperiment, SummaryTracker, EpisodeTracker


@pytest.fixture
def tiny_dictionary():
    return Dictionary.load(["crane", "crate", "trace", "react"])


def test_run_games_summary(tiny_dictionary):
    exp = SessionExperiment(tiny_dictionary)
    guesser = CandidateGuesser(tiny_dictionary, GuesserParams(seed=0))

    results = exp.run_games(guesser, n_games=20, seed=42)

    assert results["total_games"] == 20
    assert results["wins"] == 20
    assert results["win_rate"] == 1.0
    assert 1.0 <= results["avg_attempts"] <= 4.0
    assert sum(results["win_distribution"]) == 20
    assert len(results["win_distribution"]) == 6
    assert results["invalid_guesses"] == 0


def test_run_games_is_reproducible(tiny_dictionary):
    exp = SessionExperiment(tiny_dictionary)

    first = exp.run_games(
        CandidateGuesser(tiny_dictionary, GuesserParams(seed=1)), n_games=10,
        tracker=EpisodeTracker(), seed=5
    )
    second = exp.run_games(
        CandidateGuesser(tiny_dictionary, GuesserParams(seed=1)), n_games=10,
        tracker=EpisodeTracker(), seed=5
    )

    assert first == second


def test_episode_tracker_records(small_dictionary):
    exp = SessionExperiment(small_dictionary, max_attempts=3)
    tracker = EpisodeTracker()

    episodes = exp.run_games(
        RandomGuesser(small_dictionary, GuesserParams(seed=0)), n_games=5, tracker=tracker, seed=0
    )

    assert len(episodes) == 5
    for idx, episode in enumerate(episodes):
        assert episode["game_idx"] == idx
        assert episode["status"] in ("won", "lost")
        assert episode["target"] in small_dictionary
        assert len(episode["guesses"]) == episode["attempts"] <= 3
        if episode["status"] == "won":
            assert episode["guesses"][-1] == episode["target"]


def test_empty_summary():
    results = SummaryTracker().get_results()
    assert results["total_games"] == 0
    assert results["win_rate"] == 0.0


def test_summary_tracker_reset(tiny_dictionary):
    tracker = SummaryTracker()
    exp = SessionExperiment(tiny_dictionary)
    exp.run_games(CandidateGuesser(tiny_dictionary, GuesserParams(seed=0)), n_games=3, tracker=tracker, seed=0)

    tracker.reset()

    assert tracker.get_results()["total_games"] == 0


def test_summary_tracker_counts_invalid(small_dictionary):
    tracker = SummaryTracker()
    session = Session(small_dictionary, target="robot")
    tracker.on_guess(0, session.submit_guess("zzzzz"))
    tracker.on_guess(0, session.submit_guess("crane"))

    assert tracker.get_results()["invalid_guesses"] == 1


def test_stuck_guesser_raises(small_dictionary):
    """Test that a guesser that never plays a valid word is stopped."""
    exp = SessionExperiment(small_dictionary, max_invalid_guesses=5)
    guesser = RandomGuesser(small_dictionary, GuesserParams(first_guess="zzzzz"))
    guesser.get_guess = lambda history: "zzzzz"

    with pytest.raises(RuntimeError):
        exp.play(guesser, seed=0)


def test_run_sweep(tiny_dictionary):
    exp = SessionExperiment(tiny_dictionary, strict=True)
    param_grid = [{"seed": 0}, {"seed": 1, "first_guess": "crane"}]

    sweep = exp.run_sweep(
        guesser_factory=lambda params: CandidateGuesser(tiny_dictionary, GuesserParams(**params)),
        param_grid=param_grid,
        n_games_per_config=4,
        seed=0,
    )

    assert len(sweep) == 2
    assert [entry["params"] for entry in sweep] == param_grid
    assert sweep[1]["seed"] == 10000
    for entry in sweep:
        assert entry["results"]["total_games"] == 4
