"""
Experiments module for the guessing game.

Tools for playing many simulated sessions with guesser agents and collecting
results with flexible tracking.

Exported Classes:
    SessionExperiment: Plays sessions with a guesser agent
    GameTracker: Abstract base class for trackers
    SummaryTracker: Aggregate statistics tracker (O(1) memory)
    EpisodeTracker: Per-game results tracker (O(n_games) memory)

Example:
    >>> from core import Dictionary
    >>> from agents import CandidateGuesser, GuesserParams
    >>> from experiments import SessionExperiment
    >>>
    >>> dictionary = Dictionary.load(["crane", "slate", "robot", "boots"])
    >>> exp = SessionExperiment(dictionary, strict=True)
    >>> results = exp.run_games(CandidateGuesser(dictionary, GuesserParams(seed=0)), n_games=10, seed=42)
    >>> print(f"Win rate: {results['win_rate']:.2%}")
"""

from experiments.trackers import GameTracker, SummaryTracker, EpisodeTracker
from experiments.session_experiment import SessionExperiment

__all__ = [
    "SessionExperiment",
    "GameTracker",
    "SummaryTracker",
    "EpisodeTracker",
]
