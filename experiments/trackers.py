"""
Game trackers for simulated sessions.

Trackers receive callbacks while SessionExperiment drives games and
accumulate data for analysis or evaluation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
import numpy as np

from core.session import Session, SessionStatus, SubmitOutcome, Evaluated


class GameTracker(ABC):
    """
    Abstract base class for game trackers.

    Trackers receive callbacks during game execution:
    - on_guess: Called after each submitted guess (valid or not)
    - on_game_end: Called when a session reaches WON or LOST
    - get_results: Returns accumulated results
    """

    @abstractmethod
    def on_guess(self, game_idx: int, outcome: SubmitOutcome) -> None:
        """
        Called after each submitted guess.

        Args:
            game_idx: Index of the game in the run
            outcome: Invalid or Evaluated outcome returned by the session
        """
        pass

    @abstractmethod
    def on_game_end(self, game_idx: int, session: Session) -> None:
        """
        Called when a game ends.

        Args:
            game_idx: Index of the completed game
            session: The finished (terminal) session
        """
        pass

    @abstractmethod
    def get_results(self) -> Any:
        """
        Get accumulated results.

        Returns:
            Results in tracker-specific format
        """
        pass

    def reset(self) -> None:
        """
        Reset tracker state (optional).

        Default implementation does nothing. Override if tracker needs reset.
        """
        pass


class SummaryTracker(GameTracker):
    """
    Tracker that accumulates summary statistics.

    Computes running statistics across all games:
    - Win rate
    - Average attempts on won games
    - Distribution of winning attempt numbers
    - Invalid guesses submitted

    Memory efficient - only stores aggregated statistics, not individual games.
    """

    def __init__(self, max_attempts: int = 6):
        """
        Initialize summary tracker.

        Args:
            max_attempts: Largest attempt number to bucket in the distribution
        """
        self.max_attempts = max_attempts
        self.total_games = 0
        self.wins = 0
        self.invalid_guesses = 0
        # win_distribution[k] = games won on attempt k + 1
        self.win_distribution = np.zeros(max_attempts, dtype=np.int64)

    def on_guess(self, game_idx: int, outcome: SubmitOutcome) -> None:
        """Count rejected guesses."""
        if not isinstance(outcome, Evaluated):
            self.invalid_guesses += 1

    def on_game_end(self, game_idx: int, session: Session) -> None:
        """Update win statistics."""
        self.total_games += 1
        if session.status == SessionStatus.WON:
            self.wins += 1
            if session.attempts > len(self.win_distribution):
                self.win_distribution = np.pad(
                    self.win_distribution, (0, session.attempts - len(self.win_distribution))
                )
            self.win_distribution[session.attempts - 1] += 1

    def get_results(self) -> dict[str, Any]:
        """
        Get summary statistics.

        Returns:
            Dictionary with:
                - total_games: Number of games played
                - wins: Number of games won
                - win_rate: Fraction of games won
                - avg_attempts: Mean winning attempt (0.0 if no wins)
                - win_distribution: Wins per attempt number (index 0 = first attempt)
                - invalid_guesses: Rejected guesses across all games
        """
        if self.total_games == 0:
            return {
                "total_games": 0,
                "wins": 0,
                "win_rate": 0.0,
                "avg_attempts": 0.0,
                "win_distribution": self.win_distribution.tolist(),
                "invalid_guesses": self.invalid_guesses,
            }

        attempt_numbers = np.arange(1, len(self.win_distribution) + 1)
        avg_attempts = (
            float(np.dot(attempt_numbers, self.win_distribution) / self.wins) if self.wins else 0.0
        )

        return {
            "total_games": self.total_games,
            "wins": self.wins,
            "win_rate": self.wins / self.total_games,
            "avg_attempts": avg_attempts,
            "win_distribution": self.win_distribution.tolist(),
            "invalid_guesses": self.invalid_guesses,
        }

    def reset(self) -> None:
        """Reset all statistics."""
        self.__init__(self.max_attempts)


class EpisodeTracker(GameTracker):
    """
    Tracker that stores per-game results.

    Stores the target, final status, attempt count and the list of valid
    guesses for each completed game. Useful for inspecting individual games.
    """

    def __init__(self):
        """Initialize episode tracker."""
        self.episodes = []

    def on_guess(self, game_idx: int, outcome: SubmitOutcome) -> None:
        pass

    def on_game_end(self, game_idx: int, session: Session) -> None:
        """Store game results."""
        self.episodes.append({
            "game_idx": game_idx,
            "target": session.target,
            "status": session.status.value,
            "attempts": session.attempts,
            "guesses": [word for word, _ in session.history],
        })

    def get_results(self) -> list[dict]:
        """
        Get list of game results.

        Returns:
            List of dicts, one per game, containing:
                - game_idx: Game index
                - target: The secret word
                - status: "won" or "lost"
                - attempts: Valid guesses used
                - guesses: Valid guesses in order
        """
        return self.episodes

    def reset(self) -> None:
        """Clear all episode data."""
        self.__init__()
