"""
Experiment runner for simulated games.

This module provides the SessionExperiment class for playing many sessions
with a guesser agent and collecting results through GameTracker callbacks.
"""

from __future__ import annotations

from typing import Callable, Optional, Any
import logging
import random

from agents.guesser.base_guesser import BaseGuesser
from core.dictionary import Dictionary
from core.session import Session, DEFAULT_MAX_ATTEMPTS, Evaluated
from experiments.trackers import GameTracker, SummaryTracker

logger = logging.getLogger(__name__)


class SessionExperiment:
    """
    Experiment runner for single-player sessions.

    Example:
        ```python
        exp = SessionExperiment(dictionary, strict=True)
        guesser = CandidateGuesser(dictionary, GuesserParams(seed=0))
        results = exp.run_games(guesser, n_games=100, seed=42)
        print(f"Win rate: {results['win_rate']:.2f}")
        ```

    Attributes:
        dictionary: Dictionary used for every session
        max_attempts: Attempts allowed per session
        strict: Whether sessions run in strict (hard) mode
        max_invalid_guesses: Consecutive rejected guesses tolerated before
                             the guesser is considered stuck
    """

    def __init__(
        self,
        dictionary: Dictionary,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        strict: bool = False,
        max_invalid_guesses: int = 1000
    ):
        self.dictionary = dictionary
        self.max_attempts = max_attempts
        self.strict = strict
        self.max_invalid_guesses = max_invalid_guesses

    def play(
        self,
        guesser: BaseGuesser,
        seed: int,
        game_idx: int = 0,
        tracker: Optional[GameTracker] = None
    ) -> Session:
        """
        Play one session to completion.

        Args:
            guesser: Agent choosing the guesses
            seed: Seed for target selection
            game_idx: Index reported to the tracker
            tracker: Optional tracker to notify

        Returns:
            The finished session

        Raises:
            RuntimeError: If the guesser keeps submitting invalid guesses
        """
        session = Session(
            self.dictionary, seed=seed, max_attempts=self.max_attempts, strict=self.strict
        )
        guesser.reset()

        invalid_streak = 0
        while not session.is_over:
            outcome = session.submit_guess(guesser.get_guess(session.history))
            if tracker is not None:
                tracker.on_guess(game_idx, outcome)

            if isinstance(outcome, Evaluated):
                invalid_streak = 0
            else:
                invalid_streak += 1
                if invalid_streak >= self.max_invalid_guesses:
                    raise RuntimeError(
                        f"Guesser submitted {invalid_streak} invalid guesses in a row "
                        f"(last: {outcome.message})"
                    )

        if tracker is not None:
            tracker.on_game_end(game_idx, session)
        return session

    def run_games(
        self,
        guesser: BaseGuesser,
        n_games: int,
        tracker: Optional[GameTracker] = None,
        seed: Optional[int] = None,
        verbose: bool = False
    ) -> Any:
        """
        Run n_games with the given guesser and tracker.

        Args:
            guesser: Agent choosing the guesses
            n_games: Number of games to run
            tracker: GameTracker instance to collect data. If None, uses SummaryTracker.
            seed: Random seed for first game (incremented for subsequent games)
            verbose: If True, log progress at info level

        Returns:
            Results from tracker.get_results()
        """
        if tracker is None:
            tracker = SummaryTracker(max_attempts=self.max_attempts)

        if seed is None:
            seed = random.randint(0, 2**31 - 1)

        for game_idx in range(n_games):
            self.play(guesser, seed=seed + game_idx, game_idx=game_idx, tracker=tracker)
            if verbose:
                logger.info("Completed %d/%d games", game_idx + 1, n_games)

        return tracker.get_results()

    def run_sweep(
        self,
        guesser_factory: Callable[[dict], BaseGuesser],
        param_grid: list[dict],
        n_games_per_config: int = 10,
        tracker_factory: Optional[Callable[[], GameTracker]] = None,
        seed: Optional[int] = None,
        verbose: bool = False
    ) -> list[dict]:
        """
        Run a parameter sweep over guesser configurations.

        Args:
            guesser_factory: Function that takes a params dict and returns a guesser
            param_grid: List of parameter dictionaries to try
            n_games_per_config: Number of games per configuration
            tracker_factory: Function that creates a fresh tracker per config.
                             If None, uses SummaryTracker.
            seed: Base random seed
            verbose: If True, log progress

        Returns:
            List of dicts, one per configuration, containing:
                - params: The parameter dict
                - results: Results from tracker
                - seed: Seed used for this configuration
        """
        if tracker_factory is None:
            tracker_factory = lambda: SummaryTracker(max_attempts=self.max_attempts)

        if seed is None:
            seed = random.randint(0, 2**31 - 1)

        sweep_results = []
        for i, params in enumerate(param_grid):
            if verbose:
                logger.info("Configuration %d/%d: %s", i + 1, len(param_grid), params)

            config_seed = seed + i * 10000
            results = self.run_games(
                guesser=guesser_factory(params),
                n_games=n_games_per_config,
                tracker=tracker_factory(),
                seed=config_seed,
                verbose=verbose
            )
            sweep_results.append({
                "params": params,
                "results": results,
                "seed": config_seed
            })

        return sweep_results
