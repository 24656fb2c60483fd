"""
Base class for guesser agents that play sessions on their own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from core.dictionary import Dictionary
from core.feedback import GuessResult


@dataclass
class GuesserParams:
    """
    Parameters for guesser agents.

    Attributes:
        seed: Random seed for reproducibility
        first_guess: Fixed opening word (if None, chosen like any other guess)
        device: Device for candidate tensors ("cpu", "cuda", "mps" or None for auto)
    """
    seed: Optional[int] = None
    first_guess: Optional[str] = None
    device: Optional[str] = None


class BaseGuesser(ABC):
    """
    Abstract base class for guesser agents.

    Guessers see only the session's public history and answer with a word.
    """

    def __init__(self, dictionary: Dictionary, params: Optional[GuesserParams] = None):
        """
        Initialize guesser agent.

        Args:
            dictionary: Words the agent may guess
            params: GuesserParams with configuration
        """
        self.dictionary = dictionary
        self.params = params if params is not None else GuesserParams()

    @abstractmethod
    def get_guess(self, history: tuple[tuple[str, GuessResult], ...]) -> str:
        """
        Choose the next guess.

        Args:
            history: Session history, oldest first, as (word, GuessResult) pairs

        Returns:
            Word to submit
        """
        pass

    def reset(self) -> None:
        """Reset agent state for a new game (optional)."""
        pass
