"""
Random baseline guesser agent.
"""

from __future__ import annotations

from typing import Optional
import torch

from agents.guesser.base_guesser import BaseGuesser, GuesserParams
from core.dictionary import Dictionary
from core.feedback import GuessResult


class RandomGuesser(BaseGuesser):
    """
    Simple random baseline guesser.

    Guesses a uniformly random dictionary word every turn and ignores
    feedback. Only suitable for non-strict sessions.
    """

    def __init__(self, dictionary: Dictionary, params: Optional[GuesserParams] = None):
        """
        Initialize random guesser.

        Args:
            dictionary: Words the agent may guess
            params: GuesserParams (seed and first_guess are used)
        """
        super().__init__(dictionary, params)
        self.generator = torch.Generator()
        if self.params.seed is not None:
            self.generator.manual_seed(self.params.seed)

    def get_guess(self, history: tuple[tuple[str, GuessResult], ...]) -> str:
        if not history and self.params.first_guess is not None:
            return self.params.first_guess
        index = torch.randint(0, self.dictionary.size(), (1,), generator=self.generator).item()
        return self.dictionary.words[index]
