"""
Guesser that only plays words still consistent with all feedback so far.
"""

from __future__ import annotations

from typing import Optional
import logging
import torch

from agents.guesser.base_guesser import BaseGuesser, GuesserParams
from core.dictionary import Dictionary
from core.feedback import GuessResult, consistent_mask, encode_words
from utils.device import get_device, get_device_name

logger = logging.getLogger(__name__)


class CandidateGuesser(BaseGuesser):
    """
    Candidate-elimination guesser.

    Strategy:
    1. Encode the whole dictionary once as an [N, 5] tensor
    2. After each observed GuessResult, keep only the words that would have
       produced exactly that feedback had they been the target
    3. Guess a random survivor

    Every guess is a possible target, so the agent also satisfies strict
    (hard mode) sessions.
    """

    def __init__(self, dictionary: Dictionary, params: Optional[GuesserParams] = None):
        """
        Initialize candidate guesser.

        Args:
            dictionary: Words the agent may guess
            params: GuesserParams with configuration
        """
        super().__init__(dictionary, params)
        self.device = get_device(self.params.device)
        logger.debug("CandidateGuesser using %s", get_device_name(self.device))

        self.generator = torch.Generator()
        if self.params.seed is not None:
            self.generator.manual_seed(self.params.seed)

        self.encoded = encode_words(dictionary.words, device=self.device)  # [N, 5]
        self.reset()

    def reset(self) -> None:
        """Forget all feedback; every dictionary word is a candidate again."""
        self.alive = torch.ones(self.encoded.shape[0], dtype=torch.bool, device=self.device)
        self._seen = 0

    @property
    def n_candidates(self) -> int:
        return int(self.alive.sum().item())

    def candidates(self) -> list[str]:
        """Words still consistent with every observed result."""
        indices = torch.nonzero(self.alive, as_tuple=False).squeeze(-1).tolist()
        return [self.dictionary.words[i] for i in indices]

    def observe(self, history: tuple[tuple[str, GuessResult], ...]) -> None:
        """
        Prune candidates with any results not yet seen.

        Args:
            history: Session history, oldest first
        """
        for _, result in history[self._seen:]:
            self.alive &= consistent_mask(self.encoded, result)
        self._seen = len(history)

    def get_guess(self, history: tuple[tuple[str, GuessResult], ...]) -> str:
        if not history and self.params.first_guess is not None:
            return self.params.first_guess

        self.observe(history)
        alive_idx = torch.nonzero(self.alive, as_tuple=False).squeeze(-1)
        if alive_idx.numel() == 0:
            # Feedback came from a target outside the dictionary
            raise ValueError("No dictionary word is consistent with the observed feedback")

        pick = torch.randint(0, alive_idx.numel(), (1,), generator=self.generator).item()
        return self.dictionary.words[int(alive_idx[pick].item())]
