"""
Uniform random choice of the secret target word.
"""

from __future__ import annotations

from typing import Optional
import logging
import torch

from core.dictionary import Dictionary
from core.errors import EmptyDictionaryError

logger = logging.getLogger(__name__)


class TargetSelector:
    """
    Picks target words uniformly from a dictionary.

    Randomness comes from an explicit torch.Generator so that selection is
    reproducible. Pass either a ready generator or a seed; with neither, a
    fresh generator seeded from torch's default entropy is used.

    Attributes:
        generator: Source of randomness for picks
    """

    def __init__(self, seed: Optional[int] = None, generator: Optional[torch.Generator] = None):
        """
        Initialize target selector.

        Args:
            seed: Random seed (ignored if generator is given)
            generator: Pre-built generator to draw from
        """
        if generator is None:
            generator = torch.Generator()
            if seed is not None:
                generator.manual_seed(seed)
            else:
                generator.seed()
        self.generator = generator

    def pick(self, dictionary: Dictionary) -> str:
        """
        Pick one word uniformly at random.

        Args:
            dictionary: Dictionary to draw from

        Returns:
            The chosen word

        Raises:
            EmptyDictionaryError: If the dictionary has no words
        """
        if dictionary.size() == 0:
            raise EmptyDictionaryError("Cannot pick a target from an empty dictionary")

        index = torch.randint(0, dictionary.size(), (1,), generator=self.generator).item()
        word = dictionary.words[index]
        logger.debug("picked target index %d of %d", index, dictionary.size())
        return word
