"""
Letter feedback for guesses.

Words are encoded as [B, 5] int64 tensors of code points so that whole
batches of (guess, target) pairs can be scored with a handful of tensor ops.
Scoring is the usual two-pass scheme: exact matches consume their target
letters first, then the remaining guess letters claim whatever unconsumed
occurrences are left, left to right. A letter is therefore never reported
more often than the target actually contains it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Sequence
import torch

from core.dictionary import WORD_LENGTH


class LetterFeedback(IntEnum):
    """Per-position classification of a guessed letter."""
    ABSENT = 0
    PRESENT = 1
    EXACT = 2


@dataclass(frozen=True)
class GuessResult:
    """
    Feedback for one guess.

    Attributes:
        guess: The word that was scored
        feedback: One LetterFeedback per position, in guess order
    """
    guess: str
    feedback: tuple[LetterFeedback, ...]

    @property
    def is_win(self) -> bool:
        return all(f == LetterFeedback.EXACT for f in self.feedback)

    def __len__(self) -> int:
        return len(self.feedback)


def encode_words(
    words: Sequence[str],
    device: Optional[torch.device | str] = None
) -> torch.Tensor:
    """
    Encode words as a tensor of code points.

    Args:
        words: Words of exactly WORD_LENGTH characters
        device: Device to place the tensor on (defaults to CPU)

    Returns:
        [B, WORD_LENGTH] int64 tensor

    Raises:
        ValueError: If any word has the wrong length
    """
    for word in words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Expected {WORD_LENGTH}-letter word, got {word!r}")

    if not words:
        return torch.empty((0, WORD_LENGTH), dtype=torch.int64, device=device)
    return torch.tensor([[ord(c) for c in w] for w in words], dtype=torch.int64, device=device)


def classify_batch(guesses: torch.Tensor, targets: torch.Tensor) -> torch.Tensor:
    """
    Score a batch of guesses against targets.

    Either side may be a single [5] word, which is broadcast against the
    other side's batch.

    Args:
        guesses: [B, 5] or [5] encoded guesses
        targets: [B, 5] or [5] encoded targets

    Returns:
        [B, 5] int64 tensor of LetterFeedback codes

    Raises:
        ValueError: If shapes don't line up
    """
    if guesses.ndim == 1:
        guesses = guesses.unsqueeze(0)
    if targets.ndim == 1:
        targets = targets.unsqueeze(0)
    if guesses.shape[-1] != WORD_LENGTH or targets.shape[-1] != WORD_LENGTH:
        raise ValueError(
            f"Expected words of length {WORD_LENGTH}, got shapes "
            f"{tuple(guesses.shape)} and {tuple(targets.shape)}"
        )
    targets = targets.to(guesses.device)
    guesses, targets = torch.broadcast_tensors(guesses, targets)

    # Pass 1: exact matches consume their target letter
    exact = guesses == targets  # [B, 5]

    # For guess position i, unconsumed target positions k holding the same letter
    same_letter = guesses.unsqueeze(2) == targets.unsqueeze(1)  # [B, i, k]
    available = (same_letter & ~exact.unsqueeze(1)).sum(dim=2)  # [B, 5]

    # Pass 2: earlier non-exact guess positions j < i with the same letter
    # have already claimed that many of the available occurrences
    repeats = guesses.unsqueeze(2) == guesses.unsqueeze(1)  # [B, i, j]
    earlier = torch.ones(WORD_LENGTH, WORD_LENGTH, dtype=torch.bool, device=guesses.device).tril(-1)
    claimed = (repeats & earlier & ~exact.unsqueeze(1)).sum(dim=2)  # [B, 5]

    present = ~exact & (claimed < available)

    return (
        exact.to(torch.int64) * int(LetterFeedback.EXACT)
        + present.to(torch.int64) * int(LetterFeedback.PRESENT)
    )


def classify(guess: str, target: str) -> GuessResult:
    """
    Score one guess against the target.

    Args:
        guess: Guessed word
        target: Secret word

    Returns:
        GuessResult for the guess

    Raises:
        ValueError: If either word is not WORD_LENGTH characters
    """
    encoded = encode_words([guess, target])
    codes = classify_batch(encoded[0], encoded[1])[0]
    return GuessResult(guess=guess, feedback=tuple(LetterFeedback(int(c)) for c in codes))


def consistent_mask(candidates: torch.Tensor, result: GuessResult) -> torch.Tensor:
    """
    Find candidate targets that would have produced an observed result.

    Args:
        candidates: [N, 5] encoded candidate targets
        result: Feedback observed for result.guess

    Returns:
        [N] bool tensor, True where the candidate is still possible
    """
    guess = encode_words([result.guess], device=candidates.device)[0]
    observed = torch.tensor(
        [int(f) for f in result.feedback], dtype=torch.int64, device=candidates.device
    )
    if candidates.shape[0] == 0:
        return torch.zeros(0, dtype=torch.bool, device=candidates.device)
    codes = classify_batch(guess, candidates)
    return (codes == observed).all(dim=1)
