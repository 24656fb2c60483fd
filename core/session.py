"""
Single playthrough of the guessing game.

A Session owns the secret target, the guess history and the attempt count,
and moves through ACTIVE -> WON | LOST. The only mutating entry point is
submit_guess(); everything else is read-only introspection for renderers and
archival collaborators.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
import logging
import torch

from core.dictionary import Dictionary, WORD_LENGTH
from core.errors import SessionClosedError
from core.feedback import GuessResult, LetterFeedback, classify
from core.target_selector import TargetSelector

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 6


class SessionStatus(Enum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


class InvalidReason(Enum):
    WRONG_LENGTH = "wrong_length"
    NOT_IN_DICTIONARY = "not_in_dictionary"
    # Strict mode only
    MISSING_EXACT = "missing_exact"
    MISSING_PRESENT = "missing_present"


@dataclass(frozen=True)
class Invalid:
    """
    A rejected guess. No attempt was consumed.

    Attributes:
        guess: The normalized guess
        reason: Why it was rejected
        message: Human-readable explanation
    """
    guess: str
    reason: InvalidReason
    message: str


@dataclass(frozen=True)
class Evaluated:
    """
    A scored guess.

    Attributes:
        guess: The normalized guess
        result: Letter feedback
        remaining_attempts: Attempts left after this guess
        status: Session status after this guess
        attempts: Attempts used so far (the winning attempt when status is WON)
        target: The secret word, set once the session is over
    """
    guess: str
    result: GuessResult
    remaining_attempts: int
    status: SessionStatus
    attempts: int
    target: Optional[str] = None


SubmitOutcome = Union[Invalid, Evaluated]


class Session:
    """
    One game against a randomly picked target.

    Attributes:
        dictionary: Valid guess words
        max_attempts: Number of valid guesses allowed
        strict: Whether revealed hints must be reused (hard mode)
    """

    def __init__(
        self,
        dictionary: Dictionary,
        seed: Optional[int] = None,
        generator: Optional[torch.Generator] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        strict: bool = False,
        target: Optional[str] = None
    ):
        """
        Initialize a ready-to-play session.

        Args:
            dictionary: Valid guess words (and target pool)
            seed: Random seed for target selection
            generator: Generator for target selection (overrides seed)
            max_attempts: Number of valid guesses allowed (default 6)
            strict: Require guesses to honour earlier hints
            target: Fixed target word (if None, picked at random)

        Raises:
            ValueError: If max_attempts < 1 or target is not in the dictionary
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")

        self.dictionary = dictionary
        self.max_attempts = max_attempts
        self.strict = strict

        if target is None:
            target = TargetSelector(seed=seed, generator=generator).pick(dictionary)
        elif not dictionary.contains(target):
            raise ValueError(f"Target {target!r} is not in the dictionary")
        self._target = target

        self._status = SessionStatus.ACTIVE
        self._attempts = 0
        self._history: list[tuple[str, GuessResult]] = []

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status != SessionStatus.ACTIVE

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def remaining_attempts(self) -> int:
        return self.max_attempts - self._attempts

    @property
    def history(self) -> tuple[tuple[str, GuessResult], ...]:
        """Past valid guesses with their feedback, oldest first."""
        return tuple(self._history)

    @property
    def target(self) -> str:
        """
        The secret word, revealed only once the session is over.

        Raises:
            RuntimeError: If the session is still active
        """
        if not self.is_over:
            raise RuntimeError("Target is hidden while the session is active")
        return self._target

    def submit_guess(self, raw: str) -> SubmitOutcome:
        """
        Submit one guess.

        Invalid guesses are returned as Invalid and leave the session
        untouched. Valid guesses consume an attempt and may end the game.

        Args:
            raw: Guess as typed by the player

        Returns:
            Invalid or Evaluated outcome

        Raises:
            SessionClosedError: If the session is already WON or LOST
        """
        if self.is_over:
            raise SessionClosedError(f"Session already {self._status.value}")

        guess = self.dictionary.normalize(raw)
        rejection = self._validate(guess)
        if rejection is not None:
            logger.debug("rejected guess %r: %s", guess, rejection.reason.value)
            return rejection

        self._attempts += 1
        result = classify(guess, self._target)
        self._history.append((guess, result))

        if result.is_win:
            self._status = SessionStatus.WON
            logger.info("won in %d/%d attempts", self._attempts, self.max_attempts)
        elif self._attempts == self.max_attempts:
            self._status = SessionStatus.LOST
            logger.info("lost after %d attempts, target was %s", self._attempts, self._target)

        return Evaluated(
            guess=guess,
            result=result,
            remaining_attempts=self.remaining_attempts,
            status=self._status,
            attempts=self._attempts,
            target=self._target if self.is_over else None,
        )

    def _validate(self, guess: str) -> Optional[Invalid]:
        if len(guess) != WORD_LENGTH:
            return Invalid(
                guess, InvalidReason.WRONG_LENGTH,
                f"{guess!r} has {len(guess)} letters, expected {WORD_LENGTH}"
            )
        if not self.dictionary.contains(guess):
            return Invalid(
                guess, InvalidReason.NOT_IN_DICTIONARY,
                f"{guess!r} is not a valid word"
            )
        if self.strict:
            return self._check_hints(guess)
        return None

    def _check_hints(self, guess: str) -> Optional[Invalid]:
        """Hard mode: revealed exact letters stay put, revealed letters are reused."""
        required: Counter[str] = Counter()
        for past, result in self._history:
            revealed: Counter[str] = Counter()
            for i, (letter, feedback) in enumerate(zip(past, result.feedback)):
                if feedback == LetterFeedback.EXACT and guess[i] != letter:
                    return Invalid(
                        guess, InvalidReason.MISSING_EXACT,
                        f"position {i + 1} must be {letter!r}"
                    )
                if feedback != LetterFeedback.ABSENT:
                    revealed[letter] += 1
            required |= revealed

        have = Counter(guess)
        for letter, count in sorted(required.items()):
            if have[letter] < count:
                return Invalid(
                    guess, InvalidReason.MISSING_PRESENT,
                    f"guess must contain {letter!r}" + (f" {count} times" if count > 1 else "")
                )
        return None

    def __repr__(self) -> str:
        return (
            f"Session(status={self._status.value}, attempts={self._attempts}/"
            f"{self.max_attempts}, strict={self.strict})"
        )
