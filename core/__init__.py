"""
Core game logic for the five-letter guessing game.

This module provides dictionary curation, target selection, batched letter
feedback and the single-game session state machine. Rendering, input and
persistence live outside the core.
"""

from core.errors import WordleError, EmptyDictionaryError, SessionClosedError
from core.dictionary import Dictionary, WORD_LENGTH
from core.target_selector import TargetSelector
from core.feedback import LetterFeedback, GuessResult, classify, classify_batch, encode_words
from core.session import (
    Session,
    SessionStatus,
    InvalidReason,
    Invalid,
    Evaluated,
    SubmitOutcome,
    DEFAULT_MAX_ATTEMPTS,
)

__all__ = [
    "WordleError",
    "EmptyDictionaryError",
    "SessionClosedError",
    "Dictionary",
    "WORD_LENGTH",
    "TargetSelector",
    "LetterFeedback",
    "GuessResult",
    "classify",
    "classify_batch",
    "encode_words",
    "Session",
    "SessionStatus",
    "InvalidReason",
    "Invalid",
    "Evaluated",
    "SubmitOutcome",
    "DEFAULT_MAX_ATTEMPTS",
]
