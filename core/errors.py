"""
Exception types raised by the game engine.

Invalid guesses are not exceptions: they come back from
Session.submit_guess as an Invalid outcome so the game loop can re-prompt.
"""


class WordleError(Exception):
    """Base class for engine errors."""


class EmptyDictionaryError(WordleError):
    """Raised when curation leaves no playable words."""


class SessionClosedError(WordleError):
    """Raised when a guess is submitted to a session that already ended."""
