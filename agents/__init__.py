"""
Agents package for the guessing game.

Modules:
    guesser: Guesser agent implementations (RandomGuesser, CandidateGuesser)
"""

from agents.guesser import (
    BaseGuesser,
    RandomGuesser,
    CandidateGuesser,
    GuesserParams
)

__all__ = [
    "BaseGuesser",
    "RandomGuesser",
    "CandidateGuesser",
    "GuesserParams",
]
