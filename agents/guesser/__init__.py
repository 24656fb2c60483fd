"""
Guesser agents for the guessing game.

This module provides agents that choose guesses from a session's public
history, used for simulation and experiments.
"""

from agents.guesser.base_guesser import BaseGuesser, GuesserParams
from agents.guesser.random_guesser import RandomGuesser
from agents.guesser.candidate_guesser import CandidateGuesser

__all__ = [
    "BaseGuesser",
    "GuesserParams",
    "RandomGuesser",
    "CandidateGuesser",
]
