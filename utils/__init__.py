"""
Utility functions and constants for the guessing game.
"""

from utils.wordlist import (
    load_wordlist,
    find_system_wordlist,
    load_default_dictionary,
    FALLBACK_WORDS,
    SYSTEM_WORDLISTS,
)
from utils.device import get_device, get_device_name

__all__ = [
    "load_wordlist",
    "find_system_wordlist",
    "load_default_dictionary",
    "FALLBACK_WORDS",
    "SYSTEM_WORDLISTS",
    "get_device",
    "get_device_name",
]
