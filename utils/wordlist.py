"""
Word list utilities.

Reads raw candidate words from disk. Curation (length, apostrophes, proper
nouns) is left to core.dictionary.Dictionary.load().
"""

from pathlib import Path
from typing import Optional
import logging
import os

from core.dictionary import Dictionary

logger = logging.getLogger(__name__)


# Environment variable naming a word list to use instead of the system one
WORDLIST_ENV_VAR = "WORDLE_DICT"

# Standard locations of the system word list
SYSTEM_WORDLISTS = (
    "/usr/share/dict/words",
    "/usr/dict/words",
)

# Used when no word list can be found at all
FALLBACK_WORDS = [
    "about", "above", "actor", "adult", "after", "again", "agent", "alarm",
    "album", "alert", "alike", "alive", "allow", "alone", "angle", "apple",
    "apply", "arena", "argue", "arise", "aside", "audio", "award", "badge",
    "basic", "beach", "begin", "bench", "birth", "black", "blade", "blame",
    "blank", "blind", "block", "blood", "board", "boost", "brain", "brand",
    "bread", "break", "brick", "brief", "bring", "broad", "brown", "build",
    "cabin", "candy", "carry", "catch", "cause", "chain", "chair", "chart",
    "cheap", "check", "chest", "chief", "child", "civil", "claim", "class",
    "clean", "clear", "climb", "clock", "close", "cloud", "coach", "coast",
    "count", "court", "cover", "crane", "crash", "cream", "crowd", "dance",
    "draft", "drama", "dream", "dress", "drink", "drive", "eager", "early",
    "earth", "eight", "empty", "enjoy", "enter", "entry", "equal", "error",
    "event", "exact", "extra", "faith", "false", "field", "fight", "final",
    "first", "flame", "floor", "focus", "force", "frame", "fresh", "front",
    "fruit", "giant", "given", "glass", "grace", "grade", "grand", "grant",
    "grass", "great", "green", "group", "guard", "guess", "guide", "happy",
    "heart", "heavy", "horse", "hotel", "house", "human", "ideal", "image",
    "input", "judge", "knife", "label", "large", "laser", "later", "laugh",
    "layer", "learn", "lemon", "level", "light", "limit", "local", "logic",
    "loose", "lucky", "lunch", "magic", "major", "march", "match", "metal",
    "model", "money", "month", "motor", "mouse", "mouth", "music", "nerve",
    "never", "night", "noise", "north", "novel", "nurse", "ocean", "offer",
    "order", "other", "paint", "panel", "paper", "party", "peace", "phase",
    "phone", "piano", "piece", "pilot", "place", "plain", "plane", "plant",
    "plate", "point", "power", "press", "price", "pride", "prime", "print",
    "prize", "proof", "proud", "queen", "quick", "quiet", "radio", "raise",
    "range", "rapid", "ratio", "reach", "ready", "river", "robot", "rotor",
    "round", "route", "royal", "rural", "scale", "scene", "scoop", "score",
    "sense", "serve", "seven", "shape", "share", "sharp", "sheep", "shelf",
    "shift", "shirt", "shock", "shoot", "short", "sight", "skill", "sleep",
    "slice", "small", "smart", "smile", "smoke", "solid", "sound", "south",
    "space", "spare", "speak", "speed", "spend", "sport", "staff", "stage",
    "stake", "stand", "stare", "start", "state", "steam", "steel", "stick",
    "stone", "store", "storm", "story", "study", "style", "sugar", "sweet",
    "table", "taste", "teach", "thank", "theme", "thick", "thing", "think",
    "three", "throw", "tiger", "title", "today", "topic", "total", "touch",
    "tower", "trace", "track", "trade", "train", "treat", "trend", "trial",
    "truck", "trust", "truth", "uncle", "union", "unity", "upper", "urban",
    "usual", "valid", "value", "video", "visit", "voice", "waste", "watch",
    "water", "wheel", "white", "whole", "woman", "world", "worry", "write",
    "wrong", "young", "youth",
]


def load_wordlist(filepath: str) -> list[str]:
    """
    Load raw candidate words from file.

    Args:
        filepath: Path to wordlist file (one word per line).

    Returns:
        List of words exactly as written, minus surrounding whitespace.

    Raises:
        FileNotFoundError: If wordlist file doesn't exist.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Wordlist file not found: {filepath}")

    words = []
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        for line in f:
            word = line.strip()
            if word:  # Skip empty lines
                words.append(word)

    return words


def find_system_wordlist() -> Optional[str]:
    """
    Locate the system word list.

    Returns:
        First existing path from SYSTEM_WORDLISTS, or None
    """
    for candidate in SYSTEM_WORDLISTS:
        if os.path.isfile(candidate):
            return candidate
    return None


def load_default_dictionary(filepath: Optional[str] = None) -> Dictionary:
    """
    Build a curated dictionary from the best available word list.

    The path is resolved from the argument, then the WORDLE_DICT environment
    variable, then the system locations. If none exists, FALLBACK_WORDS is
    used.

    Args:
        filepath: Explicit word list path

    Returns:
        Curated Dictionary

    Raises:
        FileNotFoundError: If an explicitly named word list doesn't exist.
        EmptyDictionaryError: If the list holds no valid words.
    """
    if filepath is None:
        filepath = os.environ.get(WORDLIST_ENV_VAR) or find_system_wordlist()

    if filepath is None:
        logger.warning("no word list found, using built-in fallback of %d words", len(FALLBACK_WORDS))
        return Dictionary.load(FALLBACK_WORDS)

    dictionary = Dictionary.load(load_wordlist(filepath))
    logger.info("loaded %d words into memory from %s", dictionary.size(), filepath)
    return dictionary
