"""
Terminal front end for the guessing game.

Loads a word list (argument, WORDLE_DICT, or the system list), picks a target
and prompts for guesses until the game is won or lost. Engine logs go to a
file so they don't interleave with the prompt.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from core import (
    EmptyDictionaryError,
    Evaluated,
    GuessResult,
    LetterFeedback,
    Session,
    SessionStatus,
    DEFAULT_MAX_ATTEMPTS,
)
from utils.wordlist import load_default_dictionary

logger = logging.getLogger(__name__)


def render_result(result: GuessResult) -> str:
    """
    Render feedback as text.

    Exact letters are shown uppercase in brackets, present letters in
    parentheses, absent letters bare.
    """
    cells = []
    for letter, feedback in zip(result.guess, result.feedback):
        if feedback == LetterFeedback.EXACT:
            cells.append(f"[{letter.upper()}]")
        elif feedback == LetterFeedback.PRESENT:
            cells.append(f"({letter})")
        else:
            cells.append(f" {letter} ")
    return "".join(cells)


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Guess the five-letter word.")
    parser.add_argument("wordlist", nargs="?", default=None,
                        help="Word list file, one word per line (default: system list)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for target selection")
    parser.add_argument("--max-attempts", type=positive_int, default=DEFAULT_MAX_ATTEMPTS,
                        help="Valid guesses allowed (default: %(default)s)")
    parser.add_argument("--strict", action="store_true",
                        help="Hard mode: revealed hints must be used in later guesses")
    parser.add_argument("--log-file", default="wordle.log", help="Log file (default: %(default)s)")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        filename=args.log_file,
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        dictionary = load_default_dictionary(args.wordlist)
    except (FileNotFoundError, EmptyDictionaryError) as e:
        logger.error("cannot start session: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    session = Session(dictionary, seed=args.seed, max_attempts=args.max_attempts, strict=args.strict)

    while not session.is_over:
        try:
            raw = input(f"please enter your guess #{session.attempts + 1}: ")
        except EOFError:
            print()
            return 1

        outcome = session.submit_guess(raw.strip())
        if not isinstance(outcome, Evaluated):
            print(f"  {outcome.message}")
            continue

        print(f"  {render_result(outcome.result)}")

    if session.status == SessionStatus.WON:
        print(f"congratulations, you found the word in {session.attempts} tries!")
    else:
        print(f"You have used up all {session.max_attempts} attempts. Word is {session.target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
