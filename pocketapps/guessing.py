"""Number guessing game: pick a difficulty, then find the secret number."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum
from typing import Callable, Optional, Protocol

LEVELS = {1: 10, 2: 100, 3: 1000}
DEFAULT_MAX_NUMBER = 100
MAX_ATTEMPTS = 10
HINT_ATTEMPTS = frozenset({3, 5})

Reader = Callable[[], str]
Writer = Callable[[str], object]


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class GuessResult(Enum):
    """Outcome of a single guess."""

    CORRECT = "correct"
    TOO_LOW = "too low"
    TOO_HIGH = "too high"


def max_for_level(level: int) -> int:
    """Return the largest possible secret for a difficulty level (1, 2 or 3)."""
    try:
        return LEVELS[level]
    except KeyError:
        raise ValueError(f"unknown difficulty level: {level!r}") from None


class GuessingGame:
    """State of one round: the secret, the guesses made and whether it was found."""

    def __init__(
        self,
        max_number: int,
        secret: Optional[int] = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        if max_number < 1:
            raise ValueError("max_number must be at least 1")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if secret is None:
            secret = random.randint(1, max_number)
        elif not 1 <= secret <= max_number:
            raise ValueError(f"secret must lie between 1 and {max_number}")
        self.max_number = max_number
        self.secret = secret
        self.max_attempts = max_attempts
        self.history: list[int] = []
        self.won = False

    @property
    def attempts(self) -> int:
        return len(self.history)

    @property
    def finished(self) -> bool:
        return self.won or self.attempts >= self.max_attempts

    def guess(self, value: int) -> GuessResult:
        """Record a guess and say how it compares with the secret."""
        if self.finished:
            raise RuntimeError("the game is already over")
        self.history.append(value)
        if value == self.secret:
            self.won = True
            return GuessResult.CORRECT
        return GuessResult.TOO_LOW if value < self.secret else GuessResult.TOO_HIGH

    def hint(self) -> Optional[str]:
        """Return a parity hint after the third and fifth missed guesses."""
        if self.won or self.attempts not in HINT_ATTEMPTS:
            return None
        parity = "even" if self.secret % 2 == 0 else "odd"
        return f"It's an {parity} number"

    def score(self) -> int:
        return 100 - self.attempts * 10


def _read_int(read: Reader) -> Optional[int]:
    tokens = read().split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _choose_max(read: Reader, write: Writer) -> int:
    write("\nChoose Difficulty Level:\n")
    write("1. Easy (1 - 10)\n")
    write("2. Medium (1 - 100)\n")
    write("3. Hard (1 - 1000)\n")
    write("Enter your choice: ")
    level = _read_int(read)
    try:
        return max_for_level(level)
    except ValueError:
        write("Invalid choice! Defaulting to Medium.\n")
        return DEFAULT_MAX_NUMBER


def play_game(read: Reader, write: Writer, rng: Optional[_RandomSource] = None) -> bool:
    """Play one round through the given reader and writer; return True on a win."""
    source = rng if rng is not None else random
    max_number = _choose_max(read, write)
    game = GuessingGame(max_number, secret=source.randint(1, max_number))

    write(f"\nYou have {game.max_attempts} attempts to guess the number!\n")

    while not game.finished:
        write(f"\nAttempt {game.attempts + 1} - Enter your guess: ")
        value = _read_int(read)
        if value is None:
            write("Please enter a whole number.\n")
            continue

        result = game.guess(value)
        if result is GuessResult.CORRECT:
            write(f"🎉 Correct! You guessed it in {game.attempts} tries.\n")
            write(f"Your Score: {game.score()}\n")
            return True

        write("Too low!" if result is GuessResult.TOO_LOW else "Too high!")
        hint = game.hint()
        if hint:
            write(f" (Hint: {hint})")
        write("\nPrevious guesses: " + "".join(f"{g} " for g in game.history) + "\n")

    write(f"\n💥 You've used all attempts. The number was: {game.secret}\n")
    return False


def _wants_another(read: Reader) -> bool:
    return read().strip()[:1] in ("y", "Y")


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="guessing", description="Guess the secret number in ten attempts."
    )
    parser.parse_args(argv)
    read, write = input, _write_stdout
    try:
        while True:
            write("\n🎮 Starting New Game...\n")
            play_game(read, write, random.Random())
            write("\nDo you want to play again? (y/n): ")
            if not _wants_another(read):
                break
    except EOFError:
        write("\n")
    write("\n👋 Thanks for playing. Goodbye!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())