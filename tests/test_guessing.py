import io
import sys

import pytest

from pocketapps.guessing import (
    MAX_ATTEMPTS,
    GuessResult,
    GuessingGame,
    main,
    max_for_level,
    play_game,
)


def scripted(*lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.bounds = []

    def randint(self, a, b):
        self.bounds.append((a, b))
        return self.value


@pytest.mark.parametrize("level, expected", [(1, 10), (2, 100), (3, 1000)])
def test_max_for_level(level, expected):
    assert max_for_level(level) == expected


@pytest.mark.parametrize("level", [0, 4, -1, None])
def test_max_for_level_rejects_unknown(level):
    with pytest.raises(ValueError):
        max_for_level(level)


def test_guess_results_and_history():
    game = GuessingGame(100, secret=42)
    assert game.guess(10) is GuessResult.TOO_LOW
    assert game.guess(50) is GuessResult.TOO_HIGH
    assert game.guess(42) is GuessResult.CORRECT
    assert game.history == [10, 50, 42]
    assert game.attempts == len(game.history)
    assert game.won and game.finished


def test_first_try_score():
    game = GuessingGame(10, secret=3)
    game.guess(3)
    assert game.score() == 90


def test_score_drops_with_each_attempt():
    quick = GuessingGame(10, secret=5)
    quick.guess(5)
    slow = GuessingGame(10, secret=5)
    slow.guess(1)
    slow.guess(5)
    assert quick.score() - slow.score() == 10


def test_hints_on_third_and_fifth_miss():
    game = GuessingGame(100, secret=42)
    hints = []
    for value in (1, 2, 3, 4, 5, 6):
        game.guess(value)
        hints.append(game.hint())
    assert [h is not None for h in hints] == [False, False, True, False, True, False]
    assert "even" in hints[2]


def test_odd_hint():
    game = GuessingGame(100, secret=7)
    for value in (1, 2, 3):
        game.guess(value)
    assert "odd" in game.hint()


def test_no_hint_after_win():
    game = GuessingGame(100, secret=3)
    for value in (1, 2, 3):
        game.guess(value)
    assert game.hint() is None


def test_attempts_run_out():
    game = GuessingGame(10, secret=1)
    for _ in range(MAX_ATTEMPTS):
        game.guess(2)
    assert game.finished and not game.won
    with pytest.raises(RuntimeError):
        game.guess(1)


@pytest.mark.parametrize("secret", [0, 11, -3])
def test_secret_out_of_range(secret):
    with pytest.raises(ValueError):
        GuessingGame(10, secret=secret)


def test_random_secret_in_range():
    secrets = {GuessingGame(10).secret for _ in range(200)}
    assert secrets <= set(range(1, 11))


def test_play_game_win():
    rng = FixedRng(7)
    out = []
    assert play_game(scripted("1", "3", "9", "7"), out.append, rng) is True
    text = "".join(out)
    assert rng.bounds == [(1, 10)]
    assert "Too low!" in text
    assert "Too high!" in text
    assert "Previous guesses: 3 9 " in text
    assert "Correct!" in text


def test_play_game_shows_hint():
    out = []
    play_game(scripted("2", "1", "2", "3", "7"), out.append, FixedRng(7))
    assert "(Hint: It's an odd number)" in "".join(out)


def test_invalid_level_defaults_to_medium():
    rng = FixedRng(7)
    out = []
    assert play_game(scripted("9", "7"), out.append, rng) is True
    assert "Defaulting to Medium" in "".join(out)
    assert rng.bounds == [(1, 100)]


def test_play_game_loss():
    out = []
    result = play_game(scripted("1", *["1"] * MAX_ATTEMPTS), out.append, FixedRng(7))
    text = "".join(out)
    assert result is False
    assert "The number was: 7" in text
    assert text.count("Too low!") == MAX_ATTEMPTS


def test_non_number_guess_is_asked_again():
    out = []
    assert play_game(scripted("1", "abc", "7"), out.append, FixedRng(7)) is True
    assert "".join(out).count("Attempt 1 - Enter your guess: ") == 2


def test_main_says_goodbye_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "Starting New Game" in output
    assert "Goodbye" in output