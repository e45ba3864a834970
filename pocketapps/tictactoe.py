"""Two-player tic-tac-toe on the terminal."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
CYAN = "\033[36m"
BOLD = "\033[1m"
CLEAR_SCREEN = "\033[2J\033[H"

PLAYERS = ("X", "O")
_CELL_COLORS = {"X": RED, "O": GREEN}
_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

Reader = Callable[[], str]
Writer = Callable[[str], object]


class InvalidMoveError(ValueError):
    """A move names no square from 1 to 9."""


class SpotTakenError(InvalidMoveError):
    """A move names a square that is already occupied."""


class Board:
    """A 3x3 board whose free squares show their numbers 1 to 9."""

    def __init__(self) -> None:
        self._cells = [str(n) for n in range(1, 10)]

    @property
    def cells(self) -> tuple[str, ...]:
        return tuple(self._cells)

    def place(self, position: int, player: str) -> None:
        """Put the player's mark on square 1-9."""
        if player not in PLAYERS:
            raise ValueError(f"unknown player: {player!r}")
        if isinstance(position, bool) or not isinstance(position, int) or not 1 <= position <= 9:
            raise InvalidMoveError(f"position must be between 1 and 9, got {position!r}")
        index = position - 1
        if self._cells[index] in PLAYERS:
            raise SpotTakenError(f"square {position} is already taken")
        self._cells[index] = player

    def has_won(self, player: str) -> bool:
        return any(all(self._cells[i] == player for i in line) for line in _LINES)

    def is_full(self) -> bool:
        return all(cell in PLAYERS for cell in self._cells)

    def render(self, color: bool = True) -> str:
        def paint(code: str, text: str) -> str:
            return f"{code}{text}{RESET}" if color else text

        rows = (self._cells[start:start + 3] for start in (0, 3, 6))
        lines = [
            paint(YELLOW, "|").join(paint(_CELL_COLORS.get(c, BLUE), f" {c} ") for c in row)
            for row in rows
        ]
        return ("\n" + paint(YELLOW, "---+---+---\n")).join(lines) + "\n"


def _display(board: Board, write: Writer) -> None:
    write(CLEAR_SCREEN)
    write(f"{BOLD}{CYAN}🎮 TIC-TAC-TOE\n{RESET}")
    write(
        f"{YELLOW}Player 1 ({RED}X{YELLOW}) vs Player 2 ({GREEN}O{YELLOW})\n\n{RESET}"
    )
    write(board.render())


def _take_move(board: Board, player: str, read: Reader, write: Writer) -> None:
    while True:
        write(f"{CYAN}Player {player}{RESET}, enter your move (1-9): ")
        tokens = read().split()
        try:
            board.place(int(tokens[0]), player)
        except SpotTakenError:
            write(f"{RED}❌ Spot taken! Choose another.\n{RESET}")
        except (IndexError, ValueError):
            write(f"{RED}❌ Invalid input! Enter a number between 1-9.\n{RESET}")
        else:
            return


def play_game(read: Reader, write: Writer) -> Optional[str]:
    """Play one game; return the winning mark, or None for a draw."""
    board = Board()
    player = "X"
    while True:
        _display(board, write)
        _take_move(board, player, read, write)
        if board.has_won(player):
            _display(board, write)
            write(f"{GREEN}🎉 Player {player} wins!\n{RESET}")
            return player
        if board.is_full():
            _display(board, write)
            write(f"{YELLOW}🤝 It's a draw!\n{RESET}")
            return None
        player = "O" if player == "X" else "X"


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="tictactoe", description="Two-player tic-tac-toe.")
    parser.parse_args(argv)
    read, write = input, _write_stdout
    try:
        while True:
            play_game(read, write)
            write(f"{CYAN}Would you like to play again? (y/n): {RESET}")
            if read().strip()[:1] not in ("y", "Y"):
                break
    except EOFError:
        write("\n")
    write("✅ Exiting Tic-Tac-Toe. Goodbye!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())