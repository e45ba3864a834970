# pocketapps

This package has five small interactive programs for the terminal. You can run each one as a command or import it as a library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command            | What it does                                                        |
|--------------------|---------------------------------------------------------------------|
| `pocket-guess`     | Guess a secret number in 10 attempts, with hints and a score        |
| `pocket-calc`      | Menu-driven integer calculator (add, subtract, multiply, divide)    |
| `pocket-tictactoe` | Two-player tic-tac-toe on a coloured board                          |
| `pocket-todo`      | To-do list manager with categories and a status table               |
| `pocket-library`   | Add, search, check out and return books, with overdue fines         |

Each command takes only `-h`/`--help`. Pressing end-of-input (Ctrl-D) ends a program cleanly.

### Number guessing (`pocketapps.guessing`)

Choose a difficulty:

- easy: 1–10
- medium: 1–100
- hard: 1–1000

Any other choice selects medium.

You have 10 attempts. After each wrong guess the game says "Too low!" or "Too high!" and lists your guesses so far. After the 3rd and 5th wrong guesses it also says whether the number is even or odd. Input that is not a whole number is rejected and does not count as an attempt. A win scores `100 - 10 × attempts`. After each round the game asks whether you want to play again.

The logic is also available as a library:

- `GuessingGame(max_number, secret=None, max_attempts=10)` has these members:
  - `guess(value)` returns a `GuessResult`.
  - `hint()` returns the parity hint, or `None`.
  - `score()` returns the score.
  - `history`, `attempts`, `won` and `finished` hold the state of the round.
- `max_for_level(level)` maps 1, 2 or 3 to the top of the range. It raises `ValueError` for any other level.

### Calculator (`pocketapps.calculator`)

Pick an operation from 1 to 4, or pick 5 to exit, then enter two integers.

- Division gives a real result.
- Division by zero prints an error and shows a result of 0.
- A choice that is not a number, or is outside 1–5, is rejected.

In code:

- `add`, `subtract`, `multiply` and `divide` each take two integers.
- `divide` raises `ZeroDivisionError` on a zero divisor.
- `calculate(choice, a, b)` applies the operation with that menu number. The menu numbers are the values of `Operation`.

### Tic-tac-toe (`pocketapps.tictactoe`)

Players X and O take turns entering a position from 1 to 9. If the spot is taken, or the input is outside that range, the move is rejected and the same player is asked again. The game ends on a win or a draw, and then offers a rematch.

`Board` has these members:

- `place(position, player)` raises `InvalidMoveError` for a bad position and `SpotTakenError` for an occupied one.
- `has_won(player)` and `is_full()` report the state of the game.
- `render(color=True)` returns the board as text.

### To-do list (`pocketapps.todo`)

From the menu you can add a task, view all tasks as a table, mark a task as completed, or delete a task. Deleting asks for confirmation.

- A task needs a description.
- An empty category becomes `other`.
- Descriptions longer than 30 characters are shortened in the table.

Colours are used on Windows, and elsewhere when the `TERM` environment variable is set to something other than `dumb` (see `supports_colors()`).

`TodoList` has these members:

- `add(description, category="")`, `complete(number)` and `delete(number)`.
- `completed_count()` and `pending_count()`.
- `render_table(color=False)` returns the table as text.

Task numbers start at 1. A number outside the list raises `TaskNumberError`. Completing a task twice raises `TaskAlreadyCompletedError`.

### Library (`pocketapps.library`)

Search returns the first book whose title or author contains the text, or whose ISBN equals it. The fine is 1 per overdue day.

`Library(fine_rate=1)` has these members:

- `add_book(title, author, isbn)`, `search(key)`, `checkout(isbn)` and `return_book(isbn)`.
- `fine(days)` returns the fine.

These members raise errors, all subclasses of `LibraryError`:

- `search`, `checkout` and `return_book` raise `BookNotFoundError` when no book matches.
- `checkout` raises `AlreadyCheckedOutError` for a book that is already out.
- `return_book` raises `NotCheckedOutError` for a book that is already on the shelf.

## Library use

```python
from pocketapps.tictactoe import Board
from pocketapps.library import Library
from pocketapps.todo import TodoList
from pocketapps.calculator import calculate

board = Board()
for position in (1, 2, 3):
    board.place(position, "X")
assert board.has_won("X")

lib = Library(fine_rate=1)
lib.add_book("Dune", "Frank Herbert", "9780000000001")
lib.checkout("9780000000001")
print(lib.search("Dune").describe())

todo = TodoList()
todo.add("Write report", "work")
todo.complete(1)
print(todo.render_table(color=False))

print(calculate(4, 7, 2))  # 3.5
```

Each interactive loop (`run` or `play_game` in each module) takes a `read` callable and a `write` callable instead of using the terminal directly. You can drive them from scripts or tests.

## What it does not do

The to-do list and the library keep their data in memory only. Nothing is saved to disk, so tasks and books are gone when the program exits. Tic-tac-toe is for two human players; there is no computer opponent.