"""Terminal to-do list manager with categories and completion status."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

RESET = "\033[0m"
BOLD = "\033[1m"
GREEN = "\033[32m"
CYAN = "\033[36m"
YELLOW = "\033[33m"
RED = "\033[31m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CLEAR_SCREEN = "\033[2J\033[1;1H"

CHECK_MARK = "+"
X_MARK = "X"
DEFAULT_CATEGORY = "other"
MAX_DESCRIPTION = 30

SEPARATOR = "+---+-----+---------------------------------+-----------+"
TITLE_ART = (
    " _____         _         _     _     _   \n"
    "|_   _|___  __| |___    | |   (_)___| |_ \n"
    "  | |/ _ \\ / _` / _ \\   | |   | / __| __|\n"
    "  | | (_) | (_| | (_) |  | |__| \\__ \\ |_ \n"
    "  |_|\\___/ \\__,_\\___/   |____|_|___/\\__|\n"
)
TITLE_RULE = "------------------------------------------\n"

Reader = Callable[[], str]
Writer = Callable[[str], object]


def supports_colors(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Tell whether the terminal is expected to understand ANSI colour codes."""
    if sys.platform == "win32":
        return True
    env = os.environ if environ is None else environ
    term = env.get("TERM")
    return term is not None and term != "dumb"


def _paint(code: str, text: str, color: bool) -> str:
    return f"{code}{text}{RESET}" if color else text


class TaskNumberError(IndexError):
    """A task number does not name a task in the list."""


class TaskAlreadyCompletedError(ValueError):
    """The task was already marked as completed."""


@dataclass
class Task:
    description: str
    category: str = DEFAULT_CATEGORY
    completed: bool = False

    def status_mark(self, color: bool = False) -> str:
        if self.completed:
            return _paint(GREEN, CHECK_MARK, color)
        return _paint(RED, X_MARK, color)


class TodoList:
    """An ordered list of tasks addressed by 1-based numbers."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self):
        return iter(self._tasks)

    def add(self, description: str, category: str = "") -> Task:
        """Append a task; an empty category becomes "other"."""
        if not description:
            raise ValueError("Task cannot be empty!")
        task = Task(description, category or DEFAULT_CATEGORY)
        self._tasks.append(task)
        return task

    def _task(self, number: int) -> Task:
        if not 1 <= number <= len(self._tasks):
            raise TaskNumberError(f"Invalid task number: {number}")
        return self._tasks[number - 1]

    def complete(self, number: int) -> Task:
        task = self._task(number)
        if task.completed:
            raise TaskAlreadyCompletedError("This task is already completed!")
        task.completed = True
        return task

    def delete(self, number: int) -> Task:
        self._task(number)
        return self._tasks.pop(number - 1)

    def completed_count(self) -> int:
        return sum(task.completed for task in self._tasks)

    def pending_count(self) -> int:
        return len(self._tasks) - self.completed_count()

    def render_table(self, color: bool = False) -> str:
        """Return the task list as an ASCII table."""
        bold = BOLD if color else ""
        reset = RESET if color else ""
        header = (
            f"| # | {bold}S{reset}   | {bold}Description{reset}"
            f"                     | {bold}Category{reset}   |"
        )
        lines = [SEPARATOR, header, SEPARATOR]
        for number, task in enumerate(self._tasks, start=1):
            desc = task.description
            if len(desc) > MAX_DESCRIPTION:
                desc = desc[:27] + "..."
            lines.append(
                f"| {number:<1} | {task.status_mark(color):<3} | {desc:<31} | {task.category:<9} |"
            )
        lines.append(SEPARATOR)
        return "\n".join(lines) + "\n"


def _title(color: bool) -> str:
    return _paint(CYAN, TITLE_ART, color) + _paint(YELLOW, TITLE_RULE, color)


_MENU_ITEMS = (
    "Add new task",
    "View all tasks",
    "Mark task as completed",
    "Delete task",
    "Exit application",
)


def _menu(color: bool) -> str:
    entries = "".join(
        f"{_paint(BLUE, f' [{n}]', color)} {label}\n"
        for n, label in enumerate(_MENU_ITEMS, start=1)
    )
    return "\nMENU OPTIONS:\n" + entries + _paint(YELLOW, "\n > ", color)


def _first_int(text: str) -> Optional[int]:
    tokens = text.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


class _Session:
    def __init__(self, todo: TodoList, read: Reader, write: Writer, color: bool) -> None:
        self.todo = todo
        self.read = read
        self.write = write
        self.color = color

    def paint(self, code: str, text: str) -> str:
        return _paint(code, text, self.color)

    def screen(self) -> None:
        self.write(CLEAR_SCREEN)
        self.write(_title(self.color))

    def pause(self) -> None:
        self.write("\nPress Enter to continue...")
        self.read()

    def heading(self, text: str) -> None:
        bold = BOLD if self.color else ""
        self.write(self.paint(MAGENTA + bold, f"\n{text}") if self.color else f"\n{text}")

    def empty_notice(self) -> bool:
        if len(self.todo):
            return False
        self.write(self.paint(YELLOW, "\nYour task list is empty!") + "\n")
        self.pause()
        return True

    def add(self) -> None:
        self.screen()
        self.heading("ADD NEW TASK")
        self.write("\n")
        self.write("\nTask description: ")
        description = self.read()
        if not description:
            self.write(self.paint(RED, "Task cannot be empty! Press Enter to continue..."))
            self.read()
            return
        self.write("Category (work/personal/study/other): ")
        category = self.read()
        self.todo.add(description, category)
        self.write(self.paint(GREEN, "\nTask added successfully!") + "\n")
        self.pause()

    def view(self) -> None:
        self.screen()
        if self.empty_notice():
            return
        self.heading("TASK LIST")
        self.write("\n\n")
        self.write(self.todo.render_table(self.color))
        self.write(
            f"\nTotal: {len(self.todo)} tasks | "
            + self.paint(GREEN, f"Completed: {self.todo.completed_count()}")
            + " | "
            + self.paint(RED, f"Pending: {self.todo.pending_count()}")
            + "\n"
        )
        self.pause()

    def list_tasks(self) -> None:
        for number, task in enumerate(self.todo, start=1):
            self.write(
                f"{self.paint(BLUE, f'{number}.')} [{task.status_mark(self.color)}] "
                f"{task.description}\n"
            )

    def pick(self, heading: str, prompt: str) -> Optional[int]:
        """Show the tasks and ask for a number; None means cancel or empty list."""
        self.screen()
        if self.empty_notice():
            return None
        self.heading(heading)
        self.write("\n\n")
        self.list_tasks()
        self.write(prompt)
        number = _first_int(self.read()) or 0
        return number or None

    def complete(self) -> None:
        number = self.pick(
            "MARK TASK AS COMPLETED",
            "\nEnter task number to mark as completed (0 to cancel): ",
        )
        if number is None:
            return
        try:
            self.todo.complete(number)
        except TaskAlreadyCompletedError:
            self.write(self.paint(YELLOW, "\nThis task is already completed!") + "\n")
        except TaskNumberError:
            self.write(self.paint(RED, "\nInvalid task number!") + "\n")
        else:
            self.write(self.paint(GREEN, "\nTask marked as completed!") + "\n")
        self.pause()

    def delete(self) -> None:
        number = self.pick("DELETE TASK", "\nEnter task number to delete (0 to cancel): ")
        if number is None:
            return
        if 1 <= number <= len(self.todo):
            self.write(self.paint(RED, "\nAre you sure you want to delete this task? (y/n): "))
            if self.read().strip()[:1].lower() == "y":
                self.todo.delete(number)
                self.write(self.paint(GREEN, "\nTask deleted successfully!") + "\n")
        else:
            self.write(self.paint(RED, "\nInvalid task number!") + "\n")
        self.pause()


def run(read: Reader, write: Writer, color: bool = False) -> TodoList:
    """Run the menu until Exit is chosen; return the list as it was left."""
    session = _Session(TodoList(), read, write, color)
    actions = {1: session.add, 2: session.view, 3: session.complete, 4: session.delete}
    while True:
        session.screen()
        write(_menu(color))
        choice = _first_int(read())
        if choice is None:
            continue
        if choice == 5:
            write(CLEAR_SCREEN)
            write(session.paint(GREEN, "\nThank you for using ToDo List Manager!") + "\n")
            return session.todo
        action = actions.get(choice)
        if action is None:
            write(session.paint(RED, "\nInvalid choice! Press Enter to continue..."))
            read()
            continue
        action()


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="todo", description="Manage a to-do list.")
    parser.parse_args(argv)
    try:
        run(input, _write_stdout, supports_colors())
    except EOFError:
        _write_stdout("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())