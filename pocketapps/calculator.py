"""Menu-driven integer calculator."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import Callable, Optional, Union

RED = "\033[1;31m"
GREEN = "\033[1;32m"
BLUE = "\033[1;34m"
RESET = "\033[0m"

Reader = Callable[[], str]
Writer = Callable[[str], object]
Number = Union[int, float]


class Operation(IntEnum):
    """Menu entries of the calculator."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4
    EXIT = 5


def add(a: int, b: int) -> int:
    return a + b


def subtract(a: int, b: int) -> int:
    return a - b


def multiply(a: int, b: int) -> int:
    return a * b


def divide(a: int, b: int) -> float:
    """Divide as real numbers; dividing by zero raises ZeroDivisionError."""
    if b == 0:
        raise ZeroDivisionError("Division by zero is undefined.")
    return a / b


_OPERATIONS = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
}


def calculate(choice: Union[int, Operation], a: int, b: int) -> Number:
    """Apply the operation chosen by menu number to two integers."""
    operation = Operation(choice)
    try:
        func = _OPERATIONS[operation]
    except KeyError:
        raise ValueError(f"{operation.name} is not an arithmetic operation") from None
    return func(a, b)


MENU = (
    f"\n{BLUE}==== SIMPLE CALCULATOR ===={RESET}\n"
    "1. Addition (+)\n"
    "2. Subtraction (-)\n"
    "3. Multiplication (*)\n"
    "4. Division (/)\n"
    "5. Exit\n"
    "Enter your choice (1-5): "
)


def _format(value: Number) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def _read_operands(read: Reader) -> tuple[int, int]:
    tokens: list[str] = []
    while len(tokens) < 2:
        tokens.extend(read().split())
    return int(tokens[0]), int(tokens[1])


def run(read: Reader, write: Writer) -> None:
    """Run the calculator menu until the user chooses Exit."""
    while True:
        write(MENU)
        tokens = read().split()
        try:
            choice = int(tokens[0])
        except (IndexError, ValueError):
            write(f"{RED}Invalid input. Please enter a valid number (1-5).{RESET}\n")
            continue

        if choice == Operation.EXIT:
            write(f"{GREEN}Thank you for using the calculator!{RESET}\n")
            return

        if not Operation.ADD <= choice <= Operation.EXIT:
            write(f"{RED}Invalid choice. Please select between 1 and 5.{RESET}\n")
            continue

        write("Enter two integers: ")
        try:
            a, b = _read_operands(read)
        except ValueError:
            write(f"{RED}Invalid input. Please enter two integers.{RESET}\n")
            continue

        try:
            result: Number = calculate(choice, a, b)
        except ZeroDivisionError:
            write(f"{RED}Error: Division by zero is undefined.{RESET}\n")
            result = 0
        write(f"Result: {_format(result)}\n")


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="calculator", description="Add, subtract, multiply or divide two integers."
    )
    parser.parse_args(argv)
    try:
        run(input, _write_stdout)
    except EOFError:
        _write_stdout("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())