import pytest

from pocketapps.calculator import (
    Operation,
    add,
    calculate,
    divide,
    multiply,
    run,
    subtract,
)


def scripted(*lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.mark.parametrize("a, b", [(4, 5), (-3, 8), (0, 0), (1000, -1000)])
def test_add_and_subtract_are_inverse(a, b):
    assert subtract(add(a, b), b) == a


@pytest.mark.parametrize("a, b", [(4, 5), (-3, 8), (12, 0)])
def test_multiply_commutes_and_has_identity(a, b):
    assert multiply(a, b) == multiply(b, a)
    assert multiply(a, 1) == a


def test_divide_undoes_multiply():
    assert divide(multiply(6, 7), 7) == 6


def test_divide_fraction():
    assert divide(7, 2) == 3.5


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(1, 0)


@pytest.mark.parametrize(
    "operation, func",
    [
        (Operation.ADD, add),
        (Operation.SUBTRACT, subtract),
        (Operation.MULTIPLY, multiply),
        (Operation.DIVIDE, divide),
    ],
)
def test_calculate_dispatches(operation, func):
    assert calculate(operation, 12, 4) == func(12, 4)
    assert calculate(int(operation), 12, 4) == func(12, 4)


@pytest.mark.parametrize("choice", [Operation.EXIT, 0, 9])
def test_calculate_rejects_non_arithmetic_choice(choice):
    with pytest.raises(ValueError):
        calculate(choice, 1, 2)


def test_run_addition_then_exit():
    out = []
    run(scripted("1", "4 5", "5"), out.append)
    text = "".join(out)
    assert "Result: 9\n" in text
    assert "Thank you for using the calculator!" in text


def test_run_operands_across_lines():
    out = []
    run(scripted("3", "6", "7", "5"), out.append)
    assert f"Result: {multiply(6, 7)}\n" in "".join(out)


def test_run_division_uses_short_float_format():
    out = []
    run(scripted("4", "7 2", "5"), out.append)
    assert "Result: 3.5\n" in "".join(out)


def test_run_division_by_zero():
    out = []
    run(scripted("4", "1 0", "5"), out.append)
    text = "".join(out)
    assert "Error: Division by zero is undefined." in text
    assert "Result: 0\n" in text


def test_run_rejects_bad_menu_input():
    out = []
    run(scripted("abc", "8", "5"), out.append)
    text = "".join(out)
    assert "Invalid input. Please enter a valid number (1-5)." in text
    assert "Invalid choice. Please select between 1 and 5." in text
    assert "Result:" not in text


def test_run_stops_at_end_of_input():
    with pytest.raises(EOFError):
        run(scripted("1"), [].append)