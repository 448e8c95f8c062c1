"""A small calculator over integers or floating-point numbers."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

Number = int | float


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Calculator:
    """Arithmetic on one number type; ``int`` follows truncating semantics."""

    def __init__(self, number_type: type = float) -> None:
        if number_type not in (int, float):
            raise TypeError("number_type must be int or float")
        self.number_type = number_type

    @property
    def is_integral(self) -> bool:
        return self.number_type is int

    def _cast(self, value: Number) -> Number:
        return self.number_type(value)

    def add(self, a: Number, b: Number) -> Number:
        return self._cast(a + b)

    def subtract(self, a: Number, b: Number) -> Number:
        return self._cast(a - b)

    def multiply(self, a: Number, b: Number) -> Number:
        return self._cast(a * b)

    def divide(self, a: Number, b: Number) -> Number:
        if b == 0:
            raise ValueError("Cannot divide by zero!")
        if self.is_integral:
            return _trunc_div(int(a), int(b))
        return float(a) / float(b)

    def square(self, a: Number) -> Number:
        return self._cast(a * a)

    def exp(self, a: Number, b: Number) -> Number:
        try:
            result = math.pow(a, b)
        except ValueError:
            result = math.inf if a == 0 else math.nan
        except OverflowError:
            result = math.inf
        return self._cast(result)

    def mod(self, a: Number, b: Number) -> Number:
        if b == 0:
            raise ValueError("The modulus can not be zero!")
        if self.is_integral:
            a, b = int(a), int(b)
            return a - b * _trunc_div(a, b)
        return math.fmod(a, b)


_OPERATIONS = {
    1: (Calculator.add, 2),
    2: (Calculator.subtract, 2),
    3: (Calculator.multiply, 2),
    4: (Calculator.divide, 2),
    5: (Calculator.square, 1),
    6: (Calculator.exp, 2),
    7: (Calculator.mod, 2),
}

_KINDS = {
    1: (int, "Integer"),
    2: (float, "Float"),
    3: (float, "Double"),
}


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _format(value: Number) -> str:
    if isinstance(value, float):
        return format(value, ".6g")
    return str(value)


def _parse_int(token: str | None) -> int | None:
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def _read_operands(calculator: Calculator, tokens: Iterator[str], count: int) -> list[Number] | None:
    operands = []
    for _ in range(count):
        token = next(tokens, None)
        if token is None:
            return None
        operands.append(calculator.number_type(token))
    return operands


def _run(calculator: Calculator, tokens: Iterator[str]) -> None:
    print("Welcome to the calculator!")
    print("Operations you can make: ")
    for line in ("1. Addition", "2. Subtraction", "3. Multiplication", "4. Division",
                 "5. Square", "6. Exponent", "7. Modulus"):
        print(line)

    while True:
        print("Enter the operation you want to make: ", end="")
        token = next(tokens, None)
        if token is None:
            return
        print("Enter the operand(s): ")
        operation = _OPERATIONS.get(_parse_int(token))
        if operation is None:
            print("Invalid choice!")
        else:
            func, arity = operation
            try:
                operands = _read_operands(calculator, tokens, arity)
            except ValueError:
                print("Invalid input!")
            else:
                if operands is None:
                    return
                try:
                    print("The result is: " + _format(func(calculator, *operands)))
                except (ValueError, OverflowError) as error:
                    print(error)

        print("Do you want to continue? (y/n): ", end="")
        answer = next(tokens, None)
        if answer is None:
            return
        if answer[0] == "n":
            print("Thank you for using the calculator!")
            print("-" * 41)
            return
        print("-" * 41)


def main(argv: Iterable[str] | None = None) -> int:
    """Run the interactive calculator on standard input."""
    tokens = _tokens(sys.stdin)
    print("First you must enter the type you want to use the calculator with:")
    print("1. int")
    print("2. float")
    print("3. double")
    kind = _KINDS.get(_parse_int(next(tokens, None)))
    if kind is None:
        print("Invalid choice!")
        return 0
    number_type, label = kind
    print(f"{label} Calculator choosen!")
    _run(Calculator(number_type), tokens)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())