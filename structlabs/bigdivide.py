"""Long division of an integer by a real number held as decimal digits.

Numbers are kept as a sign, a list of significant decimal digits and a
decimal exponent, so that ``digits * 10 ** exponent`` is the value.  The
quotient carries up to thirty significant digits and is printed in the
normalised form ``(-)0.<mantissa>E<exponent>``.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import TextIO

MAX_DIGITS = 30
MAX_EXPONENT = 99999
MAX_LINE = MAX_DIGITS + 10
_WORK_DIGITS = 2 * MAX_DIGITS + 1
_DECIMAL = frozenset("0123456789")

EXIT_OK = 0
EXIT_LENGTH = -1
EXIT_ZERO_DIVISION = 2
EXIT_FORMAT = 3

_INTRO = (
    "This program divides integer number on a real\n"
    "Length of integer number and manttissa of real number <= 30 (not empty);\n"
    "Degree of numbers in range of: -99999 <= deg <= 99999;\n"
    "The result will be presented in a following format:\n"
    "(+/-)0.<mantissa>E(+/-)<degree>\n"
    "Please, follow some rules :\n"
    "- use dot (not a comma) for real numbers;\n"
    "- don't use spaces between parts of number;\n"
    "- after mantissa you may(!) use format: e/E<degree>;"
)


class NumberFormatError(ValueError):
    """Raised when a text is not a number in the accepted format."""


class InputLengthError(ValueError):
    """Raised when an input line is empty or longer than allowed."""


@dataclass(frozen=True)
class Number:
    """A decimal number: ``(-1 if negative) * int(digits) * 10 ** exponent``."""

    negative: bool = False
    digits: tuple[int, ...] = ()
    exponent: int = 0


def read_input_line(stream: TextIO, max_length: int = MAX_LINE) -> str:
    """Read one line, dropping leading spaces and the line break.

    Raises InputLengthError when the line is empty or holds
    ``max_length - 1`` characters or more.
    """
    line = stream.readline()
    if line.endswith("\n"):
        line = line[:-1]
    line = line.lstrip(" ")
    if len(line) > max_length - 1:
        raise InputLengthError(f"line longer than {max_length - 1} characters")
    if not line:
        raise InputLengthError("line is empty")
    return line


def _format_error(text: str) -> NumberFormatError:
    return NumberFormatError(f"incorrect format of number: {text!r}")


def parse_number(text: str, integer_only: bool = False) -> Number:
    """Parse an integer or a real number such as ``-1.25e+3`` into a Number."""
    if not text:
        raise _format_error(text)

    negative = False
    digits: list[int] = []
    seen_dot = False
    seen_exp = False
    exp_negative = False
    fraction = 0
    exponent = 0

    first, rest = text[0], text[1:]
    if first in _DECIMAL:
        if first != "0":
            digits.append(int(first))
    elif first == ".":
        if integer_only:
            raise _format_error(text)
        seen_dot = True
    elif first in "+-":
        negative = first == "-"
    else:
        raise _format_error(text)

    for index, char in enumerate(rest):
        if char in "+-":
            if integer_only or not seen_exp:
                raise _format_error(text)
            exp_negative = char == "-"
        elif char in _DECIMAL:
            if seen_exp:
                tail = rest[index:]
                if not set(tail) <= _DECIMAL:
                    raise _format_error(text)
                exponent = int(tail)
                break
            if digits or char != "0":
                digits.append(int(char))
            if seen_dot:
                fraction += 1
        elif char == ".":
            if integer_only or seen_dot:
                raise _format_error(text)
            seen_dot = True
        elif char in "eE":
            if integer_only:
                raise _format_error(text)
            seen_exp = True
        else:
            raise _format_error(text)

    if exponent > MAX_EXPONENT:
        raise _format_error(text)
    exponent = -(exponent + fraction) if exp_negative else exponent - fraction
    if len(digits) > MAX_DIGITS:
        raise _format_error(text)
    return Number(negative, tuple(digits), exponent)


def divide(dividend: Number, divisor: Number) -> Number:
    """Divide by long division, keeping up to 31 significant digits.

    Raises ZeroDivisionError when the divisor has no non-zero digit.
    """
    divisor_digits = list(divisor.digits)
    while divisor_digits and divisor_digits[0] == 0:
        divisor_digits.pop(0)
    if not divisor_digits:
        raise ZeroDivisionError("division by zero")

    width = len(divisor_digits)
    divisor_value = int("".join(map(str, divisor_digits)))
    digits = list(dividend.digits)
    exponent = dividend.exponent - divisor.exponent
    while len(digits) < width:
        digits.append(0)
        exponent -= 1
    budget = len(dividend.digits)

    remainder = 0
    for digit in digits[: width - 1]:
        remainder = remainder * 10 + digit
    position = width - 1
    quotient: list[int] = []
    while True:
        remainder = remainder * 10 + digits[position]
        position += 1
        step, remainder = divmod(remainder, divisor_value)
        if step or quotient:
            quotient.append(step)
        if position == len(digits):
            if not remainder:
                break
            if len(quotient) < MAX_DIGITS + 1 and budget < _WORK_DIGITS:
                digits.append(0)
                exponent -= 1
                budget += 1
            else:
                break

    return Number(dividend.negative != divisor.negative, tuple(quotient), exponent)


def format_number(number: Number) -> str:
    """Render a number as ``(-)0.<mantissa>E<exponent>``, rounded to 30 digits."""
    digits = list(number.digits)
    if not any(digits):
        return "0"
    exponent = number.exponent + len(digits)
    if exponent > MAX_EXPONENT:
        return "infinity"
    if exponent < -MAX_EXPONENT:
        return "0"

    if len(digits) == MAX_DIGITS + 1:
        last = digits.pop()
        if last >= 5:
            rounded = str(int("".join(map(str, digits))) + 1).zfill(len(digits))
            if len(rounded) > len(digits):
                exponent += 1
            digits = [int(char) for char in rounded[: len(digits)]]

    while digits and digits[-1] == 0:
        digits.pop()
    sign = "-" if number.negative else ""
    return f"{sign}0.{''.join(map(str, digits))}E{exponent}"


def _ask(prompt: str, integer_only: bool) -> Number:
    print(prompt, end="", flush=True)
    return parse_number(read_input_line(sys.stdin), integer_only)


def main(argv: list[str] | None = None) -> int:
    """Ask for a dividend and a divisor on standard input and print the quotient."""
    parser = argparse.ArgumentParser(
        description="Divide an integer by a real number with 30 significant digits."
    )
    parser.parse_args(argv)

    print(_INTRO)
    try:
        dividend = _ask("Input dividend: ", True)
        divisor = _ask("Input divider: ", False)
        result = divide(dividend, divisor)
    except InputLengthError:
        print("String is empty or too large")
        return EXIT_LENGTH
    except NumberFormatError:
        print("Incorrect format of number")
        return EXIT_FORMAT
    except ZeroDivisionError:
        print("Zero division")
        return EXIT_ZERO_DIVISION
    print(f"Result: {format_number(result)}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())