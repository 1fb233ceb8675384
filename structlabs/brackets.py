"""Check that brackets in an expression are balanced, using either stack."""

from __future__ import annotations

import argparse
import re
import sys
import time
from enum import Enum
from typing import Protocol, TextIO

from .stacks import ArrayStack, ListStack, StackEmptyError, StackFullError

EXIT_OK = 0
EXIT_READ = 2
TIMING_RUNS = 10

OPENING = "([{"
CLOSING = ")]}"
_PAIRS = {"(": ")", "[": "]", "{": "}"}

_WHITESPACE = " \t\n\r\v\f"
_INT_RE = re.compile(r"[+-]?\d+")

_MENU = (
    "EXIT                                 0\n"
    "PUSH TO STACK ON ARRAY               1\n"
    "POP FROM STACK ON ARRAY              2\n"
    "PRINT STACK ON ARRAY                 3\n"
    "CHECK EXPRESSION WITH STACK ON ARRAY 4\n"
    "PUSH TO STACK ON LIST                5\n"
    "POP FROM STACK ON LIST               6\n"
    "PRINT STACK ON LIST                  7\n"
    "CHECK EXPRESSION WITH STACK ON LIST  8\n"
    "STATISTICS                           9\n"
)
_INTRO = (
    "Program shows working of stacks based on dynamic array and list. "
    "It's possible to push to, pop from and print stacks.\n"
    "Also, this program can read expression from file (name should be given in "
    "command line args) and determine if brackets in expression are put in correct "
    "way. This function works with both stacks: based on list and based on array. "
    "Compare efficiency of stacks is possible in statistics.\n"
)


class BracketResult(Enum):
    """Outcome of a bracket check."""

    CORRECT = 0
    MISMATCH = 1
    OVERFLOW = 2
    UNBALANCED = 3

    @property
    def message(self) -> str:
        """Suffix explaining why an expression is incorrect."""
        return {
            BracketResult.CORRECT: "",
            BracketResult.MISMATCH: "",
            BracketResult.OVERFLOW: ": stack overflow",
            BracketResult.UNBALANCED: ": not enough brackets",
        }[self]


class _Stack(Protocol):
    def push(self, value: str) -> None: ...

    def pop(self) -> str: ...

    def format(self) -> str: ...


def is_matching_pair(left: str, right: str) -> bool:
    """Tell whether ``left`` is the opening bracket closed by ``right``."""
    return _PAIRS.get(left) == right


def check_brackets(text: str, stack: _Stack, trace: TextIO | None = None) -> BracketResult:
    """Check the first line of ``text`` using ``stack``.

    When ``trace`` is given, the stack is written to it after every push and
    every matched pop.
    """
    depth = 0
    for char in text.split("\n", 1)[0]:
        if char in OPENING:
            try:
                stack.push(char)
            except StackFullError:
                return BracketResult.OVERFLOW
            depth += 1
            if trace is not None:
                trace.write(stack.format())
        elif char in CLOSING:
            try:
                left = stack.pop()
            except StackEmptyError:
                return BracketResult.UNBALANCED
            depth -= 1
            if not is_matching_pair(left, char):
                return BracketResult.MISMATCH
            if trace is not None:
                trace.write(stack.format())
    return BracketResult.CORRECT if depth == 0 else BracketResult.UNBALANCED


def _report(result: BracketResult, out: TextIO) -> None:
    if result is BracketResult.CORRECT:
        out.write("correct\n")
    else:
        out.write(f"incorrect{result.message}\n")


def check_with_array_stack(
    text: str, max_count: int, out: TextIO | None = None
) -> tuple[BracketResult, int]:
    """Check with a fresh array stack; return the result and the stack's memory size."""
    stack = ArrayStack(max_count)
    result = check_brackets(text, stack, out)
    if out is not None:
        _report(result, out)
    return result, stack.memory_size


def check_with_list_stack(
    text: str, max_count: int, out: TextIO | None = None
) -> tuple[BracketResult, int]:
    """Check with a fresh list stack; return the result and the stack's memory size."""
    stack = ListStack(max_count)
    result = check_brackets(text, stack, out)
    if out is not None:
        _report(result, out)
    return result, stack.memory_size


def _statistics_row(check, text: str, max_count: int) -> str:
    result, size = check(text, max_count)
    if result is not BracketResult.CORRECT:
        return f"{'-':>15}|{'-':>15}| incorrect{result.message}\n"
    total = 0.0
    for _ in range(TIMING_RUNS):
        start = time.perf_counter()
        _, size = check(text, max_count)
        total += time.perf_counter() - start
    return f"{total * 1_000_000 / TIMING_RUNS:15.2f}|{size:15d}|\n"


def statistics(text: str, max_count: int, out: TextIO | None = None) -> None:
    """Print the time and memory each stack takes to check ``text``."""
    out = out if out is not None else sys.stdout
    rule = "x----------------x---------------x---------------x\n"
    out.write("x--------------- x---------------x---------------x\n")
    out.write("|     stack      |     time      |     memory    |\n")
    out.write(rule)
    out.write("| on linked list |")
    out.write(_statistics_row(check_with_list_stack, text, max_count))
    out.write(rule)
    out.write("|   on vector    |")
    out.write(_statistics_row(check_with_array_stack, text, max_count))
    out.write(rule)


def _scan_token(stream: TextIO) -> str | None:
    char = stream.read(1)
    while char and char in _WHITESPACE:
        char = stream.read(1)
    if not char:
        return None
    chars = []
    while char and char not in _WHITESPACE:
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def _read_int(stream: TextIO) -> int | None:
    token = _scan_token(stream)
    if token is None:
        return None
    match = _INT_RE.match(token)
    return int(match.group()) if match else None


def _push(stack: _Stack, stream: TextIO, out: TextIO) -> None:
    out.write("symbol: ")
    char = stream.read(1)
    while char in ("\n", " "):
        char = stream.read(1)
    if not char:
        return
    try:
        stack.push(char)
    except StackFullError:
        out.write("impossible to push because of stack overflow\n")


def _pop(stack: _Stack, out: TextIO) -> None:
    try:
        value = stack.pop()
    except StackEmptyError:
        out.write("impossible to pop because stack is empty\n")
    else:
        out.write(f"extracted value: {value}\n")


def main(argv: list[str] | None = None) -> int:
    """Run the stack menu on standard input over an expression read from a file."""
    parser = argparse.ArgumentParser(description="Check brackets with two kinds of stack.")
    parser.add_argument("path", nargs="?", help="file whose first line is the expression")
    args = parser.parse_args(argv)

    stream, out = sys.stdin, sys.stdout
    out.write(_INTRO)
    if args.path is None:
        out.write("error while opening file\n")
        return EXIT_READ
    try:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        out.write("error while opening file\n")
        return EXIT_READ

    out.write("enter max size of stack: \n")
    max_count = _read_int(stream)
    if max_count is None or max_count < 1:
        out.write("error while reading max size\n")
        return EXIT_READ

    list_stack = ListStack(max_count)
    array_stack = ArrayStack(max_count)
    out.write(_MENU)
    out.write("action: ")
    choice = _read_int(stream)
    if choice is None:
        out.write("errors while reading\n")
        return EXIT_READ
    while choice != 0:
        if choice == 1:
            _push(array_stack, stream, out)
        elif choice == 2:
            _pop(array_stack, out)
        elif choice == 3:
            out.write(array_stack.format())
        elif choice == 4:
            check_with_array_stack(text, max_count, out)
        elif choice == 5:
            _push(list_stack, stream, out)
        elif choice == 6:
            _pop(list_stack, out)
        elif choice == 7:
            out.write(list_stack.format())
        elif choice == 8:
            check_with_list_stack(text, max_count, out)
        elif choice == 9:
            statistics(text, max_count, out)
        else:
            out.write("there is no such action\n")
        out.write(_MENU)
        out.write("action: ")
        choice = _read_int(stream)
        if choice is None:
            out.write("errors while reading\n")
            return EXIT_READ
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())