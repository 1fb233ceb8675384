"""Dense integer matrices and vectors: filling, reading, printing, multiplying.

A vector is a plain list of integers.  A matrix keeps its cells as a list
of rows.  Text input is a stream of whitespace-separated integers.
"""

from __future__ import annotations

import random
import re
import sys
from typing import TextIO

MAX_VALUE = 10
PRINT_LIMIT = 30

_WHITESPACE = " \t\n\r\v\f"
_INT_RE = re.compile(r"[+-]?\d+")


def _scan_int(stream: TextIO) -> int:
    """Read the next whitespace-separated integer from a stream."""
    char = stream.read(1)
    while char and char in _WHITESPACE:
        char = stream.read(1)
    if not char:
        raise ValueError("unexpected end of input")
    chars = []
    while char and char not in _WHITESPACE:
        chars.append(char)
        char = stream.read(1)
    token = "".join(chars)
    if _INT_RE.fullmatch(token) is None:
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def _scan_or_report(stream: TextIO, out: TextIO, message: str) -> int:
    try:
        return _scan_int(stream)
    except ValueError:
        out.write(message)
        raise


def _random_value(rng) -> int:
    return rng.randrange(MAX_VALUE) + 1


def _rng(rng: random.Random | None):
    return rng if rng is not None else random


class DenseMatrix:
    """A ``rows`` by ``columns`` matrix of integers, initially all zero."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError("matrix dimensions must be positive")
        self.rows = rows
        self.columns = columns
        self.data: list[list[int]] = [[0] * columns for _ in range(rows)]

    def fill_random(self, percentage: float, rng: random.Random | None = None) -> None:
        """Put values from 1 to 10 into zero cells at random positions.

        The number of cells filled is ``percentage`` percent of all cells.
        Raises ValueError when there are not enough zero cells for that.
        """
        source = _rng(rng)
        count = int(percentage * self.columns * self.rows / 100.0)
        free = sum(value == 0 for row in self.data for value in row)
        if count > free:
            raise ValueError(f"cannot fill {count} cells, only {free} are empty")
        while count > 0:
            i = source.randrange(self.rows)
            j = source.randrange(self.columns)
            if self.data[i][j] == 0:
                self.data[i][j] = _random_value(source)
                count -= 1

    def read_all(self, stream: TextIO) -> None:
        """Read every cell row by row; raises ValueError on bad or missing input."""
        for row in self.data:
            for j in range(self.columns):
                row[j] = _scan_int(stream)

    def read_by_index(self, stream: TextIO, out: TextIO | None = None) -> None:
        """Read (row, column, value) triples, positions from one, until row 0.

        Raises ValueError after reporting a bad position or value.
        """
        out = out if out is not None else sys.stdout
        out.write("if you want to finish, enter 0 when position in row is asked\n")
        out.write("row of element: ")
        row = _scan_int(stream)
        while row != 0:
            if not 0 < row <= self.rows:
                out.write("error while reading row\n")
                raise ValueError(f"row out of range: {row}")
            out.write("column of element: ")
            column = _scan_or_report(stream, out, "error while reading column\n")
            if not 0 < column <= self.columns:
                out.write("error while reading column\n")
                raise ValueError(f"column out of range: {column}")
            out.write("element: ")
            self.data[row - 1][column - 1] = _scan_or_report(
                stream, out, "error while reading element\n"
            )
            out.write("row of element: ")
            row = _scan_or_report(stream, out, "error while reading row\n")

    def format(self) -> str:
        """Render the whole grid, or only non-zero cells when it is large."""
        if self.rows <= PRINT_LIMIT and self.columns <= PRINT_LIMIT:
            return "".join(
                "".join(f"{value} " for value in row) + "\n" for row in self.data
            )
        return "".join(
            f"row of element: {i}\ncolumn of element: {j}\nelement: {value} \n\n"
            for i, row in enumerate(self.data, start=1)
            for j, value in enumerate(row, start=1)
            if value != 0
        )

    def multiply_vector(self, vector: list[int]) -> list[int]:
        """Return the row vector ``vector`` times this matrix."""
        if len(vector) != self.rows:
            raise ValueError(
                f"vector of length {len(vector)} does not fit {self.rows} rows"
            )
        return [
            sum(row[j] * factor for row, factor in zip(self.data, vector))
            for j in range(self.columns)
        ]


def fill_vector_random(
    vector: list[int], percentage: float, rng: random.Random | None = None
) -> None:
    """Put values from 1 to 10 into ``percentage`` percent of the zero entries' slots.

    Raises ValueError when there are not enough zero entries for that.
    """
    source = _rng(rng)
    count = int(percentage * len(vector) / 100.0)
    free = sum(value == 0 for value in vector)
    if count > free:
        raise ValueError(f"cannot fill {count} entries, only {free} are empty")
    while count > 0:
        position = source.randrange(len(vector))
        if vector[position] == 0:
            vector[position] = _random_value(source)
            count -= 1


def read_vector(stream: TextIO, size: int) -> list[int]:
    """Read ``size`` integers; raises ValueError on bad or missing input."""
    return [_scan_int(stream) for _ in range(size)]


def read_vector_by_index(
    vector: list[int], stream: TextIO, out: TextIO | None = None
) -> None:
    """Read (column, value) pairs, columns from one, until column 0.

    Raises ValueError after reporting a bad position or value.
    """
    out = out if out is not None else sys.stdout
    out.write("if you want to finish, enter 0 when position in column is asked\n")
    out.write("column of element: ")
    column = _scan_or_report(stream, out, "error while reading column\n")
    while column != 0:
        if not 0 < column <= len(vector):
            out.write("error while reading column\n")
            raise ValueError(f"column out of range: {column}")
        out.write("element: ")
        vector[column - 1] = _scan_or_report(stream, out, "error while reading element\n")
        out.write("column of element: ")
        column = _scan_or_report(stream, out, "error while reading column\n")


def format_vector(vector: list[int]) -> str:
    """Render all entries, or only non-zero ones when the vector is long."""
    if len(vector) <= PRINT_LIMIT:
        return "".join(f"{value} " for value in vector) + "\n"
    return "".join(
        f"column of element: {i}\nelement: {value} \n\n"
        for i, value in enumerate(vector, start=1)
        if value != 0
    )