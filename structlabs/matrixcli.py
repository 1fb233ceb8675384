"""Interactive menu for multiplying a vector by a dense or a sparse matrix."""

from __future__ import annotations

import argparse
import random
import re
import sys
import time
from typing import TextIO

from .dense import (
    DenseMatrix,
    _scan_int,
    fill_vector_random,
    format_vector,
    read_vector_by_index,
)
from .sparse import SparseMatrix, SparseVector

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_READ = 2

INIT_PERCENTAGE = 40.0
ELEMENT_SIZE = 8

EXIT = 0
AUTO_MATRIX = 1
MANUALLY_ALL_MATRIX = 2
MANUALLY_SOME_MATRIX = 3
AUTO_VECTOR = 4
MANUALLY_ALL_VECTOR = 5
MANUALLY_SOME_VECTOR = 6
CHANGE_PERCENTAGE_M = 7
CHANGE_PERCENTAGE_V = 8
COUNT_ORDINARY = 9
COUNT_SPARSE = 10
STATISTICS = 11
OUT_ORD_VEC = 12
OUT_ORD_MATR = 13
OUT_SP_VEC = 14
OUT_SP_MATR = 15

_WHITESPACE = " \t\n\r\v\f"
_INT_RE = re.compile(r"[+-]?\d+")
_RULE = "x--------------x------------x------------x-------------x-------------x\n"
_HEADER = "|    percent   |  ordinary  |   sparse   |   size_or   |   size_sp   |\n"
_READ_ERROR = "error while reading\n"
_FILL_ERROR = "percentage is too large to fill\n"

_MENU = (
    "EXIT                      0\n"
    "AUTO FILL MATRIX          1\n"
    "MANUALLY FILL ALL MATRIX  2\n"
    "MANUALLY FILL SOME MATRIX 3\n"
    "AUTO FILL VECTOR          4\n"
    "MANUALLY FILL ALL VECTOR  5\n"
    "MANUALLY FILL SOME VECTOR 6\n"
    "CHANGE PERCENTAGE MATRIX  7\n"
    "CHANGE PERCENTAGE VECTOR  8\n"
    "COUNT ORDINARY            9\n"
    "COUNT SPARSE              10\n"
    "STATISTICS                11\n"
    "OUT ORDINARY VECTOR       12\n"
    "OUT ORDINARY MATRIX       13\n"
    "OUT SPARSE VECTOR         14\n"
    "OUT SPARSE MATRIX         15\n"
)


def menu_text() -> str:
    """The list of actions with their numbers."""
    return _MENU


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


def _read_float(stream: TextIO) -> float | None:
    token = _scan_token(stream)
    if token is None:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def _sparse_size(vector: SparseVector, matrix: SparseMatrix) -> int:
    count = (
        len(vector.columns)
        + len(vector.values)
        + len(matrix.column_indices)
        + len(matrix.row_pointers)
        + len(matrix.values)
        + matrix.rows
    )
    return count * ELEMENT_SIZE


def statistics(
    rows: int,
    columns: int,
    out: TextIO | None = None,
    rng: random.Random | None = None,
) -> None:
    """Print multiplication times and memory sizes for fill levels 1%, 6%, ... 96%."""
    out = out if out is not None else sys.stdout
    source = rng if rng is not None else random.Random()
    if rows <= 0 or columns <= 0:
        raise ValueError("matrix dimensions must be positive")
    ordinary_size = (rows + rows * rows) * ELEMENT_SIZE
    out.write(_RULE)
    out.write(_HEADER)
    out.write(_RULE)
    for percent in range(1, 101, 5):
        out.write(f"|{percent:14d}|")
        matrix = DenseMatrix(rows, columns)
        matrix.fill_random(percent, source)
        sparse_matrix = SparseMatrix.from_dense(matrix)
        vector = [0] * rows
        fill_vector_random(vector, percent, source)
        sparse_vector = SparseVector.from_dense(vector)

        start = time.perf_counter()
        matrix.multiply_vector(vector)
        elapsed = (time.perf_counter() - start) * 1_000_000
        out.write(f"{elapsed:12.2f}|")

        start = time.perf_counter()
        sparse_matrix.multiply_vector(sparse_vector)
        elapsed = (time.perf_counter() - start) * 1_000_000
        out.write(f"{elapsed:12.2f}|")

        out.write(f"{ordinary_size:13d}|")
        out.write(f"{_sparse_size(sparse_vector, sparse_matrix):13d}|")
        out.write("\n" + _RULE)


def _filled_matrix(rows, columns, percentage, rng, out) -> DenseMatrix:
    matrix = DenseMatrix(rows, columns)
    try:
        matrix.fill_random(percentage, rng)
    except ValueError:
        out.write(_FILL_ERROR)
    return matrix


def _filled_vector(size, percentage, rng, out) -> list[int]:
    vector = [0] * size
    try:
        fill_vector_random(vector, percentage, rng)
    except ValueError:
        out.write(_FILL_ERROR)
    return vector


def main(argv: list[str] | None = None) -> int:
    """Run the matrix menu on standard input."""
    parser = argparse.ArgumentParser(description="Multiply a vector by a dense or sparse matrix.")
    parser.parse_args(argv)

    stream, out = sys.stdin, sys.stdout
    rng = random.Random()
    out.write("Program multiplies a vector by a matrix.\n")
    out.write(
        "NOTE: matrix and vector are filled automatically by default. "
        "If you want to specify them, please, look menu.\n"
    )
    out.write("input number of rows: ")
    rows = _read_int(stream)
    if rows is None or rows <= 0:
        out.write(_READ_ERROR)
        return EXIT_ERROR
    out.write("input number of columns: ")
    columns = _read_int(stream)
    if columns is None or columns <= 0:
        out.write(_READ_ERROR)
        return EXIT_READ

    out.write(menu_text())
    out.write("action: ")
    choice = _read_int(stream)
    if choice is None:
        out.write("errors while reading\n")
        return EXIT_READ

    percentage_matrix = INIT_PERCENTAGE
    percentage_vector = INIT_PERCENTAGE
    matrix = _filled_matrix(rows, columns, percentage_matrix, rng, out)
    vector = _filled_vector(rows, percentage_vector, rng, out)

    while choice != EXIT:
        if choice == AUTO_MATRIX:
            matrix = _filled_matrix(rows, columns, percentage_matrix, rng, out)
        elif choice == AUTO_VECTOR:
            vector = _filled_vector(rows, percentage_vector, rng, out)
        elif choice == MANUALLY_ALL_MATRIX:
            matrix = DenseMatrix(rows, columns)
            try:
                matrix.read_all(stream)
            except ValueError:
                out.write(_READ_ERROR)
        elif choice == MANUALLY_ALL_VECTOR:
            vector = [0] * rows
            try:
                for index in range(rows):
                    vector[index] = _scan_int(stream)
            except ValueError:
                out.write(_READ_ERROR)
        elif choice == MANUALLY_SOME_MATRIX:
            matrix = DenseMatrix(rows, columns)
            try:
                matrix.read_by_index(stream, out)
            except ValueError:
                pass
        elif choice == MANUALLY_SOME_VECTOR:
            vector = [0] * rows
            try:
                read_vector_by_index(vector, stream, out)
            except ValueError:
                pass
        elif choice == CHANGE_PERCENTAGE_M:
            out.write("input persentage of filling matrix: ")
            value = _read_float(stream)
            if value is None:
                out.write(_READ_ERROR)
            else:
                percentage_matrix = value
        elif choice == CHANGE_PERCENTAGE_V:
            out.write("input persentage of filling vector: ")
            value = _read_float(stream)
            if value is None:
                out.write(_READ_ERROR)
            else:
                percentage_vector = value
        elif choice == COUNT_ORDINARY:
            out.write(format_vector(matrix.multiply_vector(vector)))
        elif choice == COUNT_SPARSE:
            result = SparseMatrix.from_dense(matrix).multiply_vector(
                SparseVector.from_dense(vector)
            )
            out.write(result.format())
        elif choice == STATISTICS:
            out.write("input number of rows: ")
            stat_rows = _read_int(stream)
            if stat_rows is None or stat_rows <= 0:
                out.write(_READ_ERROR)
            out.write("input number of columns: ")
            stat_columns = _read_int(stream)
            if stat_columns is None or stat_columns <= 0:
                out.write(_READ_ERROR)
            if stat_rows and stat_columns and stat_rows > 0 and stat_columns > 0:
                statistics(stat_rows, stat_columns, out, rng)
        elif choice == OUT_ORD_MATR:
            out.write(matrix.format())
        elif choice == OUT_ORD_VEC:
            out.write(format_vector(vector))
        elif choice == OUT_SP_MATR:
            out.write(SparseMatrix.from_dense(matrix).format())
        elif choice == OUT_SP_VEC:
            out.write(SparseVector.from_dense(vector).format())
        else:
            out.write("there is no such action\n")
        out.write(menu_text())
        out.write("action: ")
        choice = _read_int(stream)
        if choice is None:
            out.write("errors while reading\n")
            return EXIT_READ
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())