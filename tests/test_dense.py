import io
import random

import pytest

from structlabs.dense import (
    DenseMatrix,
    fill_vector_random,
    format_vector,
    read_vector,
    read_vector_by_index,
)


def _matrix(rows, text):
    columns = len(rows[0]) if rows else 0
    matrix = DenseMatrix(len(rows), columns)
    matrix.read_all(io.StringIO(text))
    return matrix


@pytest.mark.parametrize("rows, columns", [(0, 3), (3, 0), (-1, 2)])
def test_bad_dimensions_rejected(rows, columns):
    with pytest.raises(ValueError):
        DenseMatrix(rows, columns)


def test_new_matrix_is_zero():
    matrix = DenseMatrix(3, 4)
    assert matrix.data == [[0, 0, 0, 0]] * 3


def test_read_all_fills_rows():
    matrix = _matrix([[0, 0], [0, 0]], "1 2\n3 -4\n")
    assert matrix.data == [[1, 2], [3, -4]]


@pytest.mark.parametrize("text", ["1 2 3", "1 x 3 4", ""])
def test_read_all_errors(text):
    matrix = DenseMatrix(2, 2)
    with pytest.raises(ValueError):
        matrix.read_all(io.StringIO(text))


def test_format_small():
    matrix = _matrix([[0, 0], [0, 0]], "1 2 3 4")
    assert matrix.format() == "1 2 \n3 4 \n"


def test_format_large_lists_nonzero_only():
    matrix = DenseMatrix(2, 31)
    matrix.data[0][30] = 5
    assert matrix.format() == "row of element: 1\ncolumn of element: 31\nelement: 5 \n\n"


def test_fill_random_full_and_empty():
    full = DenseMatrix(4, 5)
    full.fill_random(100, random.Random(1))
    assert all(1 <= value <= 10 for row in full.data for value in row)
    empty = DenseMatrix(4, 5)
    empty.fill_random(0, random.Random(1))
    assert all(value == 0 for row in empty.data for value in row)


def test_fill_random_keeps_existing_values():
    matrix = DenseMatrix(3, 3)
    matrix.data[1][1] = -7
    matrix.fill_random(50, random.Random(2))
    assert matrix.data[1][1] == -7


def test_fill_random_too_many_raises():
    matrix = DenseMatrix(2, 2)
    with pytest.raises(ValueError):
        matrix.fill_random(150, random.Random(0))


def test_multiply_identity():
    matrix = _matrix([[0] * 3] * 3, "1 0 0 0 1 0 0 0 1")
    assert matrix.multiply_vector([4, -2, 9]) == [4, -2, 9]


def test_multiply_is_linear():
    matrix = DenseMatrix(4, 3)
    matrix.fill_random(60, random.Random(3))
    vector = [1, 0, 5, 2]
    doubled = [2 * value for value in vector]
    assert matrix.multiply_vector(doubled) == [
        2 * value for value in matrix.multiply_vector(vector)
    ]


def test_multiply_wrong_length():
    with pytest.raises(ValueError):
        DenseMatrix(2, 3).multiply_vector([1, 2, 3])


def test_read_by_index_sets_cells():
    matrix = DenseMatrix(2, 2)
    out = io.StringIO()
    matrix.read_by_index(io.StringIO("2 1 8\n1 2 -3\n0\n"), out)
    assert matrix.data == [[0, -3], [8, 0]]
    assert out.getvalue().startswith(
        "if you want to finish, enter 0 when position in row is asked\n"
    )


def test_read_by_index_bad_row():
    matrix = DenseMatrix(2, 2)
    out = io.StringIO()
    with pytest.raises(ValueError):
        matrix.read_by_index(io.StringIO("3 1 1\n"), out)
    assert out.getvalue().endswith("error while reading row\n")


def test_read_by_index_bad_column():
    matrix = DenseMatrix(2, 2)
    out = io.StringIO()
    with pytest.raises(ValueError):
        matrix.read_by_index(io.StringIO("1 5 1\n"), out)
    assert out.getvalue().endswith("error while reading column\n")


def test_read_vector_round_trip():
    assert read_vector(io.StringIO("3 0 -1\n7"), 4) == [3, 0, -1, 7]


def test_read_vector_short_input():
    with pytest.raises(ValueError):
        read_vector(io.StringIO("1 2"), 3)


def test_fill_vector_random():
    vector = [0] * 10
    fill_vector_random(vector, 100, random.Random(4))
    assert all(1 <= value <= 10 for value in vector)


def test_fill_vector_random_too_many():
    with pytest.raises(ValueError):
        fill_vector_random([1, 0], 100, random.Random(0))


def test_read_vector_by_index():
    vector = [0, 0, 0]
    read_vector_by_index(vector, io.StringIO("3 6 1 2 0"), io.StringIO())
    assert vector == [2, 0, 6]


def test_read_vector_by_index_out_of_range():
    vector = [0, 0]
    out = io.StringIO()
    with pytest.raises(ValueError):
        read_vector_by_index(vector, io.StringIO("4 1"), out)
    assert out.getvalue().endswith("error while reading column\n")


def test_format_vector_small():
    assert format_vector([1, 0, 3]) == "1 0 3 \n"


def test_format_vector_large():
    vector = [0] * 40
    assert format_vector(vector) == ""
    vector[4] = 7
    vector[39] = 2
    assert format_vector(vector).count("column of element: ") == 2