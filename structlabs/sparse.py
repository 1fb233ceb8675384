"""Sparse vectors and compressed-row matrices built from dense ones."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import TextIO

from .dense import DenseMatrix, read_vector


@dataclass
class SparseVector:
    """Non-zero entries of a vector of ``size`` entries, columns counted from zero."""

    size: int
    values: list[int] = field(default_factory=list)
    columns: list[int] = field(default_factory=list)

    @classmethod
    def from_dense(cls, values: list[int]) -> SparseVector:
        """Keep the non-zero entries of a dense vector."""
        vector = cls(len(values))
        for column, value in enumerate(values):
            if value != 0:
                vector.values.append(value)
                vector.columns.append(column)
        return vector

    @classmethod
    def read(cls, stream: TextIO, size: int) -> SparseVector:
        """Read ``size`` integers and keep the non-zero ones."""
        return cls.from_dense(read_vector(stream, size))

    def format(self) -> str:
        """Render values and their columns, the columns counted from one."""
        data = "".join(f"{value} " for value in self.values)
        columns = "".join(f"{column + 1} " for column in self.columns)
        return f"data: \n{data}\ncolumns: \n{columns}\n"


@dataclass
class SparseMatrix:
    """A matrix in compressed-row form.

    ``row_pointers[i]:row_pointers[i + 1]`` selects the values of row ``i``
    and their zero-based columns in ``column_indices``.
    """

    rows: int
    columns: int
    values: list[int] = field(default_factory=list)
    column_indices: list[int] = field(default_factory=list)
    row_pointers: list[int] = field(default_factory=list)

    @classmethod
    def from_dense(cls, matrix: DenseMatrix) -> SparseMatrix:
        """Compress the non-zero cells of a dense matrix."""
        sparse = cls(matrix.rows, matrix.columns)
        for row in matrix.data:
            sparse.row_pointers.append(len(sparse.values))
            for column, value in enumerate(row):
                if value != 0:
                    sparse.values.append(value)
                    sparse.column_indices.append(column)
        sparse.row_pointers.append(len(sparse.values))
        return sparse

    @classmethod
    def read(cls, stream: TextIO, rows: int, columns: int) -> SparseMatrix:
        """Read every cell row by row and keep the non-zero ones."""
        matrix = DenseMatrix(rows, columns)
        matrix.read_all(stream)
        return cls.from_dense(matrix)

    def format(self) -> str:
        """Render the values, their columns and the row pointers."""
        data = "".join(f"{value} " for value in self.values)
        columns = "".join(f"{column} " for column in self.column_indices)
        pointers = "".join(f"{pointer} " for pointer in self.row_pointers)
        return f"data: \n{data}\ncolumns: \n{columns}\npointers: \n{pointers}\n"

    def multiply_vector(self, vector: SparseVector) -> SparseVector:
        """Return the row vector ``vector`` times this matrix, kept sparse."""
        if vector.size != self.rows:
            raise ValueError(
                f"vector of size {vector.size} does not fit {self.rows} rows"
            )
        factors = dict(zip(vector.columns, vector.values))
        sums = [0] * self.columns
        for row, (start, end) in enumerate(pairwise(self.row_pointers)):
            factor = factors.get(row)
            if factor is None:
                continue
            for column, value in zip(
                self.column_indices[start:end], self.values[start:end]
            ):
                sums[column] += value * factor
        return SparseVector.from_dense(sums)