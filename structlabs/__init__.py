"""Data-structure exercises: long division of decimal numbers, car catalogue sorting, sparse matrices and bracket-checking stacks."""

__version__ = "0.1.0"