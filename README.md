# structlabs

Four small console programs built on classic data structures. The library
modules behind them can also be used on their own. The package needs only the
standard library.

## Installation

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Commands

### `structlabs-divide`

Divides an integer by a real number and keeps up to 30 significant digits.
The program prints a short explanation. It then reads the dividend and the
divisor from standard input, one per line.

- The dividend must be an integer.
- The divisor may have a decimal point and an `e`/`E` exponent. The exponent
  must be between -99999 and 99999.
- Each number may have at most 30 significant digits.
- An input line must not be longer than 38 characters.

The result is printed as `(-)0.<mantissa>E<exponent>`:

    Input dividend: 1
    Input divider: 3
    Result: 0.333333333333333333333333333333E0

The exit status is:

| Status | Meaning |
|-------:|---------|
| 0 | success |
| -1 | empty or too long line |
| 3 | badly formed number |
| 2 | division by zero |

### `structlabs-autos FILE`

Reads up to 100 car records from `FILE`. Each record is several lines, and
blank lines between records are allowed:

    trademark
    country
    price
    color
    old | new
    guarantee                      (new cars)
    year, mileage, repairs, owners (old cars, one per line)

A menu on standard input then offers these actions:

| Action | What it does |
|-------:|--------------|
| 1 | Find old cars of a trademark in a price range that have one owner and no repairs. |
| 2 | Add a car. |
| 3 | Delete cars by number, trademark, country, price, color or condition type. |
| 41, 42, 43 | Sort the price key table with min-max, heap or quick sort. |
| 51, 52, 53 | Sort the records themselves with min-max, heap or quick sort. |
| 6 | Print a table of average sort times and memory sizes, with and without keys. |
| 7, 8, 9 | Print the records, the key table, or the records in key-table order. |
| 10 | Reread the file. |
| 0 | Quit. |

Without `FILE` the command exits with status 1. A missing file gives status 2.
A file with no readable record gives status 1.

### `structlabs-matrix`

Multiplies a row vector by a matrix. The product is computed with a dense
matrix (`DenseMatrix`) and with a compressed-row matrix (`SparseMatrix`).

The program first asks for the number of rows and columns. The matrix and the
vector start filled at random to 40 %. The menu can then:

- refill either of them at random;
- read them in whole or cell by cell;
- change the fill percentages;
- print the dense and sparse forms;
- compute the product in either form;
- print a statistics table of time and memory for fill levels from 1 % to 96 %.

### `structlabs-brackets FILE`

Checks whether the brackets `()`, `[]` and `{}` in the first line of `FILE`
are balanced. The program asks for a maximum stack size. It can run the check
with an `ArrayStack` or a `ListStack`, and it traces the stack after every
step. You can also push, pop and print each stack by hand, and compare the
time and memory of the two stacks.

## Library use

```python
from structlabs.bigdivide import parse_number, divide, format_number
from structlabs.sorting import quicksort, heap_sort, min_max_sort
from structlabs.dense import DenseMatrix
from structlabs.sparse import SparseMatrix, SparseVector
from structlabs.stacks import ArrayStack
from structlabs.brackets import check_brackets, BracketResult

quotient = divide(parse_number("1", True), parse_number("3"))
print(format_number(quotient))          # 0.333333333333333333333333333333E0

items = [3, 1, 2]
quicksort(items)                         # natural order; a three-way comparator may be passed

matrix = DenseMatrix(2, 2)
matrix.data = [[1, 0], [0, 2]]
product = SparseMatrix.from_dense(matrix).multiply_vector(SparseVector.from_dense([3, 4]))
print(product.values, product.columns)  # [3, 8] [0, 1]

assert check_brackets("{[()]}", ArrayStack(10)) is BracketResult.CORRECT
```

The modules and what they hold:

- `structlabs.bigdivide` parses, divides and formats numbers. It raises
  `NumberFormatError`, `InputLengthError` and `ZeroDivisionError`.
- `structlabs.sorting` provides `min_max_sort`, `heap_sort` and `quicksort`.
  They sort a list in place with an optional three-way comparator.
- `structlabs.autos` holds the `Automobile` records. It reads and formats
  them, filters and deletes them, and builds key tables (`KeyEntry`).
- `structlabs.dense` holds `DenseMatrix` and helpers for plain vectors held
  as lists.
- `structlabs.sparse` holds `SparseVector` and `SparseMatrix`.
- `structlabs.stacks` holds `ArrayStack` and `ListStack`. They raise
  `StackFullError` and `StackEmptyError`.
- `structlabs.brackets` provides `check_brackets`, `check_with_array_stack`,
  `check_with_list_stack` and `statistics`.

## Limits

The memory sizes shown in the statistics tables are estimates built from
fixed sizes per element. They are not measured. The addresses that
`ListStack` prints are Python object identities.