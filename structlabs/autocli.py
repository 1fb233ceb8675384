"""Interactive menu over a file of automobile records."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable
from typing import TextIO

from .autos import (
    EPS,
    MAX_COUNT,
    AutoFormatError,
    Automobile,
    Condition,
    Field,
    _parse_float,
    _parse_int,
    _scan_token,
    compare_autos,
    compare_keys,
    delete_automobiles,
    filter_automobiles,
    format_automobile,
    format_automobiles,
    format_keys,
    format_with_keys,
    make_keys_table,
    read_automobiles,
    read_line,
)
from .sorting import heap_sort, min_max_sort, quicksort

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FILE = 2

# Bytes taken by one fixed-width record and by one key-table row.
RECORD_SIZE = 144
KEY_SIZE = 16

_RULE = "x--------------x------------x------------x------------x\n"
_READ_ERROR = "error while reading\n"

_INTRO = (
    "Prepare file named file.txt with characteristics of auto in following order "
    "(each characteristic in a new line; it is possible to put empty line between autos):\n"
    "* trademark (1)\n* country (2)\n* price (3)\n* color (4)\n* old / new (5)\n"
    "* if last is new\n  > guarantee in years (6)\n* if last is old:\n"
    "  > year (6)\n  > mileage in km (7)\n  > quantity of repairs (8)\n"
    "  > quantity of ownwers (9)\n"
)
_MENU = (
    "File was successfully read. Now you can choose action with information in file "
    "(just write number of action)\n"
    "* 1 - find old autos with 1 last owner and with no repairs\n"
    "* 2 - add auto\n"
    "* 3 - delete auto\n"
    "* 41 - sort autos with key table (simple sort)\n"
    "* 42 - sort autos with key table (heap sort)\n"
    "* 43 - sort autos with key table (quick sort)\n"
    "* 51 - sort autos (simple sort)\n"
    "* 52 - sort autos (heap sort)\n"
    "* 53 - sort autos (quick sort)\n"
    "* 6 - print statistics with comparison of sort methods\n"
    "* 7 - print autos\n"
    "* 8 - print keys\n"
    "* 9 - print autos with keys\n"
    "* 10 - reread file\n\n"
)
_FIELD_PROMPT = (
    "Choose one of the following field names which will be key for deletion "
    "(just write name of field): \n* number\n* trademark\n* country\n* price\n"
    "* color\n* condition type\n"
)
_VALUE_PROMPTS = {
    Field.NUMBER: "number: ",
    Field.TRADEMARK: "trademark: ",
    Field.COUNTRY: "country: ",
    Field.COLOR: "color: ",
    Field.CONDITION_TYPE: "condition type (old / new): ",
    Field.PRICE: "price: ",
}

Sort = Callable[[list, Callable], None]


def time_sort(sort: Sort, autos: list[Automobile], with_keys: bool, repeats: int = 1000) -> float:
    """Average microseconds one sort of a fresh copy takes.

    With keys, the time to build the key table is added to every run.
    The given list is left untouched.
    """
    if repeats < 1:
        raise ValueError("repeats must be positive")
    total = 0.0
    if with_keys:
        start = time.perf_counter()
        base = make_keys_table(autos)
        make_time = time.perf_counter() - start
        for _ in range(repeats):
            keys = list(base)
            start = time.perf_counter()
            sort(keys, compare_keys)
            total += make_time + time.perf_counter() - start
    else:
        for _ in range(repeats):
            items = list(autos)
            start = time.perf_counter()
            sort(items, compare_autos)
            total += time.perf_counter() - start
    return total * 1_000_000 / repeats


def format_statistics(autos: list[Automobile]) -> str:
    """Table of sort times with and without a key table, and memory sizes."""
    sorts = (heap_sort, min_max_sort, quicksort)
    parts = [_RULE, "|              |  heapsort  |   minmax   |   qsort    |\n", _RULE]
    parts.append("|  with keys   |")
    parts += [f"  {time_sort(sort, autos, True):10.2f}|" for sort in sorts]
    parts.append("\n" + _RULE)
    parts.append("| without keys |")
    parts += [f"  {time_sort(sort, autos, False):10.2f}|" for sort in sorts]
    parts.append("\n" + _RULE)
    count = len(autos)
    parts.append(f"size of table: {count * RECORD_SIZE}, size of keys: {count * KEY_SIZE}\n")
    return "".join(parts)


def filter_dialog(stream: TextIO, out: TextIO) -> tuple[str, float, float]:
    """Ask for a trademark and a price range; the range is put in order."""
    out.write("trademark: ")
    try:
        trademark = read_line(stream)
    except EOFError:
        trademark = ""
    out.write("range of price:\n")
    out.write("min: ")
    price_min = _ask_float(stream)
    out.write("max: ")
    price_max = _ask_float(stream)
    if price_min - price_max > EPS:
        price_min, price_max = price_max, price_min
    return trademark, price_min, price_max


def _ask_float(stream: TextIO) -> float:
    try:
        return _parse_float(read_line(stream))
    except EOFError:
        raise AutoFormatError("missing number") from None


def _ask_int(stream: TextIO) -> int:
    try:
        return _parse_int(read_line(stream))
    except EOFError:
        raise AutoFormatError("missing number") from None


def add_dialog(stream: TextIO, out: TextIO) -> Automobile:
    """Ask for every characteristic of a new record."""

    def ask(prompt: str, reader, error: str = _READ_ERROR):
        out.write(prompt)
        try:
            return reader(stream)
        except (AutoFormatError, EOFError) as exc:
            out.write(error)
            raise AutoFormatError(f"cannot read {prompt.rstrip(': ')}") from exc

    trademark = ask("trademark: ", read_line)
    country = ask("country: ", read_line)
    price = ask("price: ", _ask_float)
    color = ask("color: ", read_line)
    out.write("condition type (old / new): ")
    try:
        condition_text = read_line(stream)
    except (AutoFormatError, EOFError):
        out.write(_READ_ERROR)
        condition_text = ""
    try:
        condition = Condition(condition_text)
    except ValueError:
        out.write(_READ_ERROR)
        raise AutoFormatError(f"unknown condition: {condition_text!r}") from None
    auto = Automobile(trademark, country, price, color, condition)
    if condition is Condition.OLD:
        auto.year = ask("year: ", _ask_int)
        auto.mileage = ask("mileage: ", _ask_int, "error while reading\n ")
        auto.repairs = ask("repairs: ", _ask_int, "error while reading\n ")
        auto.owners = ask("owners: ", _ask_int)
    else:
        auto.guarantee = ask("guarantee: ", _ask_int)
    return auto


def delete_dialog(stream: TextIO, out: TextIO, autos: list[Automobile]) -> int:
    """Ask for a field and a value, delete matching records, return how many are left.

    The remaining records are printed when there are any.
    """
    out.write(_FIELD_PROMPT)
    try:
        name = read_line(stream)
    except EOFError:
        name = ""
    try:
        field = Field(name)
    except ValueError:
        raise AutoFormatError(f"unknown field: {name!r}") from None
    out.write(_VALUE_PROMPTS[field])
    try:
        if field is Field.PRICE:
            value = _parse_float(_scan_token(stream))
        elif field is Field.NUMBER:
            value = _parse_int(_scan_token(stream))
        else:
            value = read_line(stream)
    except EOFError:
        raise AutoFormatError("missing value") from None
    delete_automobiles(autos, field, value)
    if autos:
        out.write(format_automobiles(autos))
    return len(autos)


def _read_choice(stream: TextIO, out: TextIO) -> int | None:
    while True:
        try:
            line = read_line(stream)
        except EOFError:
            return None
        except AutoFormatError:
            line = ""
        try:
            return _parse_int(line)
        except AutoFormatError:
            out.write("Incorrect number of action\nnumber of action: ")


def _load(path: str) -> list[Automobile]:
    with open(path, encoding="utf-8") as handle:
        return read_automobiles(handle, MAX_COUNT)


def main(argv: list[str] | None = None) -> int:
    """Read automobiles from a file and run the action menu on standard input."""
    parser = argparse.ArgumentParser(description="Browse and sort a table of automobiles.")
    parser.add_argument("path", nargs="?", help="file with automobile records")
    args = parser.parse_args(argv)

    stream, out = sys.stdin, sys.stdout
    out.write(_INTRO)
    if args.path is None:
        return EXIT_ERROR
    try:
        autos = _load(args.path)
    except OSError:
        out.write("no such file\n")
        return EXIT_FILE
    except AutoFormatError:
        out.write("error while reading file\n")
        return EXIT_ERROR

    out.write(_MENU)
    out.write("number of action: ")
    try:
        choice: int | None = _parse_int(_scan_token(stream))
    except (AutoFormatError, EOFError):
        out.write("nothing was chosen")
        return EXIT_ERROR

    keys = make_keys_table(autos)
    while choice is not None and choice != 0:
        if choice == 1:
            try:
                trademark, price_min, price_max = filter_dialog(stream, out)
            except AutoFormatError:
                out.write("error while reading filter values\n")
            else:
                found = filter_automobiles(autos, trademark, price_min, price_max)
                if found:
                    out.write("".join(format_automobile(auto) for auto in found))
                else:
                    out.write("No results\n")
        elif choice == 2:
            if len(autos) == MAX_COUNT:
                out.write("impossible to add\n")
            else:
                try:
                    autos.append(add_dialog(stream, out))
                except AutoFormatError:
                    pass
                else:
                    out.write("successfully added!\n")
                    keys = make_keys_table(autos)
        elif choice == 3:
            try:
                left = delete_dialog(stream, out, autos)
            except AutoFormatError:
                out.write("error while reading type of field or value of field\n")
            else:
                if not left:
                    out.write("all elements were deleted\n")
            keys = make_keys_table(autos)
        elif choice in (41, 42, 43):
            {41: min_max_sort, 42: heap_sort, 43: quicksort}[choice](keys, compare_keys)
        elif choice in (51, 52, 53):
            {51: min_max_sort, 52: heap_sort, 53: quicksort}[choice](autos, compare_autos)
            keys = make_keys_table(autos)
        elif choice == 6:
            out.write(format_statistics(list(autos)))
        elif choice == 7:
            out.write(format_automobiles(autos))
        elif choice == 8:
            out.write(format_keys(keys))
        elif choice == 9:
            out.write(format_with_keys(autos, keys))
        elif choice == 10:
            try:
                fresh = _load(args.path)
            except OSError:
                out.write("no such file\n")
            except AutoFormatError:
                out.write("error while reading file\n")
            else:
                autos[:] = (fresh + autos[len(fresh):])[: len(autos)]
            keys = make_keys_table(autos)
        else:
            out.write("Incorrect number of action\n")
        out.write("number of action: ")
        choice = _read_choice(stream, out)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())