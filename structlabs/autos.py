"""Automobile records: reading, printing, filtering, deleting and key tables.

Records are read from a text stream, one characteristic per line:
trademark, country, price, colour, ``old`` or ``new``, then either the
guarantee in years (new cars) or year, mileage, repairs and owners (old
cars).  Blank lines between records are allowed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

MAX_LENGTH = 30
MAX_COUNT = 100
EPS = 1e-10

_WHITESPACE = " \t\n\r\v\f"
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"[+-]?\d+")


class AutoFormatError(ValueError):
    """Raised when input does not hold a well-formed automobile record."""


class Condition(Enum):
    """Whether a car is sold new or second-hand."""

    OLD = "old"
    NEW = "new"


class Field(Enum):
    """A field that selects automobiles for deletion."""

    NUMBER = "number"
    TRADEMARK = "trademark"
    COUNTRY = "country"
    PRICE = "price"
    COLOR = "color"
    CONDITION_TYPE = "condition type"


@dataclass
class Automobile:
    """One car; new cars use ``guarantee``, old ones the remaining counters."""

    trademark: str
    country: str
    price: float
    color: str
    condition: Condition = Condition.NEW
    guarantee: int = 0
    year: int = 0
    mileage: int = 0
    repairs: int = 0
    owners: int = 0


@dataclass(frozen=True)
class KeyEntry:
    """A key-table row: position of a record and its price."""

    index: int
    value: float


def _parse_number(text: str, pattern: re.Pattern[str], convert, whole: bool):
    stripped = text.lstrip(_WHITESPACE)
    match = pattern.fullmatch(stripped) if whole else pattern.match(stripped)
    if match is None:
        raise AutoFormatError(f"not a number: {text!r}")
    return convert(match.group())


def _parse_float(text: str, whole: bool = False) -> float:
    return _parse_number(text, _FLOAT_RE, float, whole)


def _parse_int(text: str, whole: bool = False) -> int:
    return _parse_number(text, _INT_RE, int, whole)


def _scan_token(stream: TextIO) -> str:
    """Skip whitespace and return the next run of non-whitespace characters."""
    char = stream.read(1)
    while char and char in _WHITESPACE:
        char = stream.read(1)
    if not char:
        raise EOFError("end of input")
    chars = []
    while char and char not in _WHITESPACE:
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def _scan_float(stream: TextIO, whole: bool = True) -> float:
    return _parse_float(_scan_token(stream), whole)


def _scan_int(stream: TextIO, whole: bool = True) -> int:
    return _parse_int(_scan_token(stream), whole)


def read_line(stream: TextIO, max_length: int = MAX_LENGTH) -> str:
    """Read a line, skipping empty lines before it.

    Raises AutoFormatError when the line reaches ``max_length`` characters
    and EOFError when the input ends before any character.
    """
    char = stream.read(1)
    while char == "\n":
        char = stream.read(1)
    chars: list[str] = []
    while char and char != "\n":
        if len(chars) >= max_length - 1:
            raise AutoFormatError(f"line longer than {max_length - 1} characters")
        chars.append(char)
        char = stream.read(1)
    if not chars:
        raise EOFError("end of input")
    return "".join(chars)


def read_automobile(stream: TextIO) -> Automobile:
    """Read one record; raises AutoFormatError or EOFError when it cannot."""
    trademark = read_line(stream)
    country = read_line(stream)
    price = _scan_float(stream)
    color = read_line(stream)
    condition_text = read_line(stream)
    try:
        condition = Condition(condition_text)
    except ValueError:
        raise AutoFormatError(f"unknown condition: {condition_text!r}") from None
    auto = Automobile(trademark, country, price, color, condition)
    if condition is Condition.OLD:
        auto.year = _scan_int(stream)
        auto.mileage = _scan_int(stream)
        auto.repairs = _scan_int(stream)
        auto.owners = _scan_int(stream)
    else:
        auto.guarantee = _scan_int(stream)
    return auto


def read_automobiles(stream: TextIO, max_count: int = MAX_COUNT) -> list[Automobile]:
    """Read records until one fails to parse.

    Raises AutoFormatError when no record was read or more than
    ``max_count`` records are present.
    """
    autos: list[Automobile] = []
    while True:
        try:
            auto = read_automobile(stream)
        except (AutoFormatError, EOFError):
            break
        if len(autos) == max_count:
            raise AutoFormatError(f"more than {max_count} automobiles")
        autos.append(auto)
    if not autos:
        raise AutoFormatError("no automobiles read")
    return autos


def format_automobile(auto: Automobile) -> str:
    """Render a record as ``name: value`` lines followed by a blank line."""
    lines = [
        f"trademark: {auto.trademark}",
        f"country: {auto.country}",
        f"price: {auto.price:f}",
        f"color: {auto.color}",
    ]
    if auto.condition is Condition.OLD:
        lines += [
            f"year: {auto.year}",
            f"mileage: {auto.mileage}",
            f"repairs: {auto.repairs}",
            f"owners: {auto.owners}",
        ]
    else:
        lines.append(f"guarantee: {auto.guarantee}")
    return "\n".join(lines) + "\n\n"


def format_automobiles(autos: list[Automobile]) -> str:
    """Render all records, numbered from one, followed by their count."""
    parts = [
        f"number: {number}\n{format_automobile(auto)}"
        for number, auto in enumerate(autos, start=1)
    ]
    parts.append(f"number of autos: {len(autos)}\n")
    return "".join(parts)


def matches(auto: Automobile, field: Field, value, index: int) -> bool:
    """Tell whether the record at ``index`` has ``value`` in ``field``."""
    if field is Field.NUMBER:
        return value - 1 == index
    if field is Field.TRADEMARK:
        return auto.trademark == value
    if field is Field.COUNTRY:
        return auto.country == value
    if field is Field.COLOR:
        return auto.color == value
    if field is Field.CONDITION_TYPE:
        return value == auto.condition.value
    if field is Field.PRICE:
        return abs(auto.price - value) <= EPS
    return False


def delete_automobiles(autos: list[Automobile], field: Field, value) -> int:
    """Remove matching records in place and return how many were removed.

    Deleting by number removes at most one record.
    """
    before = len(autos)
    if field is Field.NUMBER:
        for index, auto in enumerate(autos):
            if matches(auto, field, value, index):
                del autos[index]
                break
    else:
        autos[:] = [
            auto
            for index, auto in enumerate(autos)
            if not matches(auto, field, value, index)
        ]
    return before - len(autos)


def filter_automobiles(
    autos: list[Automobile], trademark: str, price_min: float, price_max: float
) -> list[Automobile]:
    """Old cars of a trademark in a price range with one owner and no repairs."""
    return [
        auto
        for auto in autos
        if auto.condition is Condition.OLD
        and auto.trademark == trademark
        and price_min <= auto.price <= price_max
        and auto.owners == 1
        and auto.repairs == 0
    ]


def make_keys_table(autos: list[Automobile]) -> list[KeyEntry]:
    """Build the price key table in record order."""
    return [KeyEntry(index, auto.price) for index, auto in enumerate(autos)]


def _compare_values(first: float, second: float) -> int:
    if first - second > EPS:
        return 1
    if second - first > EPS:
        return -1
    return 0


def compare_keys(first: KeyEntry, second: KeyEntry) -> int:
    """Three-way comparison of key entries by price."""
    return _compare_values(first.value, second.value)


def compare_autos(first: Automobile, second: Automobile) -> int:
    """Three-way comparison of records by price."""
    return _compare_values(first.price, second.price)


def format_with_keys(autos: list[Automobile], keys: list[KeyEntry]) -> str:
    """Render records in the order given by the key table."""
    parts = [format_automobile(autos[key.index]) for key in keys]
    parts.append(f"number of autos: {len(keys)}\n")
    return "".join(parts)


def format_keys(keys: list[KeyEntry]) -> str:
    """Render the key table, positions counted from one."""
    return "".join(f"position: {key.index + 1}; value: {key.value:f}\n" for key in keys)