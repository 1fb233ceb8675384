import io
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

import pytest

from structlabs.bigdivide import (
    InputLengthError,
    Number,
    NumberFormatError,
    divide,
    format_number,
    main,
    parse_number,
    read_input_line,
)

_NORMALISED = re.compile(r"^-?0\.[1-9](\d*[1-9])?E-?\d+$")


def _value(number):
    with localcontext() as ctx:
        ctx.prec = 200
        digits = "".join(map(str, number.digits)) or "0"
        value = Decimal(digits).scaleb(number.exponent)
        return -value if number.negative else value


def _formatted_value(text):
    with localcontext() as ctx:
        ctx.prec = 200
        mantissa, exponent = text.split("E")
        return Decimal(mantissa).scaleb(int(exponent))


def _exact(a, b):
    with localcontext() as ctx:
        ctx.prec = 200
        return Decimal(a) / Decimal(b)


@pytest.mark.parametrize(
    "text",
    ["42", "-125", "+7", "0.05", ".5", "5.", "1.5e-3", "1.5E+3", "250e2", "-0.0012E-4", "007"],
)
def test_parse_number_value_matches_text(text):
    assert _value(parse_number(text)) == Decimal(text)


def test_parse_integer_keeps_sign_and_digits():
    assert parse_number("-125", integer_only=True) == Number(True, (1, 2, 5), 0)


def test_parse_drops_leading_zeros():
    assert parse_number("007", integer_only=True).digits == (7,)


def test_parse_exponent_without_digits_means_zero():
    assert _value(parse_number("7e")) == 7
    assert _value(parse_number("2e+")) == 2


@pytest.mark.parametrize("text", ["1.5", "1e5", ".5", "1-2", "+1+"])
def test_parse_integer_rejects_real_syntax(text):
    with pytest.raises(NumberFormatError):
        parse_number(text, integer_only=True)


@pytest.mark.parametrize("text", ["", "abc", "1..2", "1-2", "1e5x", "1e+5+", "1,5", " 1", "e5"])
def test_parse_rejects_malformed(text):
    with pytest.raises(NumberFormatError):
        parse_number(text)


def test_parse_exponent_limits():
    assert parse_number("1e99999").exponent == 99999
    with pytest.raises(NumberFormatError):
        parse_number("1e100000")
    with pytest.raises(NumberFormatError):
        parse_number("1e-100000")


def test_parse_mantissa_length_limit():
    assert len(parse_number("9" * 30).digits) == 30
    with pytest.raises(NumberFormatError):
        parse_number("9" * 31)


def test_read_input_line_strips_leading_spaces():
    stream = io.StringIO("   42\nnext\n")
    assert read_input_line(stream) == "42"
    assert read_input_line(stream) == "next"


def test_read_input_line_length_limit():
    assert read_input_line(io.StringIO("x" * 39 + "\n")) == "x" * 39
    with pytest.raises(InputLengthError):
        read_input_line(io.StringIO("x" * 40 + "\n"))


@pytest.mark.parametrize("data", ["", "\n", "    \n"])
def test_read_input_line_empty(data):
    with pytest.raises(InputLengthError):
        read_input_line(io.StringIO(data))


@pytest.mark.parametrize(
    "a, b",
    [
        ("10", "4"),
        ("-7", "0.25"),
        ("125", "-5e1"),
        ("1", "8e-3"),
        ("3", "1.5E+2"),
        ("1050", "5"),
        ("1002", "5"),
        ("105", "5"),
        ("7", "7"),
    ],
)
def test_divide_exact_quotients(a, b):
    text = format_number(divide(parse_number(a, True), parse_number(b)))
    assert _NORMALISED.match(text)
    assert _formatted_value(text) == _exact(a, b)


@pytest.mark.parametrize(
    "a, b", [("1", "3"), ("2", "3"), ("10", "7"), ("123456789", "0.000321"), ("-5", "1.7")]
)
def test_divide_rounds_to_thirty_digits(a, b):
    text = format_number(divide(parse_number(a, True), parse_number(b)))
    assert _NORMALISED.match(text)
    assert len(text.split("E")[0].lstrip("-")) - 2 <= 30
    with localcontext() as ctx:
        ctx.prec = 30
        ctx.rounding = ROUND_HALF_UP
        expected = +_exact(a, b)
    assert _formatted_value(text) == expected


def test_one_third():
    text = format_number(divide(parse_number("1", True), parse_number("3")))
    assert text == "0." + "3" * 30 + "E0"


def test_divide_by_itself_gives_one():
    one = format_number(parse_number("1"))
    for text in ["17", "-3", "999999"]:
        assert format_number(divide(parse_number(text, True), parse_number(text))) == one


def test_divide_by_one_keeps_value():
    number = parse_number("123450", True)
    assert format_number(divide(number, parse_number("1"))) == format_number(number)


def test_divide_sign():
    assert format_number(divide(parse_number("-6", True), parse_number("3"))).startswith("-")
    assert not format_number(divide(parse_number("-6", True), parse_number("-3"))).startswith("-")


@pytest.mark.parametrize("text", ["0", "0.0", "0e5", "+"])
def test_divide_by_zero(text):
    with pytest.raises(ZeroDivisionError):
        divide(parse_number("5", True), parse_number(text))


def test_zero_dividend():
    assert format_number(divide(parse_number("0", True), parse_number("3"))) == "0"


def test_divide_does_not_change_operands():
    dividend = parse_number("1", True)
    divisor = parse_number("3")
    divide(dividend, divisor)
    assert dividend == parse_number("1", True)
    assert divisor == parse_number("3")


def test_format_overflow_is_infinity():
    result = divide(parse_number("1", True), parse_number("1e-99999"))
    assert format_number(result) == "infinity"


def test_format_underflow_is_zero():
    result = divide(parse_number("1", True), parse_number("100e99999"))
    assert format_number(result) == "0"


def test_format_rounding_carries_into_exponent():
    assert format_number(Number(False, (9,) * 31, 0)) == format_number(Number(False, (1,), 31))


def test_format_strips_trailing_zeros():
    assert format_number(Number(False, (2, 5, 0, 0), 0)) == format_number(Number(False, (2, 5), 2))


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\n4\n"))
    assert main([]) == 0
    expected = format_number(divide(parse_number("10", True), parse_number("4")))
    assert "Result: " + expected in capsys.readouterr().out


def test_main_reports_bad_format(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1.5\n2\n"))
    assert main([]) == 3
    assert "Incorrect format of number" in capsys.readouterr().out


def test_main_reports_zero_division(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n0\n"))
    assert main([]) == 2
    assert "Zero division" in capsys.readouterr().out


def test_main_reports_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([]) == -1
    assert "String is empty or too large" in capsys.readouterr().out