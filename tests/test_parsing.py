import pytest

from pushswap.parsing import (
    ParseError,
    has_duplicates,
    is_number,
    parse_args,
    parse_int,
    split_words,
)


def test_parse_int_plain_and_signed():
    assert parse_int("42") == 42
    assert parse_int("-17") == -17
    assert parse_int("+8") == 8


def test_parse_int_skips_leading_whitespace_and_stops_at_junk():
    assert parse_int(" \t\n-12abc") == -12
    assert parse_int("abc") == 0


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648
    assert parse_int("2147483648") > 2147483647
    assert parse_int("99999999999999999999") > 2147483647


@pytest.mark.parametrize(
    "text", ["0", "-0", "+5", "2147483647", "-2147483648", "007"]
)
def test_is_number_accepts(text):
    assert is_number(text)


@pytest.mark.parametrize(
    "text",
    ["", "-", "+", "1a", " 1", "1 ", "--1", "2147483648", "-2147483649", "١٢"],
)
def test_is_number_rejects(text):
    assert not is_number(text)


def test_has_duplicates():
    assert has_duplicates([1, 2, 1])
    assert not has_duplicates([1, 2, 3])
    assert not has_duplicates([])


def test_split_words_drops_empty_words():
    assert split_words("  1  2 3 ", " ") == ["1", "2", "3"]
    assert split_words("", " ") == []
    assert split_words("1\t2", " ") == ["1\t2"]


def test_parse_args_single_argument_is_split():
    assert parse_args(["3 1 2"]) == [3, 1, 2]


def test_parse_args_several_arguments():
    assert parse_args(["3", "-1", "+2"]) == [3, -1, 2]


def test_parse_args_extremes():
    assert parse_args(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


@pytest.mark.parametrize(
    "args",
    [
        [""],
        ["   "],
        ["1", "1"],
        ["1 2 1"],
        ["a"],
        ["1", "two"],
        ["1 2", "3"],
        ["1\t2"],
        ["2147483648"],
        ["-"],
        ["0", "-0"],
    ],
)
def test_parse_args_errors(args):
    with pytest.raises(ParseError):
        parse_args(args)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["x"])