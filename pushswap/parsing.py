"""Turning command-line words into the list of numbers to sort."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class ParseError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""


def parse_int(text: str) -> int:
    """Read a leading integer, stopping as soon as it exceeds the int range.

    Leading whitespace and one sign are allowed; reading stops at the first
    non-digit. A value past the range is returned as soon as it is seen, so
    the result is only meaningful for range checks in that case.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for char in rest:
        if char not in _DIGITS:
            break
        number = number * 10 + int(char)
        if number > INT_MAX:
            break
    return number * sign


def is_number(text: str) -> bool:
    """True for an optionally signed run of digits within the 32-bit range."""
    if not text:
        return False
    digits = text[1:] if text[0] in ("-", "+") else text
    if not digits or any(char not in _DIGITS for char in digits):
        return False
    return INT_MIN <= parse_int(text) <= INT_MAX


def has_duplicates(values: Sequence[int]) -> bool:
    """True when some value occurs more than once."""
    return len(set(values)) != len(values)


def split_words(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    return [word for word in text.split(sep) if word]


def parse_args(args: Sequence[str]) -> list[int]:
    """Parse the program arguments into the numbers for stack a, top first.

    A single argument is split on spaces; several arguments are taken one
    number each. Raises ParseError on an empty list of numbers, a word that
    is not a number, or a repeated value.
    """
    words = split_words(args[0], " ") if len(args) == 1 else list(args)
    if not words:
        raise ParseError("no numbers given")
    for word in words:
        if not is_number(word):
            raise ParseError(f"not a valid integer: {word!r}")
    values = [parse_int(word) for word in words]
    if has_duplicates(values):
        raise ParseError("duplicate values")
    return values