"""Validating and reading the integers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .numbers import INT_MAX, INT_MIN, atoi
from .textops import split

_NUMBER = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """Raised when the arguments do not form a valid list of distinct integers."""


def is_valid_number(text: str) -> bool:
    """True for an optional sign followed by decimal digits that fit in 32 bits."""
    if not _NUMBER.fullmatch(text):
        return False
    return INT_MIN <= int(text) <= INT_MAX


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values are in non-decreasing order."""
    items = list(values)
    return all(x <= y for x, y in zip(items, items[1:]))


def assign_index(values: Sequence[int]) -> list[int]:
    """Return, for each value, how many of the values are strictly smaller."""
    ordered = sorted(values)
    first_position: dict[int, int] = {}
    for position, value in enumerate(ordered):
        first_position.setdefault(value, position)
    return [first_position[value] for value in values]


def _read_number(token: str) -> int:
    if not is_valid_number(token):
        raise ParseError(f"not a valid integer: {token!r}")
    return atoi(token)


def _reject_duplicates(values: list[int]) -> list[int]:
    if has_duplicates(values):
        raise ParseError("duplicate values")
    return values


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Read integers from arguments that may each hold several, separated by spaces.

    An argument with no number in it, an invalid number or a repeated value
    raises ParseError.
    """
    values: list[int] = []
    for arg in args:
        tokens = split(arg, " ")
        if not tokens:
            raise ParseError(f"argument holds no number: {arg!r}")
        values.extend(_read_number(token) for token in tokens)
    return _reject_duplicates(values)


def parse_arguments_strict(args: Iterable[str]) -> list[int]:
    """Read exactly one integer from each argument.

    An invalid number or a repeated value raises ParseError.
    """
    return _reject_duplicates([_read_number(arg) for arg in args])