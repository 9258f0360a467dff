"""Parsing of the numbers and instructions given to the checker."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple, Union

from .operations import Operation

_SPACES = frozenset("\t\n\v\f\r ")
_INT_MAX = 2147483647
_INT_MIN_MAGNITUDE = 2147483648


class InputError(ValueError):
    """Raised for any input the checker rejects."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def is_space(char: str) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return char in _SPACES


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def atoi(text: str) -> int:
    """Lenient conversion: leading blanks, a sign, then digits up to the first other char.

    The result wraps to a signed 32-bit integer.
    """
    text = text.lstrip("".join(_SPACES))
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for char in text:
        if not _is_digit(char):
            break
        value = value * 10 + int(char)
    value *= sign
    return (value + 2**31) % 2**32 - 2**31


def _as_bytes(text: Union[str, bytes]) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def compare_prefix(first: Union[str, bytes], second: Union[str, bytes], length: int) -> int:
    """Compare at most ``length`` characters; the end of a string counts as a zero byte."""
    left, right = _as_bytes(first), _as_bytes(second)
    for index in range(length):
        c1 = left[index] if index < len(left) else 0
        c2 = right[index] if index < len(right) else 0
        if c1 == 0 or c2 == 0 or c1 != c2:
            return c1 - c2
    return 0


def _read_ranged_int(text: str, pos: int) -> Tuple[int, int]:
    sign = 1
    index = pos
    if text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
        if index >= len(text) or not _is_digit(text[index]):
            raise InputError()
    limit = _INT_MAX if sign == 1 else _INT_MIN_MAGNITUDE
    value = 0
    while index < len(text):
        char = text[index]
        if not _is_digit(char):
            if is_space(char):
                return sign * value, index
            raise InputError()
        value = value * 10 + int(char)
        leading_zero = value == 0 and index + 1 < len(text) and _is_digit(text[index + 1])
        if value > limit or leading_zero:
            raise InputError()
        index += 1
    return sign * value, index


def parse_ints(text: str) -> List[int]:
    """Read every blank-separated 32-bit integer from ``text``.

    Raises InputError on stray characters, leading zeros or out-of-range values.
    """
    numbers: List[int] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if is_space(char):
            pos += 1
        elif _is_digit(char) or char in "+-":
            value, pos = _read_ranged_int(text, pos)
            numbers.append(value)
        else:
            raise InputError()
    return numbers


def has_duplicate(numbers: Sequence[int]) -> bool:
    """True if some value occurs more than once."""
    return len(set(numbers)) != len(numbers)


def parse_numbers(args: Iterable[str]) -> List[int]:
    """Collect the integers from all arguments; duplicates raise InputError."""
    numbers = [number for arg in args for number in parse_ints(arg)]
    if has_duplicate(numbers):
        raise InputError()
    return numbers


def parse_instruction(line: str) -> Operation:
    """Turn an exact instruction name into an :class:`Operation`."""
    try:
        return Operation(line)
    except ValueError:
        raise InputError() from None


def read_instructions(lines: Iterable[str]) -> List[Operation]:
    """Parse one instruction per line, ignoring each line's trailing newline."""
    return [parse_instruction(line.removesuffix("\n")) for line in lines]