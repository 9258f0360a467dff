"""ASCII character classification and case conversion on character codes."""

from __future__ import annotations

from typing import Union

Code = Union[int, str]


def _code(value: Code) -> int:
    return ord(value) if isinstance(value, str) else value


def is_alpha(code: Code) -> bool:
    """True for an ASCII letter."""
    c = _code(code)
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def is_alnum(code: Code) -> bool:
    """True for an ASCII letter or digit."""
    c = _code(code)
    return is_alpha(c) or ord("0") <= c <= ord("9")


def is_ascii(code: Code) -> bool:
    """True for a code from 0 to 127."""
    return 0 <= _code(code) <= 127


def is_print(code: Code) -> bool:
    """True for a printable ASCII character, space through tilde."""
    return ord(" ") <= _code(code) <= ord("~")


def to_lower(code: Code) -> int:
    """Code of the lower-case letter for an upper-case ASCII letter, else unchanged."""
    c = _code(code)
    if ord("A") <= c <= ord("Z"):
        return c + ord("a") - ord("A")
    return c


def to_upper(code: Code) -> int:
    """Code of the upper-case letter for a lower-case ASCII letter, else unchanged."""
    c = _code(code)
    if ord("a") <= c <= ord("z"):
        return c - ord("a") + ord("A")
    return c