"""String helpers: splitting, trimming, bounded searching and bounded copying."""

from __future__ import annotations

from typing import List, Optional, Tuple

_NUL = "\0"


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on a single-character ``separator``, dropping empty pieces."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(separator) if piece]


def trim(text: str, charset: Optional[str]) -> str:
    """Strip every character found in ``charset`` from both ends of ``text``.

    With ``charset`` of None the text comes back unchanged.
    """
    if charset is None:
        return text
    return text.strip(charset)


def itoa(number: int) -> str:
    """Decimal representation of ``number``."""
    return str(number)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(length, 0))
    return None if index < 0 else index


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; a NUL matches the end of the text."""
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; a NUL matches the end of the text."""
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def bounded_copy(source: str, size: int) -> Tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``source``. A size of 0
    copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(source)
    return source[:size - 1], len(source)


def bounded_concat(dest: str, source: str, size: int) -> Tuple[str, int]:
    """Append ``source`` to ``dest`` in a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have needed, counting ``dest`` as at most ``size`` long.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dest, len(source)
    kept = min(len(dest), size)
    if len(dest) >= size:
        return dest, kept + len(source)
    room = size - 1 - len(dest)
    return dest + source[:max(room, 0)], kept + len(source)