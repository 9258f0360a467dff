"""Text rendering of the two stacks side by side, in decimal or in binary."""

from __future__ import annotations

from typing import Callable

from .operations import Stacks

_WIDTH = 11
_GAP = " " * 5
_FOOTER = ("__________a     __________b", "---------------------------")


def bit_width(count: int) -> int:
    """Number of binary digits needed to write every rank from 0 to ``count - 1``."""
    bits = 0
    while (count - 1) >> bits > 0:
        bits += 1
    return bits


def format_binary(number: int, bits: int) -> str:
    """The low ``bits`` binary digits of ``number``, right-aligned in 11 columns."""
    digits = "".join("1" if (number >> shift) & 1 else "0" for shift in reversed(range(bits)))
    return digits.rjust(_WIDTH)


def _format_decimal(number: int) -> str:
    return f"{number:>{_WIDTH}}"


def _render(stacks: Stacks, message: str, fmt: Callable[[int], str]) -> str:
    a, b = list(stacks.a), list(stacks.b)
    lines = [message]
    lines.extend("" for _ in range(min(len(a), len(b))))
    for level in reversed(range(max(len(a), len(b)))):
        left = fmt(a[len(a) - 1 - level]) if level < len(a) else " " * _WIDTH
        right = fmt(b[len(b) - 1 - level]) if level < len(b) else ""
        lines.append(left + _GAP + right)
    lines.extend(_FOOTER)
    return "\n".join(lines) + "\n"


def render_stacks(stacks: Stacks, message: str) -> str:
    """Both stacks as columns of decimal numbers, tops first, under ``message``."""
    return _render(stacks, message, _format_decimal)


def render_stacks_binary(stacks: Stacks, message: str, bits: int) -> str:
    """Both stacks as columns of ``bits``-digit binary numbers, under ``message``."""
    return _render(stacks, message, lambda number: format_binary(number, bits))