"""Interactive walk-through of radix sorting with the two push_swap stacks."""

from __future__ import annotations

import sys
from itertools import groupby
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .display import bit_width
from .operations import Stacks
from .parse import atoi

CLEAR_SCREEN = "\x1b[1;1H\x1b[2J"
_PROMPT = "\npress enter to continue ..."
_COLUMN = 10
_GAP = 5

Step = Tuple[int, str, Tuple[int, ...], Tuple[int, ...]]


def simplify(values: Iterable[int]) -> List[int]:
    """Replace every value by its index in the sorted values.

    Equal values all take the last index their value occupies.
    """
    values = list(values)
    ranks = {value: index for index, value in enumerate(sorted(values))}
    return [ranks[value] for value in values]


def to_binary(number: int, bits: int) -> str:
    """The low ``bits`` binary digits of ``number``, most significant first."""
    return "".join("1" if (number >> shift) & 1 else "0" for shift in reversed(range(bits)))


def render_columns(a: Sequence[int], b: Sequence[int], bits: int) -> str:
    """Both stacks (tops first) as two columns of binary numbers with a footer."""
    a, b = list(a), list(b)
    lines: List[str] = []
    extra_a = max(len(a) - len(b), 0)
    extra_b = max(len(b) - len(a), 0)
    for number in a[:extra_a]:
        lines.append(f"{to_binary(number, bits):>{_COLUMN}}{'':{_COLUMN + _GAP}}")
    for number in b[:extra_b]:
        lines.append(f"{'':{_COLUMN + _GAP}}{to_binary(number, bits):>{_COLUMN}}")
    for left, right in zip(a[extra_a:], b[extra_b:]):
        lines.append(
            f"{to_binary(left, bits):>{_COLUMN}}{'':{_GAP}}{to_binary(right, bits):>{_COLUMN}}"
        )
    lines.append("-" * _COLUMN + " " * _GAP + "-" * _COLUMN)
    lines.append(f"{'a':>{_COLUMN}}{'':{_GAP}}{'b':>{_COLUMN}}")
    return "\n".join(lines) + "\n\n"


def radix_steps(values: Iterable[int]) -> Iterator[Step]:
    """Run binary radix sort on the ranks of ``values``.

    Yields ``(bit, operation, a, b)`` after every operation, with both
    stacks given top first.
    """
    ranks = simplify(values)
    if not ranks:
        return
    stacks = Stacks.from_numbers(ranks)
    for bit in range(bit_width(len(ranks))):
        for _ in ranks:
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
                operation = "ra"
            else:
                stacks.pb()
                operation = "pb"
            yield bit, operation, tuple(stacks.a), tuple(stacks.b)
        while stacks.b:
            stacks.pa()
            yield bit, "pa", tuple(stacks.a), tuple(stacks.b)


def _read_char() -> str:
    char = sys.stdin.read(1)
    if not char:
        raise EOFError("input ended")
    return char


def _wait_enter() -> None:
    sys.stdout.flush()
    while _read_char() != "\n":
        pass


def _read_choice() -> str:
    sys.stdout.flush()
    while True:
        char = _read_char()
        if char.isspace():
            continue
        if char in "12":
            return char
        sys.stdout.write("invalid input ! please type 1 or 2\n")
        sys.stdout.flush()


def _run(original: List[int]) -> None:
    write = sys.stdout.write
    ranks = simplify(original)

    write(CLEAR_SCREEN)
    write("\nstep 1 : simplify numbers\n\n")
    for before, after in zip(original, ranks):
        write(f"{before}\t->\t{after}\n")
    write("\n\nOriginal input : " + "".join(f"{n} " for n in original))
    write("\n\nSimplified arr : " + "".join(f"{n} " for n in ranks))
    write("\n\npress enter to continue ...")
    _wait_enter()

    bits = bit_width(len(ranks))
    write(CLEAR_SCREEN)
    write("\nstep 2 : put numbers in stack and visualize it in base 2\n\n")
    write("arr : " + "".join(f"{n} " for n in ranks) + "\n\n")
    for number in ranks:
        write(f"{number}\t->\t{to_binary(number, bits)}\n")
    write("\n")
    write(render_columns(ranks, [], bits))
    write(_PROMPT)
    _wait_enter()

    write(CLEAR_SCREEN)
    write("\nALGO TIME !\n\n1) normal mode\n2) step by step mode\n\nPlease enter 1 or 2\n")
    choice = _read_choice()
    write("\nnormal mode !\n" if choice == "1" else "\nstep by step mode !\n")
    write(_PROMPT)
    _wait_enter()

    state: Tuple[Tuple[int, ...], Tuple[int, ...]] = (tuple(ranks), ())
    if choice == "1":
        phases = groupby(radix_steps(ranks), key=lambda step: (step[0], step[1] == "pa"))
        for (bit, gathering), steps in phases:
            *_, (_, _, a, b) = steps
            write(CLEAR_SCREEN)
            write("original status :\n\n")
            write(render_columns(*state, bits))
            if gathering:
                write("put all back in stack a\n\n")
            else:
                write(
                    f"seperate into two boxes for the {bit + 1}-th time "
                    f"( check the {bit + 1}-th digit from the right )\n\n"
                )
            write(render_columns(a, b, bits))
            if gathering and bit == bits - 1:
                write("sorted !\n")
            write(_PROMPT)
            _wait_enter()
            state = (a, b)
    else:
        for _, operation, a, b in radix_steps(ranks):
            write(CLEAR_SCREEN)
            write("original status :\n\n")
            write(render_columns(*state, bits))
            write(f"{operation}\n\n")
            write(render_columns(a, b, bits))
            write(_PROMPT)
            _wait_enter()
            state = (a, b)


def main(argv: Optional[List[str]] = None) -> int:
    """Walk through radix sorting the numbers in the arguments, pausing for Enter."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        return 0
    try:
        _run([atoi(arg) for arg in args])
    except EOFError:
        sys.stdout.flush()
        return 1
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())