"""Replay push_swap instructions on a list of numbers and report OK or KO."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO, Union

from .display import render_stacks
from .operations import Operation, Stacks
from .parse import InputError, parse_numbers, read_instructions


def check(
    numbers: Iterable[int],
    instructions: Iterable[Union[Operation, str]],
    trace: Optional[TextIO] = None,
) -> bool:
    """Run ``instructions`` on stacks built from ``numbers``; True if ``a`` ends sorted.

    When ``trace`` is a text stream, the stacks are drawn on it at the start
    and after every instruction.
    """
    stacks = Stacks.from_numbers(numbers)
    if trace is not None:
        trace.write(render_stacks(stacks, "Init a and b"))
    for instruction in instructions:
        stacks.apply(instruction)
        if trace is not None:
            trace.write(render_stacks(stacks, Operation(instruction).value))
    return stacks.is_sorted()


def main(argv: Optional[List[str]] = None) -> int:
    """Read numbers from the arguments and instructions from stdin, print OK or KO."""
    args = sys.argv[1:] if argv is None else argv
    try:
        numbers = parse_numbers(args)
        if not numbers:
            return 0
        instructions = read_instructions(sys.stdin)
    except InputError:
        print("Error", file=sys.stderr)
        return 1
    print("OK" if check(numbers, instructions) else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())