"""Step-by-step replay of instructions read from a file, one step per Enter key."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Iterator, List, Optional, TextIO, Union

from .display import bit_width, render_stacks, render_stacks_binary
from .lines import LineReader
from .operations import Operation, Stacks
from .parse import InputError, parse_instruction, parse_numbers
from .search import binary_search, heap_sort

BONUS_INSTRUCTIONS = "instructions"
RADIX_INSTRUCTIONS = "radix_instructions"
CLEAR_SCREEN = "\x1b[1;1H\x1b[2J"
_INIT_MESSAGE = "Init a and b"

Render = Callable[[Stacks, str], str]


def load_instructions(path) -> List[Operation]:
    """Parse the instruction file at ``path``; raises InputError if unreadable or invalid."""
    try:
        with open(path, encoding="utf-8") as stream:
            return [parse_instruction(line) for line in LineReader(stream)]
    except OSError:
        raise InputError() from None


def _next_enter(keys: Iterator[str], last: Optional[str]) -> str:
    for last in keys:
        if last == "\n":
            return last
    if last == "\n":
        return last
    raise EOFError("input ended before the next step")


def replay(
    numbers: Iterable[int],
    instructions: Iterable[Union[Operation, str]],
    render: Render,
    keys: Iterable[str],
    out: TextIO,
) -> bool:
    """Apply each instruction after a newline arrives from ``keys``, drawing on ``out``.

    Writes OK with the operation count or KO at the end and returns whether
    the stacks ended sorted. Once the keys run out, a final newline keeps the
    replay going; anything else raises EOFError.
    """
    stacks = Stacks.from_numbers(numbers)
    operations = [Operation(instruction) for instruction in instructions]
    last_message = _INIT_MESSAGE
    out.write(CLEAR_SCREEN)
    out.write(render(stacks, last_message))
    out.write("press enter to continue\n")
    key_stream = iter(keys)
    key: Optional[str] = None
    for operation in operations:
        key = _next_enter(key_stream, key)
        out.write(CLEAR_SCREEN)
        out.write(render(stacks, last_message))
        stacks.apply(operation)
        out.write(render(stacks, operation.value))
        last_message = operation.value
    is_sorted = stacks.is_sorted()
    if is_sorted:
        out.write(f"\033[1;32mOK with {len(operations)} operations\033[0m\n")
    else:
        out.write("\033[0;31mKO\033[0m\n")
    return is_sorted


def _stdin_keys() -> Iterator[str]:
    return iter(lambda: sys.stdin.read(1), "")


def _run(argv: Optional[List[str]], path: str, ranked: bool) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        numbers = parse_numbers(args)
        if ranked:
            ordered = heap_sort(numbers)
            numbers = [binary_search(ordered, number) for number in numbers]
        instructions = load_instructions(path)
    except InputError:
        print("Error", file=sys.stderr)
        return 1
    if not numbers:
        return 0
    if ranked:
        bits = bit_width(len(numbers))
        render: Render = lambda stacks, message: render_stacks_binary(stacks, message, bits)
    else:
        render = render_stacks
    try:
        replay(numbers, instructions, render, _stdin_keys(), sys.stdout)
    except EOFError:
        return 1
    return 0


def main_bonus(argv: Optional[List[str]] = None) -> int:
    """Replay the ``instructions`` file on the numbers in the arguments, in decimal."""
    return _run(argv, BONUS_INSTRUCTIONS, ranked=False)


def main_radix(argv: Optional[List[str]] = None) -> int:
    """Replay ``radix_instructions`` on the ranks of the numbers, drawn in binary."""
    return _run(argv, RADIX_INSTRUCTIONS, ranked=True)


if __name__ == "__main__":
    sys.exit(main_bonus())