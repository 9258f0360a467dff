"""Generation of distinct random 32-bit integers, raw or replaced by their ranks."""

from __future__ import annotations

import random
import sys
from typing import Iterable, List, Optional

from .parse import atoi

DEFAULT_COUNT = 100


def _signed32(value: int) -> int:
    return value - (1 << 32) if value & (1 << 31) else value


def unique_random_ints(count: int, rng: Optional[random.Random] = None) -> List[int]:
    """``count`` distinct signed 32-bit integers; a negative count gives none."""
    source = rng if rng is not None else random.Random()
    used = set()
    numbers: List[int] = []
    for _ in range(count):
        number = _signed32(source.getrandbits(32))
        while number in used:
            number = _signed32(source.getrandbits(32))
        used.add(number)
        numbers.append(number)
    return numbers


def rank(values: Iterable[int]) -> List[int]:
    """Replace each value by its position in the sorted values."""
    values = list(values)
    positions = {value: index for index, value in enumerate(sorted(values))}
    return [positions[value] for value in values]


def _count_from(argv: Optional[List[str]]) -> int:
    args = sys.argv[1:] if argv is None else argv
    return atoi(args[0]) if args else DEFAULT_COUNT


def main_raw(argv: Optional[List[str]] = None) -> int:
    """Print the requested number (default 100) of distinct random integers."""
    for number in unique_random_ints(_count_from(argv)):
        print(number)
    return 0


def main_ranked(argv: Optional[List[str]] = None) -> int:
    """Print a random permutation of 0 .. count-1 (default count 100)."""
    for number in rank(unique_random_ints(_count_from(argv))):
        print(number)
    return 0


if __name__ == "__main__":
    sys.exit(main_raw())