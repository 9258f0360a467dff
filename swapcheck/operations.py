"""The two push_swap stacks and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from itertools import islice
from typing import Iterable, Union


class Operation(str, Enum):
    """An instruction understood by the checker."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each deque is the top."""

    a: deque = field(default_factory=deque)
    b: deque = field(default_factory=deque)

    @classmethod
    def from_numbers(cls, numbers: Iterable[int]) -> "Stacks":
        """Fill ``a`` so that the first number is on top; ``b`` starts empty."""
        return cls(deque(numbers), deque())

    @staticmethod
    def _swap(stack: deque) -> None:
        if len(stack) > 1:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(source: deque, target: deque) -> None:
        if source:
            target.appendleft(source.popleft())

    @staticmethod
    def _rotate(stack: deque) -> None:
        stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque) -> None:
        stack.rotate(1)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._swap(self.a)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._swap(self.b)

    def ss(self) -> None:
        """``sa`` and ``sb`` at once."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.b, self.a)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.a, self.b)

    def ra(self) -> None:
        """Send the top of ``a`` to its bottom."""
        self._rotate(self.a)

    def rb(self) -> None:
        """Send the top of ``b`` to its bottom."""
        self._rotate(self.b)

    def rr(self) -> None:
        """``ra`` and ``rb`` at once."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Bring the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a)

    def rrb(self) -> None:
        """Bring the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b)

    def rrr(self) -> None:
        """``rra`` and ``rrb`` at once."""
        self.rra()
        self.rrb()

    def apply(self, operation: Union[Operation, str]) -> None:
        """Run one operation, given as an :class:`Operation` or its name.

        Raises ValueError for a name that is not an operation.
        """
        getattr(self, Operation(operation).value)()

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` ascends from top to bottom."""
        if self.b:
            return False
        return all(upper <= lower for upper, lower in zip(self.a, islice(self.a, 1, None)))