"""The two stacks of the puzzle and the eleven moves that act on them.

The top of each stack is the left end of its deque.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """A move on the stacks, named as it is written in instruction lists."""

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

    def __str__(self) -> str:
        return self.value


def parse_operation(name: str) -> Operation:
    """Return the operation written as ``name``; raise ValueError if unknown."""
    try:
        return Operation(name)
    except ValueError:
        raise ValueError(f"unknown operation: {name!r}") from None


def _swap(stack: deque) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(source: deque, target: deque) -> None:
    if source:
        target.appendleft(source.popleft())


def _rotate(stack: deque) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``, with an optional record of moves performed.

    When ``record`` is true every move is appended to ``history``, even one
    that leaves the stacks unchanged.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        *,
        record: bool = False,
    ) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.record = record
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _log(self, op: Operation) -> None:
        if self.record:
            self.history.append(op)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        _swap(self.a)
        self._log(Operation.SA)

    def sb(self) -> None:
        """Swap the two top elements of b."""
        _swap(self.b)
        self._log(Operation.SB)

    def ss(self) -> None:
        """Swap the tops of a and b at once."""
        _swap(self.a)
        _swap(self.b)
        self._log(Operation.SS)

    def pa(self) -> None:
        """Move the top of b onto a."""
        _push(self.b, self.a)
        self._log(Operation.PA)

    def pb(self) -> None:
        """Move the top of a onto b."""
        _push(self.a, self.b)
        self._log(Operation.PB)

    def ra(self) -> None:
        """Rotate a up: the top goes to the bottom."""
        _rotate(self.a)
        self._log(Operation.RA)

    def rb(self) -> None:
        """Rotate b up: the top goes to the bottom."""
        _rotate(self.b)
        self._log(Operation.RB)

    def rr(self) -> None:
        """Rotate a and b up at once."""
        _rotate(self.a)
        _rotate(self.b)
        self._log(Operation.RR)

    def rra(self) -> None:
        """Rotate a down: the bottom goes to the top."""
        _reverse_rotate(self.a)
        self._log(Operation.RRA)

    def rrb(self) -> None:
        """Rotate b down: the bottom goes to the top."""
        _reverse_rotate(self.b)
        self._log(Operation.RRB)

    def rrr(self) -> None:
        """Rotate a and b down at once."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._log(Operation.RRR)

    def apply(self, op: Operation | str) -> None:
        """Perform an operation given as an Operation or its name."""
        operation = op if isinstance(op, Operation) else parse_operation(op)
        getattr(self, operation.value)()

    def is_solved(self) -> bool:
        """True when b is empty and a is in non-decreasing order from the top."""
        if self.b:
            return False
        items = list(self.a)
        return all(x <= y for x, y in zip(items, items[1:]))