"""The two stacks of the puzzle and the operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum


class Operation(str, Enum):
    """The instructions of the puzzle, valued by their printed names."""

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


def _swap(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _push(source: deque[int], destination: deque[int]) -> bool:
    if not source:
        return False
    destination.appendleft(source.popleft())
    return True


def _rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


class Stacks:
    """Stacks ``a`` and ``b`` with their tops at index 0, plus a log of operations.

    ``a`` starts with ``numbers`` (the first number on top); ``b`` starts empty.
    """

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []

    def apply_silently(self, operation: Operation | str) -> bool:
        """Perform ``operation`` without logging it.

        Returns True if any stack changed. Operations on stacks too small to
        act on leave them untouched.
        """
        operation = Operation(operation)
        a, b = self.a, self.b
        actions = {
            Operation.SA: lambda: _swap(a),
            Operation.SB: lambda: _swap(b),
            Operation.SS: lambda: _swap(a) | _swap(b),
            Operation.PA: lambda: _push(b, a),
            Operation.PB: lambda: _push(a, b),
            Operation.RA: lambda: _rotate(a),
            Operation.RB: lambda: _rotate(b),
            Operation.RR: lambda: _rotate(a) | _rotate(b),
            Operation.RRA: lambda: _reverse(a),
            Operation.RRB: lambda: _reverse(b),
            Operation.RRR: lambda: _reverse(a) | _reverse(b),
        }
        return actions[operation]()

    def apply(self, operation: Operation | str) -> bool:
        """Perform ``operation`` and log it if it changed anything."""
        operation = Operation(operation)
        changed = self.apply_silently(operation)
        if changed:
            self.operations.append(operation)
        return changed


def is_sorted(numbers: Sequence[int]) -> bool:
    """Return True if ``numbers`` is in non-decreasing order."""
    return all(left <= right for left, right in zip(numbers, numbers[1:]))