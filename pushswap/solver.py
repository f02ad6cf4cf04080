"""Sorting strategy: choose and log the operations that sort stack ``a``."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.costs import (
    cheapest_move,
    execute_move,
    min_index,
    target_above,
    target_below,
)
from pushswap.stacks import Operation, Stacks, is_sorted


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly three elements with at most two operations."""
    if len(stacks.a) != 3:
        raise ValueError("stack a must hold exactly three elements")
    first, second, third = stacks.a
    if first > second and first < third and second < third:
        stacks.apply(Operation.SA)
    elif first > second and first > third and second > third:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RRA)
    elif first > second and first > third and second < third:
        stacks.apply(Operation.RA)
    elif first < second and first < third and second > third:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RA)
    elif first < second and first > third and second > third:
        stacks.apply(Operation.RRA)


def _align_minimum(stacks: Stacks) -> None:
    """Rotate ``a`` until its smallest element is on top."""
    a = stacks.a
    index = min_index(a)
    smallest = a[index]
    # Rotate forward unless the minimum sits at the very bottom.
    step = Operation.RA if index < len(a) - 1 else Operation.RRA
    while a[0] > smallest:
        stacks.apply(step)


def _solve_large(stacks: Stacks) -> None:
    while len(stacks.a) != 3 and len(stacks.b) < 2:
        stacks.apply(Operation.PB)
    while len(stacks.a) != 3:
        move = cheapest_move(stacks.a, stacks.b, target_below)
        execute_move(stacks, move, to_b=True)
    sort_three(stacks)
    while stacks.b:
        move = cheapest_move(stacks.b, stacks.a, target_above)
        execute_move(stacks, move, to_b=False)
    _align_minimum(stacks)


def solve(numbers: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``numbers`` (first number on top of ``a``).

    Raises ValueError if the numbers are not distinct.
    """
    numbers = list(numbers)
    if len(set(numbers)) != len(numbers):
        raise ValueError("numbers must be distinct")
    stacks = Stacks(numbers)
    if is_sorted(numbers):
        return []
    if len(numbers) == 2:
        stacks.apply(Operation.SA)
    elif len(numbers) == 3:
        sort_three(stacks)
    else:
        _solve_large(stacks)
    return stacks.operations