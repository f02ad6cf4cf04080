"""Cost model for moving one element between the stacks and carrying the move out."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from pushswap.stacks import Operation, Stacks

TargetFinder = Callable[[int, Sequence[int]], int]


@dataclass(frozen=True)
class Move:
    """How to bring one source element and its target to the tops of their stacks.

    A flag ``*_upper`` is True when the element lies in the upper half and is
    reached by rotating, False when it is reached by reverse rotating.
    """

    source_index: int
    target_index: int
    source_cost: int
    target_cost: int
    source_upper: bool
    target_upper: bool
    total: int


def rotation_cost(position: int, size: int) -> tuple[int, bool]:
    """Return the number of rotations to bring ``position`` to the top, and the direction.

    Positions strictly before ``size // 2`` are rotated up (cost ``position``);
    the others are reverse rotated (cost ``size - position``).
    """
    if size <= 0 or not 0 <= position < size:
        raise ValueError("position must lie inside the stack")
    if position < size // 2:
        return position, True
    return size - position, False


def min_index(values: Sequence[int]) -> int:
    """Return the index of the first smallest value."""
    if not values:
        raise ValueError("empty sequence")
    return min(range(len(values)), key=values.__getitem__)


def max_index(values: Sequence[int]) -> int:
    """Return the index of the first largest value."""
    if not values:
        raise ValueError("empty sequence")
    return max(range(len(values)), key=values.__getitem__)


def target_below(value: int, stack: Sequence[int]) -> int:
    """Return the index of the largest element smaller than ``value``.

    When there is none, the index of the largest element is returned.
    """
    smaller = [index for index, item in enumerate(stack) if item < value]
    if not smaller:
        return max_index(stack)
    return max(smaller, key=stack.__getitem__)


def target_above(value: int, stack: Sequence[int]) -> int:
    """Return the index of the smallest element larger than ``value``.

    When there is none, the index of the smallest element is returned.
    """
    larger = [index for index, item in enumerate(stack) if item > value]
    if not larger:
        return min_index(stack)
    return min(larger, key=stack.__getitem__)


def cheapest_move(
    source: Sequence[int], destination: Sequence[int], find_target: TargetFinder
) -> Move:
    """Return the first move of least total cost for any element of ``source``.

    When both rotations go the same way they are shared, so the total is the
    larger of the two costs; otherwise it is their sum.
    """
    if not source or not destination:
        raise ValueError("both stacks must hold elements")
    best: Move | None = None
    for index, value in enumerate(source):
        target = find_target(value, destination)
        source_cost, source_upper = rotation_cost(index, len(source))
        target_cost, target_upper = rotation_cost(target, len(destination))
        if source_upper == target_upper:
            total = max(source_cost, target_cost)
        else:
            total = source_cost + target_cost
        if best is None or total < best.total:
            best = Move(
                index, target, source_cost, target_cost,
                source_upper, target_upper, total,
            )
    assert best is not None
    return best


def execute_move(stacks: Stacks, move: Move, to_b: bool) -> None:
    """Carry out ``move`` on ``stacks``, logging every operation.

    With ``to_b`` the source is stack ``a`` and the element ends on top of
    ``b``; otherwise the element goes from ``b`` to ``a``.
    """
    if to_b:
        rotate_source, reverse_source = Operation.RA, Operation.RRA
        rotate_target, reverse_target = Operation.RB, Operation.RRB
        push = Operation.PB
    else:
        rotate_source, reverse_source = Operation.RB, Operation.RRB
        rotate_target, reverse_target = Operation.RA, Operation.RRA
        push = Operation.PA

    source_left = move.source_cost
    target_left = move.target_cost

    if not move.target_upper:
        while target_left:
            if not move.source_upper and source_left:
                stacks.apply(Operation.RRR)
                source_left -= 1
            else:
                stacks.apply(reverse_target)
            target_left -= 1
    else:
        while target_left:
            if move.source_upper and source_left:
                stacks.apply(Operation.RR)
                source_left -= 1
            else:
                stacks.apply(rotate_target)
            target_left -= 1

    step = rotate_source if move.source_upper else reverse_source
    for _ in range(source_left):
        stacks.apply(step)
    stacks.apply(push)