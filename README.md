# pushswap

This package sorts a list of distinct integers with two stacks, `a` and `b`, and a fixed
set of operations. It prints the operations that sort stack `a` in ascending order,
one per line.

## Operations

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both upward (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both downward (the bottom goes to the top) |

An operation on a stack that is too small to act on does nothing.

## Installing

```
pip install .
```

## Command line

Pass the numbers as separate arguments, or as a single argument with the numbers
separated by spaces. The first number is the top of the stack.

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

You can also run `python -m pushswap.cli`.

For input that is already sorted, the command prints nothing. With no arguments it
prints nothing and exits with status 1. It prints `Error` to standard error and exits
with status 1 when:

- a word is not a whole number (an optional `+` or `-` followed by digits),
- a number falls outside the 32-bit signed range,
- a number appears twice,
- the single argument is empty or holds only spaces.

Only a single argument is split into words, and only on spaces. When you pass several
arguments, each one must be exactly one number.

## Library use

```python
from pushswap.solver import solve
from pushswap.stacks import Stacks, is_sorted

operations = solve([3, 1, 2])
stacks = Stacks([3, 1, 2])
for operation in operations:
    stacks.apply_silently(operation)
assert is_sorted(list(stacks.a)) and not stacks.b
```

- `pushswap.solver.solve(numbers)` returns the list of `Operation` values. It raises
  `ValueError` if the numbers are not distinct. `sort_three(stacks)` sorts a
  three-element stack `a` in place.
- `pushswap.stacks.Stacks` holds the two stacks as deques, each with its top at index 0.
  `apply(operation)` performs an operation and records it in `operations` if anything
  changed. `apply_silently(operation)` performs it without recording it. Either method
  accepts an `Operation` or its name, such as `"ra"`.
- `pushswap.parse.parse_arguments(args)` turns command-line words into numbers and
  raises `pushswap.parse.InputError` on invalid input. `parse_number(word)` checks a
  single word.
- `pushswap.costs` holds the cost model that the solver uses: `rotation_cost`,
  `target_below`, `target_above`, `cheapest_move` and `execute_move`.

## Helper modules

The package also has small general-purpose helpers:

- `pushswap.chars` classifies ASCII character codes and converts their case.
- `pushswap.text` parses integers as C's `atoi` does, and splits, trims, searches and
  maps strings.
- `pushswap.buffers` finds, compares, copies, moves and fills bytes, and does bounded
  string copy, concatenation and comparison.
- `pushswap.linked` provides a singly linked list, `LinkedList`.
- `pushswap.output` provides a small `printf`, `format_text`, and stream writers.
- `pushswap.lines` provides `LineReader`, which reads lines from a text or binary stream
  in fixed-size chunks.

## What it does not include

There is no command that reads a list of operations and checks whether it sorts a given
input. To do that, apply the operations to a `Stacks` yourself, as in the example above.

## Tests

```
pip install ".[test]"
pytest
```