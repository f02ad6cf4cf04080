"""Sort integers with two stacks and a restricted set of operations, plus small text, byte and list helpers."""

__version__ = "1.0.0"