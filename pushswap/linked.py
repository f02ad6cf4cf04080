"""A minimal singly linked list holding arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One cell of a linked list."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list whose iteration yields the stored contents in order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, content: Any) -> Node:
        """Add ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def prepend(self, content: Any) -> Node:
        """Add ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Optional[Node]:
        """Return the final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, passing each content to ``delete`` first if given."""
        contents = list(self)
        self.head = None
        if delete is not None:
            for content in contents:
                delete(content)

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> LinkedList:
        """Return a new list of ``func(content)`` for each content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.append(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result