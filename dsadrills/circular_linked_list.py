"""A circular singly linked list referenced through its tail."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class CircularNode:
    """One link of a circular list."""

    data: Any
    next: CircularNode | None = field(default=None, repr=False)


class CircularLinkedList:
    """A circular list; traversal starts at the tail node."""

    def __init__(self) -> None:
        self.tail: CircularNode | None = None

    def _nodes(self) -> Iterator[CircularNode]:
        if self.tail is None:
            return
        node = self.tail
        while True:
            yield node
            node = node.next
            if node is self.tail or node is None:
                return

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def insert_after(self, element: Any, data: Any) -> None:
        """Insert data after the first node holding element.

        On an empty list the node is created and element is ignored.
        """
        if self.tail is None:
            node = CircularNode(data)
            node.next = node
            self.tail = node
            return
        for curr in self._nodes():
            if curr.data == element:
                curr.next = CircularNode(data, curr.next)
                return
        raise ValueError(f"{element!r} is not in the list")

    def delete(self, value: Any) -> None:
        """Remove the first node holding value, searching from after the tail."""
        if self.tail is None:
            raise IndexError("cannot delete from an empty list")
        prev = self.tail
        curr = prev.next
        while curr.data != value:
            prev = curr
            curr = curr.next
            if prev is self.tail:
                raise ValueError(f"{value!r} is not in the list")
        if curr is prev:
            self.tail = None
        elif curr is self.tail:
            self.tail = prev
        prev.next = curr.next
        curr.next = None

    def to_list(self) -> list[Any]:
        """Return the data of every node, starting at the tail."""
        return list(self)

    def is_circular(self) -> bool:
        """Whether following the links from the tail leads back to it.

        An empty list counts as circular.
        """
        if self.tail is None:
            return True
        seen = {id(self.tail)}
        node = self.tail.next
        while node is not None and node is not self.tail:
            if id(node) in seen:
                return False
            seen.add(id(node))
            node = node.next
        return node is self.tail