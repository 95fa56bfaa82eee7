"""A doubly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """One link of a doubly linked list."""

    data: Any
    prev: DoublyNode | None = field(default=None, repr=False)
    next: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list that tracks both its head and its tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        for value in values:
            self.insert_at_tail(value)

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def _node_at(self, position: int) -> DoublyNode:
        if position >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == position:
                    return node
        raise IndexError(f"no node at position {position}")

    def insert_at_head(self, data: Any) -> None:
        """Put data in front of the first node."""
        node = DoublyNode(data, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node

    def insert_at_tail(self, data: Any) -> None:
        """Put data after the last node."""
        node = DoublyNode(data, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node

    def insert_at_position(self, position: int, data: Any) -> None:
        """Insert data so that it becomes the node at the 1-based position."""
        if position == 1:
            self.insert_at_head(data)
            return
        before = self._node_at(position - 1)
        if before is self.tail:
            self.insert_at_tail(data)
            return
        after = before.next
        node = DoublyNode(data, prev=before, next=after)
        after.prev = node
        before.next = node

    def delete_at_position(self, position: int) -> Any:
        """Remove the node at the 1-based position and return its data."""
        if self.head is None:
            raise IndexError("cannot delete from an empty list")
        node = self._node_at(position)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        return node.data

    def to_list(self) -> list[Any]:
        """Return the data of every node from head to tail."""
        return list(self)