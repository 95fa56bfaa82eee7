"""A singly linked list with the classic list exercises."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    data: Any
    next: Node | None = field(default=None, repr=False)


class SinglyLinkedList:
    """A singly linked list that tracks both its head and its tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        for value in values:
            self.insert_at_tail(value)

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> SinglyLinkedList:
        """Build a list holding the values in order."""
        return cls(values)

    def _nodes(self) -> Iterator[Node]:
        seen: set[int] = set()
        node = self.head
        while node is not None:
            if id(node) in seen:
                raise ValueError("list contains a cycle")
            seen.add(id(node))
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        if self.has_cycle():
            return f"{type(self).__name__}(<cyclic>)"
        return f"{type(self).__name__}({self.to_list()!r})"

    def _node_at(self, position: int) -> Node:
        if position >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == position:
                    return node
        raise IndexError(f"no node at position {position}")

    def _reset_tail(self) -> None:
        last = None
        for last in self._nodes():
            pass
        self.tail = last

    def _require_acyclic(self) -> None:
        if self.has_cycle():
            raise ValueError("list contains a cycle")

    def insert_at_head(self, data: Any) -> None:
        """Put data in front of the first node."""
        self.head = Node(data, self.head)
        if self.tail is None:
            self.tail = self.head

    def insert_at_tail(self, data: Any) -> None:
        """Put data after the last node."""
        node = Node(data)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def insert_at_position(self, position: int, data: Any) -> None:
        """Insert data so that it becomes the node at the 1-based position."""
        if position == 1:
            self.insert_at_head(data)
            return
        prev = self._node_at(position - 1)
        node = Node(data, prev.next)
        prev.next = node
        if prev is self.tail:
            self.tail = node

    def delete_at_position(self, position: int) -> Any:
        """Remove the node at the 1-based position and return its data."""
        if self.head is None:
            raise IndexError("cannot delete from an empty list")
        if position == 1:
            node = self.head
            self.head = node.next
            if self.head is None:
                self.tail = None
        else:
            prev = self._node_at(position - 1)
            node = prev.next
            if node is None:
                raise IndexError(f"no node at position {position}")
            prev.next = node.next
            if node is self.tail:
                self.tail = prev
        node.next = None
        return node.data

    def to_list(self) -> list[Any]:
        """Return the data of every node in order."""
        return list(self)

    def reverse(self) -> None:
        """Reverse the links in place."""
        self._require_acyclic()
        prev = None
        curr = self.head
        self.tail = curr
        while curr is not None:
            following = curr.next
            curr.next = prev
            prev = curr
            curr = following
        self.head = prev

    def k_reverse(self, k: int) -> None:
        """Reverse every group of k nodes in place; a short last group is reversed too."""
        if k < 1:
            raise ValueError(f"k must be positive, got {k}")
        self._require_acyclic()
        new_head = None
        prev_group_tail = None
        curr = self.head
        while curr is not None:
            group_head = curr
            prev = None
            for _ in range(k):
                if curr is None:
                    break
                following = curr.next
                curr.next = prev
                prev = curr
                curr = following
            if prev_group_tail is None:
                new_head = prev
            else:
                prev_group_tail.next = prev
            prev_group_tail = group_head
        self.head = new_head
        self.tail = prev_group_tail

    def middle(self) -> Any:
        """Return the data at position len // 2 + 1, counting the length first."""
        length = len(self)
        if length == 0:
            raise ValueError("list is empty")
        return next(islice(iter(self), length // 2, None))

    def middle_fast(self) -> Any:
        """Return the same middle as middle(), using a slow and a fast pointer."""
        if self.head is None:
            raise ValueError("list is empty")
        self._require_acyclic()
        slow = self.head
        fast = self.head.next
        while fast is not None:
            fast = fast.next
            if fast is not None:
                fast = fast.next
            slow = slow.next
        return slow.data

    def is_circular(self) -> bool:
        """Whether following the links from the head leads back to the head.

        An empty list counts as circular.
        """
        if self.head is None:
            return True
        seen = {id(self.head)}
        node = self.head.next
        while node is not None:
            if node is self.head:
                return True
            if id(node) in seen:
                return False
            seen.add(id(node))
            node = node.next
        return False

    def remove_sorted_duplicates(self) -> None:
        """Drop nodes equal to the node right before them."""
        self._require_acyclic()
        curr = self.head
        while curr is not None:
            if curr.next is not None and curr.next.data == curr.data:
                curr.next = curr.next.next
            else:
                if curr.next is None:
                    self.tail = curr
                curr = curr.next

    def remove_duplicates(self) -> None:
        """Keep the first node of each value, comparing every pair of nodes."""
        self._require_acyclic()
        curr = self.head
        while curr is not None:
            runner = curr
            while runner.next is not None:
                if runner.next.data == curr.data:
                    runner.next = runner.next.next
                else:
                    runner = runner.next
            curr = curr.next
        self._reset_tail()

    def remove_duplicates_hashed(self) -> None:
        """Keep the first node of each value, remembering values seen in a set."""
        self._require_acyclic()
        seen: set[Any] = set()
        prev = None
        curr = self.head
        while curr is not None:
            if curr.data in seen:
                prev.next = curr.next
            else:
                seen.add(curr.data)
                prev = curr
            curr = curr.next
        self.tail = prev

    def connect_tail_to(self, position: int) -> None:
        """Link the tail back to the node at the 1-based position, making a loop."""
        target = self._node_at(position)
        self.tail.next = target

    def has_cycle(self) -> bool:
        """Whether some node is reached twice when following the links."""
        seen: set[int] = set()
        node = self.head
        while node is not None:
            if id(node) in seen:
                return True
            seen.add(id(node))
            node = node.next
        return False

    def floyd_meeting_node(self) -> Node | None:
        """Return a node inside the loop where the two pointers meet, or None."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return slow
        return None

    def cycle_start(self) -> Node | None:
        """Return the first node of the loop, or None when there is no loop."""
        meeting = self.floyd_meeting_node()
        if meeting is None:
            return None
        slow = self.head
        while slow is not meeting:
            slow = slow.next
            meeting = meeting.next
        return slow

    def remove_cycle(self) -> bool:
        """Break the loop, if any, and report whether one was removed."""
        start = self.cycle_start()
        if start is None:
            return False
        node = start
        while node.next is not start:
            node = node.next
        node.next = None
        self.tail = node
        return True