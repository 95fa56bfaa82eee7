"""A stack with a fixed capacity."""

from __future__ import annotations

from typing import Any


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from or popping an empty stack."""


class BoundedStack:
    """A last-in first-out stack holding at most size elements."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, items={self._items!r})"

    def push(self, element: Any) -> None:
        """Put element on top of the stack."""
        if len(self._items) >= self.size:
            raise StackOverflowError(f"stack is full ({self.size} elements)")
        self._items.append(element)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackUnderflowError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Whether the stack holds no elements."""
        return not self._items