"""A bounded last-in, first-out stack."""

from __future__ import annotations

import sys
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(LookupError):
    """Raised when reading from an empty stack."""


class Stack(Generic[T]):
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={self._items!r})"


def main(argv: list[str] | None = None) -> int:
    """Show the basic stack operations."""
    del argv
    stack: Stack[int] = Stack(5)
    for value in (10, 20, 30):
        stack.push(value)

    out = sys.stdout
    print(f"Top element: {stack.peek()}", file=out)
    print(f"Stack size: {len(stack)}", file=out)
    while not stack.is_empty():
        print(f"Popped element: {stack.pop()}", file=out)
    print(f"Is stack empty? {'Yes' if stack.is_empty() else 'No'}", file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())