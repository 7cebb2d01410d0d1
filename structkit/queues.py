"""Fixed-capacity linear, circular and double-ended queues."""

from __future__ import annotations

import sys
from collections import deque
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 5


class QueueOverflowError(OverflowError):
    """Raised when adding to a full queue."""


class QueueUnderflowError(LookupError):
    """Raised when removing from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class LinearQueue(Generic[T]):
    """A queue over a fixed array whose slots are never reused.

    Once ``capacity`` items have been enqueued the queue reports overflow,
    even if some of them have since been dequeued.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[T] = []
        self._front = 0

    def enqueue(self, value: T) -> None:
        """Append ``value`` at the rear."""
        if len(self._slots) >= self.capacity:
            raise QueueOverflowError("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value."""
        if self.is_empty():
            raise QueueUnderflowError("queue underflow")
        value = self._slots[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        return self._front >= len(self._slots)

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __repr__(self) -> str:
        return f"LinearQueue(capacity={self.capacity}, items={list(self)!r})"


class CircularQueue(Generic[T]):
    """A queue that reuses freed slots, holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[T] = deque()

    def enqueue(self, value: T) -> None:
        """Append ``value`` at the rear."""
        if len(self._items) >= self.capacity:
            raise QueueOverflowError("queue overflow")
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value."""
        if not self._items:
            raise QueueUnderflowError("queue underflow")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CircularQueue(capacity={self.capacity}, items={list(self)!r})"


class Deque(Generic[T]):
    """A double-ended queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[T] = deque()

    def _ensure_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise QueueOverflowError("deque overflow")

    def _ensure_items(self) -> None:
        if not self._items:
            raise QueueUnderflowError("deque underflow")

    def add_front(self, value: T) -> None:
        """Insert ``value`` before the front."""
        self._ensure_room()
        self._items.appendleft(value)

    def add_rear(self, value: T) -> None:
        """Insert ``value`` after the rear."""
        self._ensure_room()
        self._items.append(value)

    def remove_front(self) -> T:
        """Remove and return the front value."""
        self._ensure_items()
        return self._items.popleft()

    def remove_rear(self) -> T:
        """Remove and return the rear value."""
        self._ensure_items()
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Deque(capacity={self.capacity}, items={list(self)!r})"


def _show(label: str, items: Iterable[object]) -> str:
    values = list(items)
    if not values:
        return "Empty"
    return f"{label}: " + "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Exercise each kind of queue and print its contents."""
    del argv
    out = sys.stdout

    linear: LinearQueue[int] = LinearQueue()
    for value in (1, 2, 3):
        linear.enqueue(value)
    print(_show("LQ", linear), file=out)
    linear.dequeue()
    print(_show("LQ", linear), file=out)

    circular: CircularQueue[int] = CircularQueue()
    for value in (10, 20, 30):
        circular.enqueue(value)
    print(_show("CQ", circular), file=out)
    circular.dequeue()
    print(_show("CQ", circular), file=out)

    double: Deque[int] = Deque()
    double.add_front(100)
    double.add_rear(200)
    print(_show("DQ", double), file=out)
    double.remove_front()
    print(_show("DQ", double), file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())