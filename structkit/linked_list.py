"""A singly linked list of values."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: Optional[T] = None
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list with positional and value-based edits."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] = _Node()
        self._tail: _Node[T] = self._head
        self._length = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head.next
        while node is not None:
            yield node
            node = node.next

    def _link_after(self, node: _Node[T], value: T) -> None:
        new = _Node(value, node.next)
        node.next = new
        if node is self._tail:
            self._tail = new
        self._length += 1

    def _unlink_after(self, node: _Node[T]) -> T:
        removed = node.next
        assert removed is not None
        node.next = removed.next
        if removed is self._tail:
            self._tail = node
        self._length -= 1
        return removed.value  # type: ignore[return-value]

    def _node_before(self, position: int) -> _Node[T]:
        node = self._head
        for _ in range(position):
            assert node.next is not None
            node = node.next
        return node

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        self._link_after(self._tail, value)

    def insert_at(self, value: T, position: int) -> None:
        """Insert ``value`` so that it ends up at index ``position``."""
        if not 0 <= position <= self._length:
            raise IndexError(f"position {position} out of range")
        self._link_after(self._node_before(position), value)

    def remove_at(self, position: int) -> T:
        """Remove and return the value at index ``position``."""
        if not 0 <= position < self._length:
            raise IndexError(f"position {position} out of range")
        return self._unlink_after(self._node_before(position))

    def insert_after_value(self, target: T, value: T) -> None:
        """Insert ``value`` after the first node holding ``target``."""
        for node in self._nodes():
            if node.value == target:
                self._link_after(node, value)
                return
        raise ValueError(f"{target!r} is not in the list")

    def remove_after_value(self, target: T) -> T:
        """Remove and return the value following the first ``target`` that has a successor."""
        for node in self._nodes():
            if node.value == target and node.next is not None:
                return self._unlink_after(node)
        raise ValueError(f"no value follows {target!r} in the list")

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value  # type: ignore[misc]

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def main(argv: list[str] | None = None) -> int:
    """Show the list operations on a small example."""
    del argv
    out = sys.stdout

    def show() -> None:
        for value in items:
            print(value, file=out)

    items: LinkedList[int] = LinkedList([5, 7, 8, 9])
    print("\nOriginal list:", file=out)
    show()

    print("\nInsert 99 at position 2:", file=out)
    items.insert_at(99, 2)
    show()

    print("\nRemove at position 1:", file=out)
    items.remove_at(1)
    show()

    print("\nInsert 88 after value 8:", file=out)
    items.insert_after_value(8, 88)
    show()

    print("\nRemove node after value 5:", file=out)
    items.remove_after_value(5)
    show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())