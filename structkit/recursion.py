"""Factorial, Fibonacci and the Tower of Hanoi."""

from __future__ import annotations

import sys
from typing import NamedTuple


class Move(NamedTuple):
    """A single Tower of Hanoi move."""

    disk: int
    source: str
    destination: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.destination}"


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("Invalid input: n must not be negative")


def factorial(n: int) -> int:
    """Return n! computed recursively."""
    _check_non_negative(n)
    if n <= 1:
        return 1
    return n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion."""
    _check_non_negative(n)
    if n < 2:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def tail_factorial(n: int) -> int:
    """Return n! using an accumulator."""
    _check_non_negative(n)
    accumulator = 1
    while n > 1:
        n, accumulator = n - 1, n * accumulator
    return accumulator


def tail_fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number using a pair of accumulators."""
    _check_non_negative(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def hanoi(
    n: int, source: str = "A", destination: str = "C", auxiliary: str = "B"
) -> list[Move]:
    """Return the moves that carry ``n`` disks from ``source`` to ``destination``."""
    if n < 1:
        raise ValueError("Invalid input: at least one disk is needed")

    moves: list[Move] = []

    def solve(count: int, src: str, dst: str, aux: str) -> None:
        if count == 1:
            moves.append(Move(1, src, dst))
            return
        solve(count - 1, src, aux, dst)
        moves.append(Move(count, src, dst))
        solve(count - 1, aux, dst, src)

    solve(n, source, destination, auxiliary)
    return moves


def main(argv: list[str] | None = None) -> int:
    """Print the sample results for n = 5 and a three-disk Hanoi solution."""
    del argv
    out = sys.stdout
    print(f"Factorial of 5:{factorial(5)}", file=out)
    print(f"Fibonacci of 5:{fibonacci(5)}", file=out)
    print(f"Tail Recursion Factorial of 5:{tail_factorial(5)}", file=out)
    print(f"Tail Recursion Fibonacci of 5:{tail_fibonacci(5)}", file=out)
    print("Tower of Hanoi with 3 disks:", file=out)
    for move in hanoi(3, "A", "C", "B"):
        print(move, file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())