# structkit

`structkit` is a collection of small data structures and recursive algorithms:

- `structkit.stack.Stack`: a fixed-capacity LIFO stack.
- `structkit.queues`: `LinearQueue`, `CircularQueue` and `Deque`, all bounded.
- `structkit.linked_list.LinkedList`: a singly linked list with positional and
  value-based insert and remove.
- `structkit.calculator`: converts infix expressions to postfix and evaluates them.
- `structkit.recursion`: factorial, Fibonacci (recursive and accumulator forms)
  and the Tower of Hanoi.

It has no runtime dependencies and supports Python 3.10 and later.

## Installation

```
pip install structkit
```

To run the test suite:

```
pip install "structkit[test]"
pytest
```

## Stack

```python
from structkit.stack import Stack, StackOverflowError, StackUnderflowError

stack = Stack(5)
stack.push(10)
stack.push(20)
stack.push(30)

stack.peek()      # 30
len(stack)        # 3
list(stack)       # [30, 20, 10]  (iterates from the top down)
stack.pop()       # 30
stack.is_empty()  # False
```

The default capacity is 10; a negative capacity raises `ValueError`.
Pushing onto a full stack raises `StackOverflowError` (a subclass of
`OverflowError`). Popping or peeking at an empty stack raises
`StackUnderflowError` (a subclass of `LookupError`).

## Queues

```python
from structkit.queues import CircularQueue, Deque, LinearQueue

linear = LinearQueue(5)
linear.enqueue(1)
linear.enqueue(2)
linear.dequeue()      # 1
list(linear)          # [2]

ring = CircularQueue(5)
for value in (10, 20, 30):
    ring.enqueue(value)
ring.dequeue()        # 10
list(ring)            # [20, 30]

double = Deque(5)
double.add_front(100)
double.add_rear(200)
double.remove_front() # 100
list(double)          # [200]
```

Each queue has a fixed capacity, 5 by default; a capacity below 1 raises
`ValueError`. Adding to a full queue raises `QueueOverflowError`, and removing
from an empty one raises `QueueUnderflowError`. All three support `len()`,
iteration from front to rear and `is_empty()`.

A `LinearQueue` never reuses the slots it has dequeued: once `capacity` values
have been enqueued it reports overflow, even if some of them have since been
removed. `CircularQueue` and `Deque` reuse freed space and hold up to
`capacity` values at any time.

## Linked list

```python
from structkit.linked_list import LinkedList

items = LinkedList([5, 7, 8, 9])
items.insert_at(99, 2)           # [5, 7, 99, 8, 9]
items.remove_at(1)               # returns 7;  [5, 99, 8, 9]
items.insert_after_value(8, 88)  # [5, 99, 8, 88, 9]
items.remove_after_value(5)      # returns 99; [5, 8, 88, 9]
list(items)
len(items)                       # 4
```

- `append(value)` adds at the end.
- `insert_at(value, position)` places the value at that index; positions from
  0 to `len(items)` are accepted, others raise `IndexError`.
- `remove_at(position)` removes and returns the value at that index, raising
  `IndexError` when it is out of range.
- `insert_after_value(target, value)` inserts after the first occurrence of
  `target`, raising `ValueError` if it is absent.
- `remove_after_value(target)` removes and returns the value following the
  first occurrence of `target` that has a successor, raising `ValueError` if
  there is none.

## Calculator

```python
from structkit.calculator import Calculator, evaluate_postfix, to_postfix

to_postfix("3+5*2")               # "352*+"
evaluate_postfix("352*+")         # 13.0

calc = Calculator("3+5*2-(8/4)+1+9")
calc.calculate()                  # 21.0
calc.postfix                      # the postfix form used
calc.result                       # 21.0
```

Operands are single decimal digits; each digit is a separate operand, so
multi-digit numbers, decimals and unary minus are not supported. The operators
are `+`, `-`, `*` and `/`, with parentheses for grouping. `*` and `/` bind
tighter than `+` and `-`, and operators of equal precedence are applied from
left to right. `to_postfix` skips characters that are neither alphanumeric,
brackets nor operators (such as spaces).

`evaluate_postfix` raises `ValueError` for an empty expression, a missing
operand or a token other than a digit or operator. Division by zero does not
raise: it gives an infinity, or NaN for `0/0`.

`precedence(one, two)` compares two operators and returns 1, 0 or -1.

## Recursion

```python
from structkit.recursion import (
    factorial, fibonacci, hanoi, tail_factorial, tail_fibonacci,
)

factorial(5)        # 120
fibonacci(5)        # 5
tail_factorial(5)   # 120
tail_fibonacci(5)   # 5

for move in hanoi(3, "A", "C", "B"):
    print(move)     # Move disk 1 from A to C, ...
```

Negative inputs raise `ValueError`. `hanoi` returns a list of `Move` tuples
(`disk`, `source`, `destination`) in the order they are made, with pegs
defaulting to `"A"`, `"C"` and `"B"`; fewer than one disk raises `ValueError`.

## Command-line demos

Each module has a small demonstration that prints to standard output:

```
structkit-stack
structkit-calc
structkit-calc "9-(2+3)*1"
structkit-recursion
structkit-queues
structkit-linked-list
```

`structkit-calc` evaluates its first argument, or a built-in example
expression when given none, and prints `Result : <value>`. On a malformed
expression it prints the error to standard error and exits with status 1.
The other commands take no arguments and run a fixed example.