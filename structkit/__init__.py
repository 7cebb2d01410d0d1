"""Bounded stack, queues, deque, linked list, infix calculator and recursion helpers."""

__version__ = "0.1.0"
__all__ = ["calculator", "linked_list", "queues", "recursion", "stack"]