"""Linked lists, a deque, a persistent stack, a binary search tree, and string, array, matrix, sum and number routines."""

__version__ = "0.1.0"