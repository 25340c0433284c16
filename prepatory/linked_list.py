"""A singly linked list used as a last-in, first-out stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link; ``val`` may be reassigned in place."""

    val: Any
    next: Optional[Node] = None


class SinglyLinkedList:
    """Mutable singly linked list with push and pop at the head."""

    def __init__(self) -> None:
        self._head: Optional[Node] = None

    def push(self, val: Any) -> None:
        self._head = Node(val, self._head)

    def pop(self) -> Any:
        """Remove and return the head value, or None if the list is empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        return node.val

    def peek(self) -> Any:
        return None if self._head is None else self._head.val

    def peek_mut(self) -> Optional[Node]:
        """The head node, whose ``val`` can be reassigned, or None."""
        return self._head

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def iter(self) -> Iterator[Any]:
        """Values from head to end."""
        return (node.val for node in self._nodes())

    def iter_mut(self) -> Iterator[Node]:
        """Nodes from head to end, for in-place updates."""
        return self._nodes()

    def drain(self) -> Iterator[Any]:
        """Pop values one by one until the list is empty."""
        while self._head is not None:
            yield self.pop()

    def __iter__(self) -> Iterator[Any]:
        return self.iter()