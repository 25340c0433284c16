"""A persistent stack whose versions share their tails."""

from __future__ import annotations

from typing import Any, Iterator, NamedTuple, Optional


class _Node(NamedTuple):
    elem: Any
    next: Optional[_Node]


class Stack:
    """Immutable singly linked stack; every operation returns a new stack."""

    __slots__ = ("_head",)

    def __init__(self) -> None:
        self._head: Optional[_Node] = None

    @classmethod
    def _from_node(cls, node: Optional[_Node]) -> Stack:
        stack = cls()
        stack._head = node
        return stack

    def head(self) -> Any:
        """The top value, or None for an empty stack."""
        return None if self._head is None else self._head.elem

    def prepend(self, elem: Any) -> Stack:
        """A new stack with ``elem`` on top of this one."""
        return self._from_node(_Node(elem, self._head))

    def tail(self) -> Stack:
        """The stack below the top; empty stays empty."""
        return self._from_node(None if self._head is None else self._head.next)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.elem
            node = node.next