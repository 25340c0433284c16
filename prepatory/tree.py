"""An unbalanced binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _Node:
    elem: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class Tree:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, elem: Any) -> None:
        new = _Node(elem)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if elem < node.elem:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def min(self) -> Any:
        """The smallest value, or None for an empty tree."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.elem

    def max(self) -> Any:
        """The largest value, or None for an empty tree."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.elem

    def contains(self, elem: Any) -> bool:
        node = self._root
        while node is not None:
            if elem < node.elem:
                node = node.left
            elif elem > node.elem:
                node = node.right
            else:
                return True
        return False

    def __contains__(self, elem: Any) -> bool:
        return self.contains(elem)

    def floor_strict(self, elem: Any) -> Any:
        """The largest value strictly below ``elem``, or None."""
        found = None
        node = self._root
        while node is not None:
            if elem > node.elem:
                found = node.elem
                node = node.right
            else:
                node = node.left
        return found

    def ceiling_strict(self, elem: Any) -> Any:
        """The smallest value strictly above ``elem``, or None."""
        found = None
        node = self._root
        while node is not None:
            if elem < node.elem:
                found = node.elem
                node = node.left
            else:
                node = node.right
        return found

    def __iter__(self) -> Iterator[Any]:
        """Values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.elem
            node = node.right

    def display(self) -> None:
        """Print every value in ascending order, one per line."""
        for elem in self:
            print(f"Node elem {elem!r}")