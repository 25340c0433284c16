"""A doubly linked list usable as a double-ended queue."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class Node:
    """One link of a :class:`LinkedList`; ``elem`` may be reassigned in place."""

    __slots__ = ("elem", "prev", "next")

    def __init__(self, elem: Any) -> None:
        self.elem = elem
        self.prev: Optional[Node] = None
        self.next: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.elem!r})"


def _compare(a: Any, b: Any) -> Optional[int]:
    """Three-way compare two values; None when they are unordered (e.g. NaN)."""
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    return None


class Iter:
    """Double-ended iterator over a list's values, or over its nodes."""

    def __init__(
        self,
        front: Optional[Node],
        back: Optional[Node],
        length: int,
        *,
        nodes: bool = False,
    ) -> None:
        self._front = front
        self._back = back
        self._len = length
        self._nodes = nodes
        self._reversed = False

    def _take_front(self) -> Optional[Node]:
        if self._len == 0 or self._front is None:
            return None
        node = self._front
        self._front = node.next
        self._len -= 1
        return node

    def _take_back(self) -> Optional[Node]:
        if self._len == 0 or self._back is None:
            return None
        node = self._back
        self._back = node.prev
        self._len -= 1
        return node

    def _output(self, node: Node) -> Any:
        return node if self._nodes else node.elem

    def __iter__(self) -> Iter:
        return self

    def __next__(self) -> Any:
        node = self._take_back() if self._reversed else self._take_front()
        if node is None:
            raise StopIteration
        return self._output(node)

    def __len__(self) -> int:
        return self._len

    def size_hint(self) -> tuple[int, int]:
        """Lower and upper bound on the number of remaining items (always exact)."""
        return self._len, self._len

    def next_back(self) -> Any:
        """Take the item from the far end, or None once exhausted."""
        node = self._take_front() if self._reversed else self._take_back()
        return None if node is None else self._output(node)

    def rev(self) -> Iter:
        """An iterator over the remaining items in the opposite direction."""
        flipped = Iter(self._front, self._back, self._len, nodes=self._nodes)
        flipped._reversed = not self._reversed
        return flipped


class Cursor:
    """A position in a list that starts before the front and steps forward."""

    def __init__(self, owner: LinkedList) -> None:
        self._list = owner
        self._cur: Optional[Node] = None
        self._index: Optional[int] = None

    def index(self) -> Optional[int]:
        """Position of the current node, or None when on the ghost position."""
        return self._index

    def move_next(self) -> None:
        """Step forward; past the back the cursor returns to the ghost position."""
        if self._cur is not None:
            self._cur = self._cur.next
            if self._cur is not None and self._index is not None:
                self._index += 1
            else:
                self._index = None
        elif not self._list.is_empty():
            self._cur = self._list._front
            self._index = 0


class LinkedList:
    """Doubly linked list with constant-time operations at both ends."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._front: Optional[Node] = None
        self._back: Optional[Node] = None
        self._len = 0
        if iterable is not None:
            self.extend(iterable)

    def push_front(self, elem: Any) -> None:
        node = Node(elem)
        if self._front is not None:
            self._front.prev = node
            node.next = self._front
        else:
            self._back = node
        self._front = node
        self._len += 1

    def push_back(self, elem: Any) -> None:
        node = Node(elem)
        if self._back is not None:
            self._back.next = node
            node.prev = self._back
        else:
            self._front = node
        self._back = node
        self._len += 1

    def pop_front(self) -> Any:
        """Remove and return the front value, or None if the list is empty."""
        node = self._front
        if node is None:
            return None
        self._front = node.next
        if self._front is not None:
            self._front.prev = None
        else:
            self._back = None
        self._len -= 1
        return node.elem

    def pop_back(self) -> Any:
        """Remove and return the back value, or None if the list is empty."""
        node = self._back
        if node is None:
            return None
        self._back = node.prev
        if self._back is not None:
            self._back.next = None
        else:
            self._front = None
        self._len -= 1
        return node.elem

    def front(self) -> Any:
        return None if self._front is None else self._front.elem

    def back(self) -> Any:
        return None if self._back is None else self._back.elem

    def front_mut(self) -> Optional[Node]:
        """The front node, whose ``elem`` can be reassigned, or None."""
        return self._front

    def back_mut(self) -> Optional[Node]:
        """The back node, whose ``elem`` can be reassigned, or None."""
        return self._back

    def is_empty(self) -> bool:
        return self._len == 0

    def clear(self) -> None:
        self._front = None
        self._back = None
        self._len = 0

    def extend(self, iterable: Iterable[Any]) -> None:
        for item in iterable:
            self.push_back(item)

    def copy(self) -> LinkedList:
        return LinkedList(self)

    def iter(self) -> Iter:
        """Iterator over the values, front to back."""
        return Iter(self._front, self._back, self._len)

    def iter_mut(self) -> Iter:
        """Iterator over the nodes, front to back, for in-place updates."""
        return Iter(self._front, self._back, self._len, nodes=True)

    def cursor(self) -> Cursor:
        return Cursor(self)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    def __reversed__(self) -> Iterator[Any]:
        return self.iter().rev()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def _partial_cmp(self, other: LinkedList) -> Optional[int]:
        for a, b in zip(self, other):
            result = _compare(a, b)
            if result != 0:
                return result
        return (len(self) > len(other)) - (len(self) < len(other))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._partial_cmp(other) == -1

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._partial_cmp(other) in (-1, 0)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._partial_cmp(other) == 1

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._partial_cmp(other) in (1, 0)

    def __hash__(self) -> int:
        return hash((self._len, tuple(self)))

    def __repr__(self) -> str:
        return repr(list(self))