import math

import pytest

from prepatory.deque import LinkedList


def generate_test():
    return LinkedList([0, 1, 2, 3, 4, 5, 6])


def test_basic_front():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.pop_front() is None
    assert len(lst) == 0

    lst.push_front(10)
    assert len(lst) == 1
    assert lst.pop_front() == 10
    assert len(lst) == 0
    assert lst.pop_front() is None
    assert len(lst) == 0

    lst.push_front(10)
    assert len(lst) == 1
    lst.push_front(20)
    assert len(lst) == 2
    lst.push_front(30)
    assert len(lst) == 3
    assert lst.pop_front() == 30
    assert len(lst) == 2
    lst.push_front(40)
    assert len(lst) == 3
    assert lst.pop_front() == 40
    assert len(lst) == 2
    assert lst.pop_front() == 20
    assert len(lst) == 1
    assert lst.pop_front() == 10
    assert len(lst) == 0
    assert lst.pop_front() is None
    assert len(lst) == 0
    assert lst.pop_front() is None
    assert len(lst) == 0


def test_basic():
    m = LinkedList()
    assert m.pop_front() is None
    assert m.pop_back() is None
    assert m.pop_front() is None
    m.push_front(1)
    assert m.pop_front() == 1
    m.push_back(2)
    m.push_back(3)
    assert len(m) == 2
    assert m.pop_front() == 2
    assert m.pop_front() == 3
    assert len(m) == 0
    assert m.pop_front() is None
    m.push_back(1)
    m.push_back(3)
    m.push_back(5)
    m.push_back(7)
    assert m.pop_front() == 1

    n = LinkedList()
    n.push_front(2)
    n.push_front(3)
    assert n.front() == 3
    x = n.front_mut()
    assert x.elem == 3
    x.elem = 0
    assert n.back() == 2
    y = n.back_mut()
    assert y.elem == 2
    y.elem = 1
    assert n.pop_front() == 0
    assert n.pop_front() == 1


def test_pop_back_order():
    m = LinkedList([1, 2, 3])
    assert m.pop_back() == 3
    assert m.pop_back() == 2
    assert m.pop_back() == 1
    assert m.pop_back() is None
    assert m.is_empty()


def test_iterator():
    m = generate_test()
    for i, elt in enumerate(m.iter()):
        assert i == elt
    n = LinkedList()
    assert next(n.iter(), None) is None
    n.push_front(4)
    it = n.iter()
    assert it.size_hint() == (1, 1)
    assert next(it) == 4
    assert it.size_hint() == (0, 0)
    with pytest.raises(StopIteration):
        next(it)


def test_iterator_double_end():
    n = LinkedList()
    assert next(n.iter(), None) is None
    n.push_front(4)
    n.push_front(5)
    n.push_front(6)
    it = n.iter()
    assert it.size_hint() == (3, 3)
    assert next(it) == 6
    assert it.size_hint() == (2, 2)
    assert it.next_back() == 4
    assert it.size_hint() == (1, 1)
    assert it.next_back() == 5
    assert it.next_back() is None
    assert next(it, None) is None


def test_rev_iter():
    m = generate_test()
    for i, elt in enumerate(m.iter().rev()):
        assert 6 - i == elt
    assert list(reversed(m)) == [6, 5, 4, 3, 2, 1, 0]
    n = LinkedList()
    assert next(n.iter().rev(), None) is None
    n.push_front(4)
    it = n.iter().rev()
    assert it.size_hint() == (1, 1)
    assert next(it) == 4
    assert it.size_hint() == (0, 0)
    assert next(it, None) is None


def test_mut_iter():
    m = generate_test()
    remaining = len(m)
    for i, node in enumerate(m.iter_mut()):
        assert i == node.elem
        remaining -= 1
    assert remaining == 0
    n = LinkedList()
    assert next(n.iter_mut(), None) is None
    n.push_front(4)
    n.push_back(5)
    it = n.iter_mut()
    assert it.size_hint() == (2, 2)
    assert next(it).elem == 4
    assert next(it).elem == 5
    assert it.size_hint() == (0, 0)
    assert next(it, None) is None


def test_iter_mut_updates_list():
    m = LinkedList([1, 2, 3])
    for node in m.iter_mut():
        node.elem *= 10
    assert list(m) == [10, 20, 30]


def test_iterator_mut_double_end():
    n = LinkedList()
    assert n.iter_mut().next_back() is None
    n.push_front(4)
    n.push_front(5)
    n.push_front(6)
    it = n.iter_mut()
    assert it.size_hint() == (3, 3)
    assert next(it).elem == 6
    assert it.size_hint() == (2, 2)
    assert it.next_back().elem == 4
    assert it.size_hint() == (1, 1)
    assert it.next_back().elem == 5
    assert it.next_back() is None
    assert next(it, None) is None


def test_eq():
    n = LinkedList([])
    m = LinkedList([])
    assert n == m
    n.push_front(1)
    assert n != m
    m.push_back(1)
    assert n == m

    assert LinkedList([2, 3, 4]) != LinkedList([1, 2, 3])


def test_ord():
    n = LinkedList([])
    m = LinkedList([1, 2, 3])
    assert n < m
    assert m > n
    assert n <= n
    assert n >= n


def test_ord_nan():
    nan = math.nan
    n = LinkedList([nan])
    m = LinkedList([nan])
    assert not (n < m)
    assert not (n > m)
    assert not (n <= m)
    assert not (n >= m)

    n = LinkedList([nan])
    one = LinkedList([1.0])
    assert not (n < one)
    assert not (n > one)
    assert not (n <= one)
    assert not (n >= one)

    u = LinkedList([1.0, 2.0, nan])
    v = LinkedList([1.0, 2.0, 3.0])
    assert not (u < v)
    assert not (u > v)
    assert not (u <= v)
    assert not (u >= v)

    s = LinkedList([1.0, 2.0, 4.0, 2.0])
    t = LinkedList([1.0, 2.0, 3.0, 2.0])
    assert not (s < t)
    assert s > one
    assert not (s <= one)
    assert s >= one


def test_debug():
    assert repr(LinkedList(range(10))) == "[0, 1, 2, 3, 4, 5, 6, 7, 8, 9]"
    words = LinkedList(["just", "one", "test", "more"])
    assert repr(words) == repr(["just", "one", "test", "more"])


def test_hashmap():
    list1 = LinkedList(range(0, 10))
    list2 = LinkedList(range(1, 11))
    mapping = {}
    assert mapping.setdefault(list1.copy(), "list1") == "list1"
    assert mapping.setdefault(list2.copy(), "list2") == "list2"
    assert len(mapping) == 2
    assert mapping.get(list1) == "list1"
    assert mapping.get(list2) == "list2"
    assert mapping.pop(list1) == "list1"
    assert mapping.pop(list2) == "list2"
    assert not mapping


def test_copy_is_independent():
    original = LinkedList([1, 2, 3])
    clone = original.copy()
    assert clone == original
    clone.push_back(4)
    assert list(original) == [1, 2, 3]
    assert list(clone) == [1, 2, 3, 4]


def test_clear_and_extend():
    m = LinkedList([1, 2])
    m.clear()
    assert m.is_empty()
    assert m.front() is None
    assert m.back() is None
    m.extend([7, 8])
    assert list(m) == [7, 8]
    assert m.front() == 7
    assert m.back() == 8


def test_cursor_moves_through_and_wraps():
    m = LinkedList([1, 2, 3])
    cursor = m.cursor()
    assert cursor.index() is None
    cursor.move_next()
    assert cursor.index() == 0
    cursor.move_next()
    assert cursor.index() == 1
    cursor.move_next()
    assert cursor.index() == 2
    cursor.move_next()
    assert cursor.index() is None
    cursor.move_next()
    assert cursor.index() == 0


def test_cursor_on_empty_list_stays_on_ghost():
    cursor = LinkedList().cursor()
    cursor.move_next()
    assert cursor.index() is None