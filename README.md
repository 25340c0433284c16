# prepatory

A collection of classic data structures and algorithm routines. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data structures

### `prepatory.deque.LinkedList`

A doubly linked list. You can push and pop at both ends and iterate from either
end. It compares, hashes and prints like a sequence.

```python
from prepatory.deque import LinkedList

items = LinkedList([0, 1, 2])
items.push_front(-1)
items.push_back(3)
items.pop_front()        # -1
items.pop_back()         # 3
len(items)               # 3
list(reversed(items))    # [2, 1, 0]
LinkedList([]) < LinkedList([1, 2, 3])   # True
repr(LinkedList(range(3)))               # "[0, 1, 2]"
```

- `pop_front`, `pop_back`, `front` and `back` return `None` on an empty list.
- `front_mut()` and `back_mut()` return the end `Node`. You can reassign its
  `elem` to change the value in place.
- `iter()` returns an `Iter`. You can consume it from both ends with `next` and
  `next_back`. It reports how many items remain through `size_hint()` and
  `len()`, and `rev()` gives the remaining items in the opposite order.
  `iter_mut()` returns the same kind of iterator over the nodes.
- `cursor()` returns a `Cursor`. The cursor starts before the front and steps
  forward with `move_next()`. `index()` reports its position, or `None` when it
  is off the list.
- Comparisons run element by element. When two elements cannot be ordered,
  such as NaN, every ordering comparison is false.

### `prepatory.stack.Stack`

A persistent stack. `prepend` and `tail` each return a new stack and leave the
original unchanged.

```python
from prepatory.stack import Stack

s = Stack().prepend(1).prepend(2).prepend(3)
s.head()           # 3
s.tail().head()    # 2
list(s)            # [3, 2, 1]
```

### `prepatory.linked_list.SinglyLinkedList`

A singly linked last-in, first-out list. It has `push`, `pop`, `peek`,
`peek_mut`, `iter()`, `iter_mut()` and `drain()`. `drain()` pops each item as
it yields it.

```python
from prepatory.linked_list import SinglyLinkedList

lst = SinglyLinkedList()
for value in (1, 2, 3):
    lst.push(value)
list(lst.iter())    # [3, 2, 1]
lst.pop()           # 3
```

### `prepatory.tree.Tree`

An unbalanced binary search tree. Equal values go to the right.

- `insert`, `min` and `max`.
- `contains`, which also works through `in`.
- The strict neighbour queries `floor_strict` and `ceiling_strict`.
- Iteration in ascending order.
- `display()` prints each value on its own line.

```python
from prepatory.tree import Tree

t = Tree()
for value in (5, 3, 8, 1):
    t.insert(value)
3 in t                # True
list(t)               # [1, 3, 5, 8]
t.floor_strict(5)     # 3
t.ceiling_strict(5)   # 8
```

## Algorithms

| Module | Functions |
| --- | --- |
| `prepatory.strings` | `last_word_length`, `longest_prefix`, `count_and_say`, `string_to_integer`, `byte_distance`, `levenshtein`, `substring_search` (rolling hash), `rolling_hash`, `mod_pow`, `advance_hash_window` |
| `prepatory.windows` | `minimum_window_substring`, `minimum_window_brute`, `contains_all` |
| `prepatory.arrays` | `first_missing`, `remove_duplicates`, `largest_subarray`, `binary_search_pivot`, `matrix_search`, `remove_element` |
| `prepatory.matrix` | `zero_rows_and_columns`, `spiral_matrix` |
| `prepatory.sums` | `two_sum`, `three_sum`, `three_sum_sorted`, `three_sum_closest`, `four_sum`, `n_sum`, `find_candidates`, `binary_search` |
| `prepatory.numbers` | `integer_sqrt`, `power`, `integer_divide`, `is_palindrome`, `is_binary_palindrome`, `is_binary_palindrome_v1`, `climbing_stairs`, `generate_gray`, `is_gray_code`, `next_permutation`, `factorial`, `permutation_cycle` |
| `prepatory.sequences` | `add_two_numbers`, `merge` |
| `prepatory.cache` | `Cache`, `Item`, `primes`, `hash_item`, `heavy_compute`, `main` |

A few examples:

```python
from prepatory.strings import count_and_say, levenshtein
from prepatory.matrix import spiral_matrix
from prepatory.numbers import integer_divide, power
from prepatory.sums import three_sum_closest

count_and_say("2444")                  # "1234"
levenshtein("hello", "world")          # 4
spiral_matrix(3)                       # [1, 2, 3, 8, 9, 4, 7, 6, 5]
integer_divide(-5, 2)                  # -2
power(2.0, -3)                         # 0.125
three_sum_closest(1, [-1, 2, 1, -4])   # 2
```

Behaviours to be aware of:

- `string_to_integer` raises `ValueError` in three cases: a misplaced minus
  sign, a non-digit character, or a result outside the 32-bit signed range.
- `substring_search` returns the byte offset of the first window whose hash
  matches the needle's. It does not compare the bytes themselves. It returns
  `-1` for an empty needle or when there is no match.
- `minimum_window_substring` does not report a window that completes only on
  the haystack's last character. In that case it returns `None`.
- `Cache` is direct-mapped with one item per slot. Storing into a slot replaces
  whatever the slot held. A lookup returns the slot's contents without
  checking which key stored them.

## Command

`prepatory-cache` runs a slow squaring computation twice over the same inputs.
The first pass fills an in-memory cache and the second pass reads from it. The
command prints how long each pass took.

```
prepatory-cache
prepatory-cache --delay 0.1 --count 10
```

- `--delay` is the number of seconds each uncached computation sleeps. The
  default is 1.0.
- `--count` is the number of inputs. The default is 5.

The cache lives only in memory and disappears when the command exits.