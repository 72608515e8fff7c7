# algo

Small, dependency-free building blocks for working through algorithm
problems in Python: heaps, a double-ended linked list, a queue, a stack,
node types for linked lists and binary trees, and a handful of helpers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algo.heaps`

- `MinHeap`: `push(value)`, `pop()` (removes and returns the smallest value),
  `peek()` (returns it without removing) and `len()`.
- `MaxHeap`: the same operations, ordered by the largest value.

`pop()` and `peek()` raise `IndexError` on an empty heap.

### `algo.linkedlist`

- `LinkedList`: `push_front(value)` and `push_back(value)` (each returns the
  value it inserted), `front()`, `back()`, `pop_front()`, `pop_back()`,
  `len()`, iteration from front to back, and `to_list()`.

Reading or removing from an empty list raises `IndexError`.

### `algo.nodes`

- `ListNode(value, next=None)`: a singly linked node; `add_next(value)`
  appends a new node at the end of the chain.
- `TreeNode(value=0, left=None, right=None)`: a binary tree node.
- `linked_list_to_list(node)`: the values of a chain, starting at `node`,
  as a Python list (`[]` for `None`).

### `algo.containers`

- `Queue` (first in, first out): `push(value)`, `pop()`, `front()`, `back()`,
  `len()`, iteration from front to back, and `print_all(file=None)`, which
  prints one value per line to `file` or standard output.
- `Stack` (last in, first out): `push(value)`, `pop()`, `top()`, `len()`,
  iteration from bottom to top, and `print_all(file=None)`.

Reading or removing from an empty queue or stack raises `IndexError`.

### `algo.utils`

- `swap(seq, i, j)`: swap two items of a mutable sequence in place.
- `minmax(*args)`, `minimum(*args)`, `maximum(*args)`: raise `ValueError`
  when called with no arguments.
- `random_between(low, high, rng=None)`: a random integer in `[low, high)`,
  or `low` when both bounds are equal; raises `ValueError` when `high < low`.
  Pass a `random.Random` as `rng` for repeatable results.
- `contains(seq, target)`.
- `abs_diff(a, b)`, `is_more_than_1_apart(a, b)`,
  `is_less_than_1_apart(a, b)` (true when the difference is at most one).
- `log_context(context, file=None)`: print a mapping as a block of
  `[debug]` key/value lines.

## Example

```python
from algo.heaps import MinHeap
from algo.nodes import ListNode, linked_list_to_list

heap = MinHeap()
for n in (46, 86, 6):
    heap.push(n)
assert heap.pop() == 6

head = ListNode(1)
head.add_next(2)
head.add_next(3)
assert linked_list_to_list(head) == [1, 2, 3]
```

## What it does not do

This is a library only: it has no command-line tool, and it contains the
data structures and helpers above, not solutions to particular problems.