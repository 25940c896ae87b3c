# dsakit

A small library of classic data structures and algorithms in plain Python.
It needs nothing outside the standard library and supports Python 3.10 and
later.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Modules

### `dsakit.arrays`

Functions over integer sequences. Each returns a new list and leaves its
input alone.

- `dutch_national_flag(values)`: groups 0s, 1s and 2s in one pass; raises
  `ValueError` for any other value.
- `odd_occurrence(values)`: the first value that occurs an odd number of
  times; raises `ValueError` if there is none.
- `merge_sorted(first, second)`: merges two sorted sequences and returns a
  pair of lists of the original lengths, the first holding the smallest
  elements, each sorted.
- `reverse_range(values, start, end)`: reverses the items from `start` to
  `end` inclusive; raises `IndexError` if the range falls outside the sequence.
- `rotate_right(values)`: rotates one place to the right.

### `dsakit.sorting`

- `heap_sort(values)`: max-heap sort.
- `radix_sort(values)`: least-significant-digit radix sort of non-negative
  integers; raises `ValueError` for negative values.
- `quick_sort(values)`: quicksort with the first element as pivot.

All three return a new ascending list.

### `dsakit.stacks`

`MinStack` has `push`, `pop`, `top` and `minimum`, all in constant time, and
supports `len()`. `pop`, `top` and `minimum` raise `IndexError` on an empty
stack.

### `dsakit.primes`

`sieve(limit)` returns every prime up to and including `limit`, using the
Sieve of Eratosthenes.

### `dsakit.trees`

- `TreeNode`: a dataclass with `value`, `left` and `right`.
- `build_level_order(values)`: builds a tree from values in level order,
  where `None` marks a missing child.
- `level_order_lines(root)`: one line per node in level order, in the form
  `value:L<left>R<right>`.
- `bst_contains(root, value)`: lookup in a binary search tree.
- `avl_min_nodes(height)`, `avl_min_height(n)`, `avl_max_height(n)`: bounds for
  AVL trees, counting the height of a single node as 0. Add one for the
  convention in which a single node has height 1.

### `dsakit.graphs`

- `Edge(source, target, weight=0)`: a named tuple.
- `bellman_ford(vertex_count, edges, source)`: shortest distances from
  `source`, with `math.inf` for unreachable vertices; raises
  `NegativeCycleError` (a `ValueError`) on a negative cycle.
- `kruskal_mst(vertex_count, edges)`: total weight and chosen edges of a
  minimum spanning forest; edges of equal weight are taken in order of their
  target vertex.
- `path_exists(edges, source, target)`: breadth-first reachability along
  directed edges, given as `Edge` values or plain `(u, v)` pairs.

### `dsakit.linked_list`

Operations on chains of `ListNode` (with `value` and `next`; a node can be
iterated to yield the values from it onward). Each takes the head, or `None`
for an empty list, and those that may change the head return the new head.

- `from_iterable(values)`, `to_list(head)`, `push_front(head, value)`
- `swap_nodes(head, x, y)`: swaps the first nodes holding `x` and `y` by
  relinking them; nothing changes if either is absent.
- `rotate_left(head, k)`: rotates counter-clockwise by `k` nodes; nothing
  changes if `k` is 0 or not smaller than the length.
- `detect_and_remove_loop(head)`: breaks a cycle and returns whether one was
  found.
- `middle(head)`: the middle value, the second of the two for an even length.
- `reverse_between(head, start, end)`: reverses 1-based positions `start`
  through `end`.
- `remove_nth_from_end(head, n)`: removes the `n`-th node from the end, or the
  first node if `n` is not smaller than the length.

## Examples

```python
from dsakit.sorting import heap_sort, radix_sort
from dsakit.primes import sieve
from dsakit.stacks import MinStack
from dsakit.trees import avl_max_height, avl_min_height

heap_sort([12, 11, 13, 5, 6, 7])              # [5, 6, 7, 11, 12, 13]
radix_sort([170, 45, 75, 90, 802, 24, 2, 66]) # [2, 24, 45, 66, 75, 90, 170, 802]
sieve(20)                                     # [2, 3, 5, 7, 11, 13, 17, 19]
avl_min_height(7), avl_max_height(7)          # (2, 3)

stack = MinStack()
for value in (5, 3, 7):
    stack.push(value)
stack.minimum()                               # 3
```

```python
from dsakit.graphs import Edge, bellman_ford, kruskal_mst

edges = [
    Edge(0, 1, -1), Edge(0, 2, 4), Edge(1, 2, 3), Edge(1, 3, 2),
    Edge(1, 4, 2), Edge(3, 2, 5), Edge(3, 1, 1), Edge(4, 3, -3),
]
bellman_ford(5, edges, 0)                     # [0, -1, 2, -2, 1]

cost, chosen = kruskal_mst(4, [
    Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4),
])
cost                                          # 19
```

```python
from dsakit.linked_list import from_iterable, to_list, rotate_left

head = rotate_left(from_iterable([10, 20, 30, 40, 50, 60]), 4)
to_list(head)                                 # [50, 60, 10, 20, 30, 40]
```

## What it does not do

dsakit is a library only. It has no command-line program and does not read
input from the console or from files; call its functions from your own code.