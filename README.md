# dsakit

Classic data structures and algorithms in plain Python, with no
dependencies beyond the standard library.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module                  | Contents                                                                 |
|-------------------------|--------------------------------------------------------------------------|
| `dsakit.sorting`        | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge`, `merge_sort`, `pivot`, `quick_sort`, `hoare_quick_sort`, `shell_sort` |
| `dsakit.searching`      | `linear_search`, `binary_search`, `binary_search_recursive`              |
| `dsakit.singly_linked`  | `SinglyLinkedList`                                                       |
| `dsakit.doubly_linked`  | `DoublyLinkedList`                                                       |
| `dsakit.stack`          | `LinkedStack`, `reverse_string`, `is_balanced_parentheses`, `sort_stack` |
| `dsakit.queue_list`     | `LinkedQueue`                                                            |
| `dsakit.bst`            | `BinarySearchTree`                                                       |
| `dsakit.graph`          | `Graph` (undirected, adjacency sets)                                     |
| `dsakit.hashtable`      | `HashTable` (7 chained buckets by default)                               |

The container classes take an optional iterable of initial values, support
`len()` and iteration, and raise `IndexError` when asked for an element that
is not there (an empty queue, an index out of range, and so on).

## Sorting

Every sort works in place on a mutable sequence of comparable values and
returns `None`:

```python
from dsakit.sorting import merge_sort, pivot, shell_sort

values = [3, 1, 4, 2]
merge_sort(values)
print(values)          # [1, 2, 3, 4]

data = [64, 25, 12, 22, 11]
shell_sort(data)
print(data)            # [11, 12, 22, 25, 64]

array = [4, 6, 1, 7, 3, 2, 5]
pivot(array, 0, len(array) - 1)   # 3
print(array)           # [2, 1, 3, 4, 6, 7, 5]
```

`merge(values, left, mid, right)` merges the two sorted runs
`values[left:mid+1]` and `values[mid+1:right+1]` stably and raises
`IndexError` for bounds outside the sequence. `quick_sort` pivots on the
first item of each range; `hoare_quick_sort` uses two pointers around the
middle item.

## Searching

Searching returns an index, or `-1` when the target is absent:

```python
from dsakit.searching import binary_search, binary_search_recursive, linear_search

linear_search([10, 25, 33, 47, 58], 33)             # 2
binary_search([10, 25, 33, 47, 58], 99)             # -1
binary_search_recursive([2, 5, 8, 12, 16, 23, 38], 23)   # 5
```

The binary searches expect the sequence to be sorted.

## Linked lists

```python
from dsakit.singly_linked import SinglyLinkedList

items = SinglyLinkedList([4])
items.append(3)
items.prepend(6)
items.insert(1, 5)
print(items)           # 6 -> 5 -> 4 -> 3
print(len(items))      # 4
items.reverse()
print(list(items))     # [3, 4, 5, 6]
```

`SinglyLinkedList` also offers `get`, `set`, `search` (index of the last
match, or `-1`), `delete_first`, `delete_last` and `delete_node` (each
returns the removed value), `find_middle`, `find_kth_from_end`, `has_loop`,
`remove_duplicates`, `binary_to_decimal`, `partition`, `reverse_between`
and `swap_pairs`.

`DoublyLinkedList` has the same core operations, walks from the nearer end
in `get`, supports `reversed()`, and adds `is_palindrome`:

```python
from dsakit.doubly_linked import DoublyLinkedList

DoublyLinkedList([1, 2, 3, 2, 1]).is_palindrome()   # True
```

An empty list prints as `empty`.

## Stacks and queues

```python
from dsakit.queue_list import LinkedQueue
from dsakit.stack import LinkedStack, is_balanced_parentheses, reverse_string, sort_stack

stack = LinkedStack([5])
stack.push(1)
stack.pop()                 # 1
stack.top()                 # 5

queue = LinkedQueue([1])
queue.enqueue(2)
queue.dequeue()             # 1
queue.first(), queue.last() # (2, 2)

reverse_string("amor")              # 'roma'
is_balanced_parentheses("(()())")   # True
is_balanced_parentheses("())")      # False

ordered = sort_stack(LinkedStack([1, 2, 6, 3]))
list(ordered)               # [6, 3, 2, 1]  (top first)
```

`sort_stack` empties the stack it is given and returns a new stack whose top
is the largest value.

## Binary search tree

Values smaller than a node go left; equal and larger values go right, so
duplicates are kept:

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([47, 20, 70, 17, 52, 82, 27, 20])

tree.in_order()             # [17, 20, 20, 27, 47, 52, 70, 82]
tree.less_or_equal(47)      # [17, 20, 20, 27, 47]
tree.greater_or_equal(47)   # [47, 52, 70, 82]
tree.find_all(20)           # [20, 20]
20 in tree                  # True
tree.delete(20)             # True; removes one 20
tree.delete(99)             # False
```

`pre_order()` and `post_order()` return the other two depth-first orders.

## Graph

Graphs are undirected and keyed by any hashable vertex:

```python
from dsakit.graph import Graph

graph = Graph()
for name in "ABC":
    graph.add_vertex(name)
graph.add_edge("A", "B")
graph.add_edge("A", "C")
graph.remove_vertex("B")
graph.neighbours("A")       # frozenset({'C'})
"B" in graph                # False
print(graph)
# A: [ C ]
# C: [ A ]
```

`add_vertex`, `add_edge`, `remove_edge` and `remove_vertex` return `False`
when a vertex is already present or missing.

## Hash table

```python
from dsakit.hashtable import HashTable

table = HashTable()
table.set("hello", 42)
table.set("hey", 12)
table.get("hello")          # 42
table.get("missing")        # 0
table.get("missing", None)  # None
table.keys()                # keys bucket by bucket
```

Setting a key again adds a second entry to its chain; `get` returns the
value stored first. The number of buckets can be given as `HashTable(size)`.

## What it does not do

This is a library only: it has no command-line program, no interactive
prompts and no persistence. The structures live in memory, are not
thread-safe, and the tree is not self-balancing.