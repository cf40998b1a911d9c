# dsakit

A small collection of classic data structures and algorithms, written to be
easy to read:

- `dsakit.sorting`: `bubble_sort`, `insertion_sort` and `selection_sort`.
  Each accepts any iterable and returns a new sorted list. The input is not
  changed.
- `dsakit.bst.BST`: an unbalanced binary search tree. Equal values go into the
  right subtree. The `inorder()`, `preorder()` and `postorder()` methods are
  generators. Iterating over the tree gives the in-order sequence. `is_empty()`
  reports whether the tree holds any values.
- `dsakit.linked_list.DoublyLinkedList`: a doubly linked list made of `Node`
  objects, with `head` and `tail` references. It supports `append()` (which
  returns the new node), `reverse()` in place, `len()`, forward iteration and
  `backward()` iteration.
- `dsakit.hash_table.HashTable`: a fixed-size table keyed by integers that uses
  linear probing.
  - Its size defaults to 10. A size that is not positive raises `ValueError`.
  - `insert(key, data)` stores a `DataItem` in the first empty or deleted slot,
    starting from `key % size`. It raises `OverflowError` when the table is full.
    It does not check for duplicate keys.
  - `search(key)` returns the item, or `None`.
  - `delete(key)` removes the item, puts a deletion marker in its slot and
    returns the item, or `None`.
  - `slots()` lists each slot's live item. Empty and deleted slots show as
    `None`.
  - `render()` returns the table as text.
- `dsakit.frequency`: `count_occurrences(values)` returns a dict of each
  distinct value and its count, ordered by value. `format_counts(counts)`
  renders such a mapping.
- `dsakit.anagram`: `is_anagram(s, t)` tells whether two strings contain the
  same characters.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Library usage

```python
from dsakit.sorting import bubble_sort, insertion_sort, selection_sort
from dsakit.bst import BST
from dsakit.linked_list import DoublyLinkedList
from dsakit.hash_table import HashTable
from dsakit.anagram import is_anagram
from dsakit.frequency import count_occurrences, format_counts

bubble_sort([15, 2, 5, 244, 3, 600])      # [2, 3, 5, 15, 244, 600]

tree = BST([52, 25, 50, 15, 40, 45, 20])
list(tree.inorder())                      # [15, 20, 25, 40, 45, 50, 52]
list(tree.preorder())                     # [52, 25, 15, 20, 50, 40, 45]
list(tree.postorder())                    # [20, 15, 45, 40, 50, 25, 52]

dll = DoublyLinkedList([10, 20, 30, 40])
dll.reverse()
list(dll)                                 # [40, 30, 20, 10]
list(dll.backward())                      # [10, 20, 30, 40]

table = HashTable(10)
table.insert(2, 70)
table.insert(42, 80)                      # collides with key 2 and probes to slot 3
table.search(42).data                     # 80
table.delete(2)
print(table.render())

is_anagram("listen", "silent")            # True
count_occurrences([3, 1, 3])              # {1: 1, 3: 2}
format_counts({1: 1, 3: 2})               # '1-> this many times13-> this many times2'
```

## Command line

`dsakit-frequency` first prints a prompt. It then reads a count N and N
integers from standard input, and prints each distinct value with its count in
ascending order of value. If the input is missing, short or negative, it
reports an error on standard error and exits with status 1.

```
echo "5 1 2 2 3 3" | dsakit-frequency
```

`dsakit-anagram` reads two whitespace-separated words from standard input. It
prints `Anagram` or `Not an Anagram`.

```
echo "listen silent" | dsakit-anagram
```

## What it does not do

All of the structures live in memory only, and nothing is saved between runs.
The hash table never grows or rehashes. The tree is never rebalanced, and it
has no removal or lookup methods.