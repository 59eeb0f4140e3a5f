# algobox

A small library of classic algorithms and data structures in plain Python.
It has no third-party dependencies and needs Python 3.10 or later.

## Installation

```
pip install algobox
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `merge_sort`, `count_sort`, `selection_sort`, `rank_positions` |
| `algobox.searching` | `linear_search`, `fibonacci_search`, `has_pair_with_sum`, `aggressive_cows`, `book_allocation` |
| `algobox.arrays` | `remove_duplicates`, `four_sum`, `max_area`, `can_jump`, `max_subarray_sum`, `reverse_array`, `spiral_order`, `cards_to_remove`, `leading_ones`, `can_form_mex` |
| `algobox.dynamic` | `knapsack`, `find_paths`, `wiggle_max_length`, `count_texts`, `calculate_minimum_hp`, `rod_cutting`, `Box`, `max_stack_height` |
| `algobox.strings` | `is_palindrome`, `palindrome_partitions`, `simplify_path` |
| `algobox.linked_list` | `ListNode`, `SinglyLinkedList`, `from_iterable`, `to_list`, `reverse_k_group`, `merge_sorted`, `merge_sorted_recursive` |
| `algobox.trees` | `TreeNode`, `identical_trees`, `vertical_order` |
| `algobox.backtracking` | `knight_tour`, `solve_sudoku`, `tower_of_hanoi` |
| `algobox.patterns` | `h_pattern`, `main` |

Most functions take any iterable or sequence and return new lists rather than
changing their input. The linked-list routines `reverse_k_group`,
`merge_sorted` and `merge_sorted_recursive` are the exception: they relink the
nodes they are given.

A few return shapes worth knowing:

- `selection_sort` returns a pair: the sorted list and the number of
  comparisons made.
- `fibonacci_search` returns the index of the target in a sorted sequence,
  or `-1`.
- `aggressive_cows` and `book_allocation` return `-1` when no answer is found.
- `find_paths` and `count_texts` give their counts modulo 10**9 + 7.
- `knight_tour` returns a board of move numbers, or `None` when no tour
  exists.
- `solve_sudoku` returns a solved copy of a 9 x 9 board of `'1'`–`'9'` and
  `'.'`, and raises `ValueError` for a malformed or unsolvable board.
- `tower_of_hanoi` returns the moves as `(from, to)` pairs.

## Examples

```python
from algobox.sorting import merge_sort
from algobox.arrays import max_subarray_sum
from algobox.strings import simplify_path
from algobox.dynamic import Box, max_stack_height

merge_sort([6, 5, 12, 10, 9, 1])                  # [1, 5, 6, 9, 10, 12]
max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])   # 7
simplify_path("/a/./b/../../c/")                   # "/c"
max_stack_height([Box(4, 2, 5), Box(3, 1, 6)])
```

Linked lists:

```python
from algobox.linked_list import SinglyLinkedList, from_iterable, to_list, reverse_k_group

head = from_iterable([1, 2, 3, 4, 5, 6, 7, 8])
to_list(reverse_k_group(head, 3))          # [3, 2, 1, 6, 5, 4, 7, 8]

items = SinglyLinkedList([2, 4])
items.prepend(3)
str(items)                                 # "3 -> 2 -> 4"
```

Trees:

```python
from algobox.trees import TreeNode, vertical_order

root = TreeNode(10, TreeNode(7), TreeNode(4))
vertical_order(root)                       # [[7], [10], [4]]
```

Backtracking:

```python
from algobox.backtracking import tower_of_hanoi

for source, destination in tower_of_hanoi(2, "A", "B", "C"):
    print(f"Move from {source} to {destination}")
```

## Command line

One command is installed. It prints the H pattern of a given size, taken from
its argument or, if none is given, from a line on standard input:

```
algobox-hpattern 3
```

## What it does not do

Apart from `algobox-hpattern`, the package has no commands: every other
routine is a function to call from Python. `knight_tour` searches by plain
backtracking with no move-ordering heuristic, so large boards can take a long
time.

## Running the tests

```
pip install algobox[test]
pytest
```