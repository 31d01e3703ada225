# dsalgo

Classic data structures and algorithms in plain Python, using only the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.nodes` | `ListNode`, `TreeNode` (with parent links), `create_list`, `list_values`, `reverse_list`, `create_tree` (from level-order values), `inorder`, `level_order` |
| `dsalgo.lists` | `kth_to_last`, `partition`, `add_two_numbers` |
| `dsalgo.trees` | `create_minimal_bst`, `nodes_by_value`, `is_bst`, `is_balanced`, `contains_subtree`, `common_ancestor`, `common_ancestor_by_depth`, `common_ancestor_by_cover`, `count_paths_with_sum` |
| `dsalgo.sorting` | In-place `quick_sort`, `merge_sort`, `merge_sort_copy`, `heap_sort` with pluggable comparisons; `binary_search` |
| `dsalgo.searching` | `merge_sorted`, `search_rotated`, `RankTracker` |
| `dsalgo.combinatorics` | `eight_queens`, `solve_n_queens`, `unique_permutations`, `power_set`, `power_set_recursive`, `compress` |
| `dsalgo.grids` | `flip_and_invert_image`, `oranges_rotting`, `min_domino_rotations` |
| `dsalgo.expressions` | `is_operator`, `apply_operator`, `evaluate_postfix`, `evaluate_prefix` (single-digit operands) |
| `dsalgo.arithmetic` | `negate`, `subtract`, `multiply`, `divide` (addition only), `recursive_multiply`, `cutting_paper_squares` |
| `dsalgo.geometry` | `Point`, `Line`, `Square`, `is_between`, `bisect_squares` |
| `dsalgo.priority_queue` | `PriorityQueue`, a binary heap that is a min-queue by default |
| `dsalgo.deques` | `CircularDeque` (fixed capacity ring buffer), `DoublyLinkedList` |
| `dsalgo.grid` | `Grid`, a fixed-size two-dimensional table |

Errors are raised as Python exceptions: for example `divide(1, 0)` raises
`ZeroDivisionError`, popping an empty `PriorityQueue` or deque raises
`IndexError`, pushing onto a full `CircularDeque` raises `IndexError`, and
`RankTracker.rank` raises `KeyError` for a value that was never tracked.

## Examples

```python
from dsalgo.nodes import create_list, list_values
from dsalgo.lists import add_two_numbers

total = add_two_numbers(create_list([2, 4, 3]), create_list([5, 6, 7]))
print(list_values(total))   # [8, 1, 0]
```

```python
from dsalgo.sorting import quick_sort, binary_search

data = [5, 1, 4, 2, 3]
quick_sort(data)              # sorts in place and returns the list
print(data)                   # [1, 2, 3, 4, 5]
print(binary_search(data, 4)) # 3
```

```python
from dsalgo.searching import RankTracker, search_rotated

tracker = RankTracker([5, 1, 4, 4, 5, 9, 7, 13, 3])
print(tracker.rank(1), tracker.rank(3), tracker.rank(4))   # 0 1 3

print(search_rotated([15, 16, 19, 20, 25, 1, 3, 4, 5, 7, 10, 14], 5))  # 8
```

```python
from dsalgo.priority_queue import PriorityQueue

queue = PriorityQueue([7, 3, 9])
queue.push(1)
print(queue.front())   # 1
queue.pop()
print(len(queue))      # 3
```

```python
from dsalgo.combinatorics import eight_queens, compress

print(len(eight_queens()))        # 92
print(compress("aabcccccaaa"))    # a2b1c5a3
```

```python
from dsalgo.expressions import evaluate_postfix, evaluate_prefix

print(evaluate_postfix("231*+9-"))   # -4
print(evaluate_prefix("-+8/632"))    # 8
```

## What it does not do

`dsalgo` is a library only. It installs no command-line tool and prints
nothing; every algorithm is a function or class to call from your own code.
The expression evaluators handle single-digit operands only and do not parse
infix notation.