# drills

Small implementations of classic algorithm exercises that use only the standard library.
Each one is a plain function, or a small class, that works on Python lists, strings or
simple node classes.

## Install

```
pip install .
```

## Modules

### `drills.linked_list`

- `ListNode(val=0, next=None)`: a node of a singly linked list.
  `ListNode.from_values(values)` builds a list and returns its head, or `None` when
  `values` is empty. Iterating over a node yields the values from that node to the end.
- `add_two_numbers(l1, l2)`: adds two numbers whose digits are stored in reverse order
  and returns the sum as a new list.
- `has_cycle(head)`: `True` if following `next` ever reaches a node a second time.
- `merge_two_lists(list1, list2)`: splices two sorted lists into one sorted list,
  reusing their nodes. On equal values the node from `list2` comes first.
- `remove_nth_from_end(head, n)`: unlinks the `n`-th node from the end and returns the
  new head. Raises `ValueError` when `n` is below 1 or larger than the list's length.

### `drills.trees`

- `TreeNode(val=0, left=None, right=None)`: a node of a binary tree.
  `TreeNode.from_level_order(values)` builds a tree from level-order values, with `None`
  for a missing child.
- `invert_tree(root)`: mirrors the tree in place and returns its root.
- `level_order(root)`: node values level by level, left to right.
- `max_depth(root)`: number of nodes on the longest root-to-leaf path.
- `right_side_view(root)`: the rightmost value of each level, top to bottom.
- `is_same_tree(p, q)`: `True` if both trees have the same shape and values.
- `is_subtree(root, sub_root)`: `True` if some node of `root` heads a tree equal to
  `sub_root`.

### `drills.backtracking`

- `combination_sum(nums, target)`: every combination of `nums`, each number usable any
  number of times, that sums to `target`. Numbers within a combination keep their order
  in `nums`.
- `subsets(nums)`: all subsets of `nums`; subsets holding earlier items come first.

### `drills.arrays`

- `binary_search(nums, target)`: index of `target` in ascending `nums`, or `-1`.
- `two_sum_sorted(numbers, target)`: 1-based indices `[i, j]`, `i < j`, of two values in
  non-decreasing `numbers` that sum to `target`; an empty list if there are none.
- `max_profit(prices)`: best gain from one buy followed by a later sell, or `0`.

### `drills.graphs`

- `max_area_of_island(grid)`: size of the largest group of `1` cells joined edge to edge,
  or `0`.
- `num_islands(grid)`: number of groups of `"1"` cells joined edge to edge.

Neither function modifies the grid.

### `drills.heaps`

- `find_kth_largest(nums, k)`: the `k`-th largest value, counting duplicates. If `nums`
  holds fewer than `k` values the smallest is returned. Raises `ValueError` when `k` is
  below 1 or `nums` is empty.
- `KthLargest(k, nums=())`: tracks the `k`-th largest value of a growing stream.
  `add(val)` adds a value and returns the current `k`-th largest. Raises `ValueError`
  when `k` is below 1.

### `drills.strings`

- `is_valid_brackets(s)`: `True` if `s` is a well-nested sequence of `()`, `[]` and
  `{}`; any other character makes it invalid.
- `is_palindrome(s)`: `True` if `s` reads the same both ways, comparing only ASCII
  letters and digits and ignoring case.

## Examples

```python
from drills.linked_list import ListNode, add_two_numbers
from drills.trees import TreeNode, level_order, right_side_view
from drills.heaps import KthLargest
from drills.strings import is_palindrome

total = add_two_numbers(ListNode.from_values([2, 4, 3]), ListNode.from_values([5, 6, 4]))
print(list(total))              # [7, 0, 8]

root = TreeNode.from_level_order([3, 9, 20, None, None, 15, 7])
print(level_order(root))        # [[3], [9, 20], [15, 7]]
print(right_side_view(root))    # [3, 20, 7]

stream = KthLargest(3, [1, 2, 3, 3])
print(stream.add(3))            # 3

print(is_palindrome("Was it a car or a cat I saw?"))  # True
```

## Scope

This is a library only: it has no command-line tool, and it reads no input files.

## Tests

```
pip install .[test]
pytest
```