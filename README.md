# algodrills

Compact solutions to classic algorithm exercises, grouped by topic. The package
is a plain library with no runtime dependencies.

## Installation

```
pip install algodrills
```

To run the tests:

```
pip install "algodrills[test]"
pytest
```

## Modules

### `algodrills.arrays`

- `two_sum(nums, target)`: indices `[i, j]` of two distinct elements that add up
  to `target`, or an empty list when there are none.
- `remove_duplicates(nums)`: compacts a sorted list in place so that its first `k`
  items are the unique values, and returns `k`. Items past `k` are left as they
  were; an empty list yields `1`.
- `remove_element(nums, val)`: moves every item not equal to `val` to the front,
  keeping their order, and returns how many there are.
- `search_insert(nums, target)`: index of `target` in a sorted list of distinct
  values, or the index where it would be inserted. Raises `IndexError` for an
  empty list.
- `plus_one(digits)`: adds one to a number given as a list of decimal digits,
  most significant first, and returns the new list.
- `merge_sorted(nums1, m, nums2, n)`: merges the first `n` items of `nums2` into
  `nums1`, which holds `m` sorted items followed by room for `n` more. Works in
  place and returns `None`.

### `algodrills.strings`

- `is_valid_parentheses(s)`: whether a string of the brackets `()[]{}` is
  balanced and properly nested. An empty string is valid.
- `str_str(haystack, needle)`: index of the first occurrence of `needle`, or `-1`.
- `length_of_last_word(s)`: length of the last space-separated word.

### `algodrills.arithmetic`

- `num_digits(n)`: number of decimal digits of a non-negative integer (zero has
  one); raises `ValueError` for a negative one.
- `nth_digit(x, digit_no)`: the decimal digit at position `digit_no`, counting
  from the right at 0.
- `is_palindrome(x)`: whether an integer's decimal digits read the same in both
  directions; negative numbers never do.
- `add_binary(a, b)`: sum of two binary strings, returned as a binary string;
  raises `ValueError` if either holds anything but `0` and `1`.
- `int_sqrt(x)`: integer square root, rounded down; raises `ValueError` for a
  negative number.
- `climb_stairs(n)`: number of ways to climb `n` steps taking 1 or 2 at a time.

### `algodrills.linked_list`

- `ListNode(val=0, next=None)`: a singly linked list node; iterating over a node
  yields the values from it to the end of the list.
- `build_list(values)`: builds a list from an iterable and returns its head, or
  `None` when it is empty.
- `merge_two_lists(list1, list2)`: relinks the nodes of two sorted lists into one
  sorted list; on equal values the node from `list2` comes first.
- `delete_duplicates(head)`: unlinks nodes repeating the value of their
  predecessor, in place, and returns the head.

### `algodrills.tree`

- `TreeNode(val=0, left=None, right=None)`: a binary tree node.
- `inorder_traversal(root)`: values in left-node-right order.
- `is_same_tree(p, q)`: compares two trees by an in-order walk that records a
  left descent as `-1` and a right descent as `1`; trees whose values coincide
  with those markers may therefore compare equal.
- `is_symmetric(root)`: whether a tree is a mirror image of itself.
- `max_depth(node)`: number of nodes on the longest root-to-leaf path.
- `sorted_array_to_bst(nums)`: a height-balanced search tree built from a sorted
  sequence, each subtree rooted at the lower middle element; `None` for an empty
  sequence.

## Example

```python
from algodrills.arrays import two_sum
from algodrills.linked_list import build_list, merge_two_lists

two_sum([1, 2, 3], 5)  # [1, 2]
list(merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4])))
# [1, 1, 2, 3, 4, 4]
```

## What it does not do

There is no command-line program; the functions are meant to be imported and
called from Python code.