# dsa_drills

Fifty classic data-structure and algorithm problems, solved in plain Python
with no third-party dependencies. The solutions are split into three modules
by difficulty, and they share small linked-list and binary-tree node types.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Modules

- `dsa_drills.nodes`: the `ListNode` and `TreeNode` dataclasses, plus the
  helpers `build_list(values)` and `list_values(head)`. A `ListNode` can be
  iterated to get its values from that node onwards.
- `dsa_drills.easy`:
  - `two_sum`, `is_valid_parentheses`, `merge_two_lists`, `max_profit`,
    `is_palindrome`
  - `max_sub_array`, `contains_duplicate`, `reverse_list`, `binary_search`,
    `climb_stairs`
  - `is_symmetric`, `single_number`, `intersection`, `move_zeroes`, `fizz_buzz`
- `dsa_drills.medium`:
  - `three_sum`, `group_anagrams`, `length_of_longest_substring`, `max_area`,
    `product_except_self`, `rotate`, `spiral_order`
  - `can_jump`, `merge`, `unique_paths`, `coin_change`, `length_of_lis`,
    `word_break`, `rob`
  - `num_islands`, `can_finish`, `find_kth_largest`, `top_k_frequent`,
    `find_peak_element`, `search`
  - `level_order`, `is_valid_bst`, `lowest_common_ancestor`, `build_tree`
  - the `Trie` class, with `insert`, `search` and `starts_with`
- `dsa_drills.hard`:
  - `find_median_sorted_arrays`, `trap`, `longest_valid_parentheses`,
    `is_match`, `min_distance`
  - `merge_k_lists`, `largest_rectangle_area`, `maximal_rectangle`,
    `ladder_length`
  - the `Codec` class, which turns a binary tree into comma-separated
    preorder text, with `#` for each missing child, and back

## Examples

```python
from dsa_drills.nodes import build_list, list_values, TreeNode
from dsa_drills.easy import two_sum, merge_two_lists
from dsa_drills.medium import Trie, coin_change
from dsa_drills.hard import Codec, min_distance

two_sum([2, 7, 11, 15], 9)                    # [0, 1]

merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
list_values(merged)                           # [1, 1, 2, 3, 4, 4]

coin_change([1, 2, 5], 11)                    # 3
coin_change([2], 3)                           # -1

trie = Trie()
trie.insert("apple")
trie.search("app")                            # False
trie.starts_with("app")                       # True

min_distance("horse", "ros")                  # 3

root = TreeNode(1, TreeNode(2), TreeNode(3))
codec = Codec()
text = codec.serialize(root)                  # "1,2,#,#,3,#,#"
codec.deserialize(text).right.val             # 3
```

## Inputs changed in place

Some functions change their input, as the problem they solve asks:

- `move_zeroes` and `rotate` return nothing.
- `three_sum` and `merge` sort the list they are given.
- `num_islands` turns the land cells of the grid it counts into `"0"`.
- The linked-list functions relink the nodes they are given and do not copy
  them.

## Errors

- `max_sub_array` raises `ValueError` for an empty list.
- `find_median_sorted_arrays` raises `ValueError` when both lists are empty.
- `find_kth_largest` raises `ValueError` when `k` is not between 1 and the
  length of the list.

Functions that report "not found" do so with a value: `two_sum` returns `[]`,
`binary_search` and `search` return `-1`, `coin_change` returns `-1` and
`ladder_length` returns `0`.

## Scope

This is a library only: it has no command-line interface and keeps no data
of its own.