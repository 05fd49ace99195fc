# algokit

A small library of classic algorithms over plain Python data: lists, strings,
and simple singly linked lists and binary trees. It has no dependencies
outside the standard library.

## Installation

```
pip install .
```

Install the test dependencies with `pip install .[test]` and run `pytest`.

## Modules

- `algokit.arrays`: `find_duplicates`, `zigzag`, `max_subarray_sum`,
  `rotate_left`, `spiral_order`, `least_average_start`, `trapped_water`,
  `has_triplet_sum`
- `algokit.searching`: `find_pages`, `peak_element`, `search_rotated`,
  `smallest_missing_positive`, `floor_sqrt`
- `algokit.hashing`: `zero_sum_triplets`, `intersection_unique`,
  `count_distinct_windows`, `count_pairs_less_than`, `count_xor_subarrays`,
  `subarray_with_sum`, `longest_consecutive`, `longest_unique_substring`,
  `count_pairs_with_sum`, `group_anagrams`, `count_subarrays_with_sum`,
  `closest_sum_pair`, `union_size`
- `algokit.linkedlist`: the `ListNode` and `TreeNode` classes, plus
  `from_iterable`, `to_list`, `add_numbers`, `delete_all`, `delete_node`,
  `has_loop`, `flatten_tree`, `intersection_values`, `intersection_node`,
  `kth_from_end`, `merge_k_sorted`, `is_palindrome`, `remove_loop`,
  `reverse`, `sort_012`
- `algokit.text`: `prefix_function`, `atoi`, `kmp_search`,
  `longest_happy_prefix`, `unique_permutations`, `is_rotated_by_two`,
  `is_valid_ipv4`, `is_balanced`
- `algokit.dynamic`: `max_sum_of_three_subarrays`, `num_ways_to_form_target`,
  `count_good_strings`, `min_cost_tickets`
- `algokit.counting`: `prefix_count`, `can_construct_palindromes`,
  `vowel_strings_in_ranges`, `max_split_score`, `min_operations`,
  `ways_to_split_array`, `shift_letters`, `string_matching`, `word_subsets`

## Examples

```python
from algokit.arrays import max_subarray_sum, rotate_left, trapped_water
from algokit.text import kmp_search, is_balanced
from algokit.linkedlist import from_iterable, reverse, to_list

max_subarray_sum([2, 3, -8, 7, -1, 2, 3])   # 11
trapped_water([3, 0, 1, 0, 4, 0, 2])        # 10
rotate_left([1, 2, 3, 4, 5], 2)             # [3, 4, 5, 1, 2]
kmp_search("aba", "abababa")                # [0, 2, 4]
is_balanced("[{()}]")                       # True
to_list(reverse(from_iterable([1, 2, 3])))  # [3, 2, 1]
```

## Behaviour notes

- List functions such as `zigzag` and `rotate_left` return a new list and
  leave their argument unchanged.
- `ListNode` objects are iterable: `list(head)` yields the values from that
  node to the end. `from_iterable` builds a list and `to_list` reads one back
  (returning `[]` for `None`).
- `reverse`, `delete_all`, `merge_k_sorted`, `sort_012`, `remove_loop` and
  `flatten_tree` relink the nodes they are given rather than copying them.
  `add_numbers` and `intersection_values` build new nodes for their result.
- Bad input raises: for example `max_subarray_sum([])`, `find_pages` with more
  readers than books, `floor_sqrt(0)` and `kth_from_end` with `k < 1` raise
  `ValueError`; `kth_from_end` on a list that is too short raises
  `IndexError`. `search_rotated` and `subarray_with_sum` return `None` when
  nothing is found.
- `atoi` clamps its result to the 32-bit signed range.
- `num_ways_to_form_target` and `count_good_strings` return counts modulo
  1 000 000 007.

## What it does not do

algokit is a library only: it has no command-line tool, and it keeps no data
between calls.