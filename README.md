# algokit

Classic algorithm solutions as plain Python functions and small classes.
There are no runtime dependencies.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.linked`: the `ListNode` class (`val`, `next`; nodes compare by
  identity), `build_list`, `list_values`, `add_two_numbers`,
  `remove_nth_from_end`, `merge_k_lists`, `rotate_right`, `has_cycle`,
  `detect_cycle`, `insertion_sort_list`, `get_intersection_node`,
  `remove_elements`, `is_palindrome`.
- `algokit.trees`: the `TreeNode` class (`val`, `left`, `right`),
  `build_tree` and `tree_values` (level order, `None` for a missing child),
  `is_symmetric`, `min_depth`, `flatten`, `invert_tree`,
  `lowest_common_ancestor`, `is_valid_bst`.
- `algokit.lru`: `LRUCache(capacity)` with `get(key)`, which returns `-1` for
  a missing key, and `put(key, value)`. It supports `len()` and `in`. A
  capacity of zero or less stores nothing.
- `algokit.design`: `MedianFinder` with `add_num` and `find_median` (which
  raises `ValueError` on an empty stream), and `Twitter` with `post_tweet`,
  `get_news_feed` (up to ten most recent tweet ids), `follow` and `unfollow`.
- `algokit.arrays`: `two_sum`, `two_sum_brute`, `remove_duplicates`,
  `remove_element`, `search_insert`, `max_sub_array`, `merge_intervals`,
  `max_sliding_window`, `top_k_frequent`, `max_area`, `rotate_matrix`,
  `num_subarray_product_less_than_k`, `rob`, `coin_change`, `largest_number`,
  `reverse_integer`.
- `algokit.strings`: `length_of_longest_substring`, `longest_palindrome`,
  `multiply`, `character_replacement`, `find_all_concatenated_words`,
  `find_longest_word`, `min_distance`, `reorganize_string`,
  `restore_ip_addresses`, `is_interleave`, `is_interleave_recursive`.
- `algokit.pairs`: `k_smallest_pairs` and `k_smallest_pairs_fast`, both
  returning `[u, v]` pairs ordered by sum.
- `algokit.graphs`: `solve_surrounded`, `find_min_height_trees`,
  `find_circle_num`, `unique_paths_with_obstacles`, `match_count`, and
  `find_secret_word(wordlist, master)`, where `master` is any object with a
  `guess(word)` method returning the number of matching positions (the
  `Master` protocol). It returns the secret word once guessed.

## Examples

```python
from algokit.linked import build_list, list_values, add_two_numbers
from algokit.lru import LRUCache
from algokit.strings import min_distance

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
print(list_values(total))          # [7, 0, 8]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                       # 1
cache.put(3, 3)                    # evicts key 2
cache.get(2)                       # -1

min_distance("horse", "ros")       # 3
```

## Errors

Invalid input raises `ValueError`: for example `multiply` with a non-digit
string, `character_replacement` with anything but `A`–`Z`,
`find_all_concatenated_words` with anything but `a`–`z`, a negative amount in
`coin_change`, a negative `k` in `k_smallest_pairs_fast`, edges that are not
a tree in `find_min_height_trees`, and a word list without the secret in
`find_secret_word`.

## In-place changes

Some functions change their input: `flatten`, `invert_tree`,
`rotate_matrix`, `solve_surrounded`, `remove_duplicates`, `remove_element`,
and the list-rewiring functions in `algokit.linked`.

## What it does not do

`algokit` is a library only: it has no command-line program and does no
input or output of its own.