# arraydrills

A collection of classic array, matrix and container exercises written as
plain Python functions. Each function takes ordinary Python values (lists,
tuples, integers) and returns a result. It does not print anything. Inputs
are never modified; functions that rearrange data return a new list.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `arraydrills.containers`

- `summarize(values)` returns a frozen `Summary` dataclass with the fields
  `minimum`, `maximum`, `total`, `threes` (how many 3s there are) and
  `contains_two`. It raises `ValueError` on an empty input.
- `sort_pairs(pairs)` sorts pairs by their second element in descending order.
  Ties are broken by the first element in ascending order.
- `word_counts(words)` returns a dict of word counts, with its keys in sorted
  order.
- `count_queries(words, queries)` returns, for each query, how often it occurs
  among the words.
- `max_halving_total(values, k)` repeats a step `k` times. Each step takes the
  largest value, adds it to a running total, and puts its half (truncated
  toward zero) back in place of it. The function returns the total. It raises
  `ValueError` when `k` is negative or when there are no values to take.
- `rank_by_marks(entries)` orders `(name, marks)` pairs from the highest marks
  to the lowest. Entries with equal marks come out in reverse order of arrival.
- `extremes_mask(values)` returns a string of `'1'` and `'0'` characters. A
  position gets `'1'` when its value is a prefix minimum or a suffix maximum.
- `lower_bound(values, target)` returns the smallest value not less than
  `target`, or `None` if there is no such value.

### `arraydrills.combinatorics`

- `n_choose_r(n, r)` returns the binomial coefficient. It returns 0 when
  `r > n`.
- `pascal_row(n)` returns the `n`-th row of Pascal's triangle, counting rows
  from one. For example, `pascal_row(5)` is `[1, 4, 6, 4, 1]`.
- `binomial_row(n)` returns `C(n, 0)` through `C(n, n)`. It raises `ValueError`
  for a negative `n`.

### `arraydrills.basics`

- `left_rotate(values, d)` rotates the values left by `d` places, taken modulo
  the length.
- `move_zeros(values)` moves all zeros to the end. The other values keep their
  order.
- `remove_duplicates(values)` collapses each run of equal values in a sorted
  sequence to a single value.
- `second_largest(values)` returns the largest value strictly below the
  maximum. It returns `None` when there is no such value, and raises
  `ValueError` on an empty input.
- `union_sorted(first, second)` returns the distinct values of two sorted
  sequences, in ascending order.

### `arraydrills.subarrays`

- `longest_subarray_with_sum(values, k)` returns the length of the longest
  contiguous run summing to `k`, or `None` if there is none. It uses prefix
  sums and accepts negative values.
- `longest_nonnegative_subarray_with_sum(values, k)` gives the same answer
  using a sliding window. It raises `ValueError` if any value is negative.
- `count_subarrays_with_sum(values, k)` counts the contiguous runs whose sum
  is `k`.
- `count_subarrays_with_xor(values, k)` counts the contiguous runs whose
  bitwise xor is `k`.
- `max_subarray_sum(values)` returns the largest contiguous sum, using
  Kadane's algorithm. It returns 0 when no run has a positive sum.

### `arraydrills.xor_tricks`

- `missing_number(values)` returns the one number from `1..n+1` that is absent
  from `n` distinct values.
- `single_number(values)` returns the value that appears once when every other
  value appears twice.
- `repeating_and_missing(values)` returns `(repeating, missing)` for a list of
  `1..n` in which one number appears twice and another is absent. It raises
  `ValueError` when the input does not have that shape.

### `arraydrills.ksum`

- `two_sum(values, k)` returns positions `(i, j)`, with `i < j`, in the
  *sorted* values whose entries sum to `k`. It raises `ValueError` when no pair
  exists.
- `three_sum(values)` returns every distinct ascending triplet that sums to
  zero, as a sorted list of tuples.
- `four_sum(values, target)` returns every distinct ascending quadruplet that
  sums to `target`, as a sorted list of tuples.

### `arraydrills.voting`

- `majority_element(values)` returns the value occurring more than `n // 2`
  times, or `None` if there is no such value.
- `majority_elements(values)` returns the values occurring more than `n // 3`
  times. There are at most two such values.

Both functions use Boyer-Moore voting.

### `arraydrills.merging`

- `merge_intervals(intervals)` merges overlapping or touching `[start, end]`
  intervals. It returns `(start, end)` tuples in ascending order.
- `merge_sorted(first, second)` merges two sorted lists and returns two lists
  with the original lengths. The first holds the smallest values and the
  second holds the rest.

### `arraydrills.sequences`

- `max_profit(prices)` returns the best gain from buying on one day and
  selling on the same day or a later one. It raises `ValueError` on an empty
  input.
- `leaders(values)` returns the values greater than everything to their
  right, listed from right to left.
- `longest_consecutive(values)` returns the length of the longest run of
  consecutive integers present among the values.
- `next_permutation(values)` returns the next permutation in ascending order.
  The last permutation wraps around to the first.
- `rearrange_by_sign(values)` alternates positive and non-positive values,
  starting with a positive one. Each group keeps its own order. It raises
  `ValueError` if the two groups differ in size.
- `sort_012(values)` sorts a sequence made only of 0s, 1s and 2s. It raises
  `ValueError` on any other value.

### `arraydrills.matrix`

- `set_matrix_zeroes(matrix)` returns a copy in which every row and every
  column that holds a zero is filled with zeros.
- `rotate_matrix(matrix)` returns a square matrix rotated a quarter turn
  clockwise.
- `spiral_matrix(rows, cols)` returns a `rows x cols` grid filled with 1, 2,
  and so on, along a clockwise spiral that starts at the top-left corner.

The matrix functions raise `ValueError` for ragged rows. `rotate_matrix` also
raises it for a non-square matrix, and `spiral_matrix` for negative
dimensions.

## Examples

```python
from arraydrills.basics import left_rotate, union_sorted
from arraydrills.ksum import three_sum
from arraydrills.merging import merge_intervals

left_rotate([1, 2, 3, 4, 5, 6, 7], 3)        # [4, 5, 6, 7, 1, 2, 3]
union_sorted([1, 1, 2, 3, 4, 5, 8, 8], [2, 3, 4, 4, 5, 6])
                                             # [1, 2, 3, 4, 5, 6, 8]
three_sum([-1, 0, 1, 2, -1, -4])             # [(-1, -1, 2), (-1, 0, 1)]
merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])
                                             # [(1, 6), (8, 10), (15, 18)]
```

## What it does not do

This is a library of functions only. It has no command-line program and does
not read input from standard input or a file. To run an exercise on your own
data, call the function from Python and use the value it returns.