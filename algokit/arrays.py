"""Array algorithms: duplicates, rotation, spiral walks, sliding windows."""

from collections import Counter
from itertools import accumulate


def find_duplicates(arr):
    """Return the values that occur more than once, in order of first appearance."""
    return [value for value, count in Counter(arr).items() if count > 1]


def zigzag(arr):
    """Return a copy of ``arr`` rearranged so that a < b > c < d > e ...

    Adjacent pairs are swapped in one pass; the input is left untouched.
    """
    result = list(arr)
    for i in range(len(result) - 1):
        want_rising = i % 2 == 0
        left, right = result[i], result[i + 1]
        in_order = left < right if want_rising else left > right
        if not in_order:
            result[i], result[i + 1] = right, left
    return result


def max_subarray_sum(arr):
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    if not arr:
        raise ValueError("max_subarray_sum() needs at least one element")
    best = arr[0]
    current = 0
    for value in arr:
        current += value
        best = max(best, current)
        current = max(current, 0)
    return best


def rotate_left(arr, d):
    """Return ``arr`` rotated counter-clockwise by ``d`` positions."""
    items = list(arr)
    if not items:
        return items
    d %= len(items)
    return items[d:] + items[:d]


def spiral_order(matrix):
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    rows, cols = len(matrix), len(matrix[0])
    total = rows * cols
    out = []
    top, left, bottom, right = 0, 0, rows - 1, cols - 1

    while len(out) < total:
        out.extend(matrix[top][left:right + 1])
        for i in range(top + 1, bottom + 1):
            if len(out) >= total:
                break
            out.append(matrix[i][right])
        for j in range(right - 1, left - 1, -1):
            if len(out) >= total:
                break
            out.append(matrix[bottom][j])
        for i in range(bottom - 1, top, -1):
            if len(out) >= total:
                break
            out.append(matrix[i][left])
        top, left, bottom, right = top + 1, left + 1, bottom - 1, right - 1
    return out[:total]


def least_average_start(nums, k):
    """Return the 1-based start of the first length-``k`` window with the least sum."""
    if k <= 0 or k > len(nums):
        raise ValueError(f"window size {k} does not fit {len(nums)} elements")
    window = sum(nums[:k])
    best, best_start = window, 0
    for start, (leaving, entering) in enumerate(zip(nums, nums[k:]), start=1):
        window += entering - leaving
        if window < best:
            best, best_start = window, start
    return best_start + 1


def trapped_water(heights):
    """Return how much rain water is held between the bars of ``heights``."""
    if not heights:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        max(0, min(lm, rm) - h)
        for h, lm, rm in zip(heights, left_max, right_max)
    )


def has_triplet_sum(arr, target):
    """Return True if three distinct positions of ``arr`` add up to ``target``."""
    ordered = sorted(arr)
    last = len(ordered) - 1
    for i, first in enumerate(ordered[:-2]):
        need = target - first
        lo, hi = i + 1, last
        while lo < hi:
            pair = ordered[lo] + ordered[hi]
            if pair == need:
                return True
            if pair > need:
                hi -= 1
            else:
                lo += 1
    return False