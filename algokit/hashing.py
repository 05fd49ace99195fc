"""Hash-map, two-pointer and sliding-window algorithms on sequences."""

from bisect import bisect_left
from collections import Counter, defaultdict


def zero_sum_triplets(arr):
    """Return index triplets (i, j, k), i < j < k, whose values sum to zero."""
    result = []
    for i, first in enumerate(arr[:-2]):
        seen = defaultdict(list)
        for k, value in enumerate(arr[i + 1:], start=i + 1):
            need = -(first + value)
            result.extend((i, j, k) for j in seen.get(need, ()))
            seen[value].append(k)
    return result


def intersection_unique(a, b):
    """Return the distinct values common to ``a`` and ``b``, in order of ``b``."""
    remaining = set(a)
    result = []
    for value in b:
        if value in remaining:
            result.append(value)
            remaining.discard(value)
    return result


def count_distinct_windows(arr, k):
    """Return the number of distinct values in every window of length ``k``."""
    if k <= 0:
        return []
    counts = Counter()
    result = []
    for end, value in enumerate(arr):
        counts[value] += 1
        if end >= k:
            old = arr[end - k]
            counts[old] -= 1
            if counts[old] == 0:
                del counts[old]
        if end >= k - 1:
            result.append(len(counts))
    return result


def count_pairs_less_than(arr, target):
    """Return the number of pairs whose sum is strictly less than ``target``."""
    ordered = sorted(arr)
    total = 0
    for i, value in enumerate(ordered[:-1]):
        if value > target:
            break
        bound = bisect_left(ordered, target - value, i + 1)
        if bound == i + 1:
            break
        total += bound - (i + 1)
    return total


def count_xor_subarrays(arr, k):
    """Return the number of contiguous runs whose XOR equals ``k``."""
    seen = Counter({0: 1})
    running = 0
    total = 0
    for value in arr:
        running ^= value
        total += seen[running ^ k]
        seen[running] += 1
    return total


def subarray_with_sum(arr, target):
    """Return 1-based (start, end) of the first run of non-negatives summing to ``target``.

    Returns None when there is no such run.
    """
    start = 0
    total = 0
    for end, value in enumerate(arr):
        total += value
        while total > target and start <= end:
            total -= arr[start]
            start += 1
        if total == target:
            return (start + 1, end + 1)
    return None


def longest_consecutive(arr):
    """Return the length of the longest run of consecutive integers in ``arr``."""
    values = set(arr)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        length = 1
        while value + length in values:
            length += 1
        best = max(best, length)
    return best


def longest_unique_substring(s):
    """Return the length of the longest substring without repeated characters."""
    last_seen = {}
    start = 0
    best = 0
    for end, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = end
        best = max(best, end - start + 1)
    return best


def count_pairs_with_sum(arr, target):
    """Return the number of index pairs in sorted ``arr`` whose sum is ``target``."""
    low, high = 0, len(arr) - 1
    count = 0
    while low < high:
        pair = arr[low] + arr[high]
        if pair == target:
            if arr[low] == arr[high]:
                run = high - low + 1
                count += run * (run - 1) // 2
                break
            left_run = right_run = 1
            while low + 1 < high and arr[low] == arr[low + 1]:
                low += 1
                left_run += 1
            while high - 1 > low and arr[high - 1] == arr[high]:
                high -= 1
                right_run += 1
            count += left_run * right_run
            low += 1
            high -= 1
        elif pair > target:
            high -= 1
        else:
            low += 1
    return count


def group_anagrams(words):
    """Group words that are anagrams; groups keep input order and are sorted."""
    groups = defaultdict(list)
    for word in words:
        groups["".join(sorted(word))].append(word)
    return sorted(groups.values())


def count_subarrays_with_sum(arr, k):
    """Return the number of contiguous runs whose sum equals ``k``."""
    seen = Counter({0: 1})
    running = 0
    total = 0
    for value in arr:
        running += value
        total += seen[running - k]
        seen[running] += 1
    return total


def closest_sum_pair(arr, target):
    """Return the pair (a, b), a <= b, whose sum is closest to ``target``.

    Ties go to the pair with the larger difference.
    """
    ordered = sorted(arr)
    if len(ordered) < 2:
        raise ValueError("closest_sum_pair() needs at least two elements")
    best = (ordered[0], ordered[1])
    lo, hi = 0, len(ordered) - 1
    while lo < hi:
        a, b = ordered[lo], ordered[hi]
        gap = abs(target - a - b)
        best_gap = abs(target - best[0] - best[1])
        if gap < best_gap or (gap == best_gap and b - a > best[1] - best[0]):
            best = (a, b)
        if a + b > target:
            hi -= 1
        else:
            lo += 1
    return best


def union_size(a, b):
    """Return the number of distinct values across ``a`` and ``b``."""
    return len(set(a).union(b))