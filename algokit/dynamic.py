"""Dynamic-programming problems: windows, counting ways and minimum cost."""

from collections import Counter

MOD = 10**9 + 7

_PASS_LENGTHS = (1, 7, 30)


def _window_sums(nums, k):
    total = sum(nums[:k])
    sums = [total]
    for leaving, entering in zip(nums, nums[k:]):
        total += entering - leaving
        sums.append(total)
    return sums


def max_sum_of_three_subarrays(nums, k):
    """Return start indices of three non-overlapping length-``k`` windows of largest total.

    Among windows of equal sum the leftmost is preferred.
    """
    if k < 1 or 3 * k > len(nums):
        raise ValueError(f"three windows of size {k} do not fit {len(nums)} elements")
    sums = _window_sums(nums, k)
    size = len(sums)

    best_left = [0] * size
    for i in range(1, size):
        previous = best_left[i - 1]
        best_left[i] = i if sums[i] > sums[previous] else previous

    best_right = [size - 1] * size
    for i in range(size - 2, -1, -1):
        following = best_right[i + 1]
        best_right[i] = i if sums[i] >= sums[following] else following

    best_total = None
    answer = None
    for middle in range(k, size - k):
        left = best_left[middle - k]
        right = best_right[middle + k]
        total = sums[left] + sums[middle] + sums[right]
        if best_total is None or total > best_total:
            best_total = total
            answer = [left, middle, right]
    return answer


def num_ways_to_form_target(words, target):
    """Return the number of ways, modulo 1e9+7, to spell ``target`` from ``words``.

    All words have the same length. Each letter of the target is taken from some
    word at a column strictly to the right of the column used for the letter before.
    """
    if not words:
        raise ValueError("num_ways_to_form_target() needs at least one word")
    columns = [Counter(column) for column in zip(*words)]
    ways = [1] + [0] * len(target)
    for counts in columns:
        for j in range(len(target), 0, -1):
            picked = counts[target[j - 1]]
            if picked:
                ways[j] = (ways[j] + ways[j - 1] * picked) % MOD
    return ways[-1]


def count_good_strings(low, high, zero, one):
    """Return how many strings with length in [low, high] can be built, modulo 1e9+7.

    A string is built by repeatedly appending ``zero`` zeros or ``one`` ones.
    """
    if zero < 1 or one < 1:
        raise ValueError("block lengths must be positive")
    if high < 0:
        return 0
    ways = [0] * (high + 1)
    for length in range(high, -1, -1):
        total = 1 if length >= low else 0
        if length + one <= high:
            total += ways[length + one]
        if length + zero <= high:
            total += ways[length + zero]
        ways[length] = total % MOD
    return ways[0]


def min_cost_tickets(days, costs):
    """Return the least cost to travel on every day in ``days``.

    ``costs`` holds the prices of a 1-day, a 7-day and a 30-day pass.
    """
    if not days:
        raise ValueError("min_cost_tickets() needs at least one travel day")
    if len(costs) != len(_PASS_LENGTHS):
        raise ValueError("costs must hold exactly three prices")
    final = max(days)
    travel = set(days)
    best = [0] * (final + max(_PASS_LENGTHS) + 1)
    for day in range(final, 0, -1):
        if day not in travel:
            best[day] = best[day + 1]
            continue
        best[day] = min(
            cost + best[day + length] for cost, length in zip(costs, _PASS_LENGTHS)
        )
    return best[1]