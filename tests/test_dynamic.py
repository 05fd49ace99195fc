from itertools import combinations

import pytest

from algokit.dynamic import (
    MOD,
    count_good_strings,
    max_sum_of_three_subarrays,
    min_cost_tickets,
    num_ways_to_form_target,
)


def _window(nums, start, k):
    return sum(nums[start:start + k])


def test_max_sum_of_three_worked_example():
    assert max_sum_of_three_subarrays([1, 2, 1, 2, 6, 7, 5, 1], 2) == [0, 3, 5]


@pytest.mark.parametrize(
    "nums,k",
    [
        ([4, 5, 10, 6, 11, 17, 4, 11, 1, 3], 1),
        ([1, 2, 1, 2, 1, 2, 1, 2, 1], 2),
        ([9, 8, 7, 6, 5, 4, 3, 2, 1, 0, 5, 5], 3),
        ([3, -1, 4, -1, 5, -9, 2, 6, -5, 3, 5], 2),
    ],
)
def test_max_sum_of_three_is_optimal_and_disjoint(nums, k):
    a, b, c = max_sum_of_three_subarrays(nums, k)
    assert a + k <= b and b + k <= c and c + k <= len(nums)
    starts = range(len(nums) - k + 1)
    best = max(
        _window(nums, x, k) + _window(nums, y, k) + _window(nums, z, k)
        for x, y, z in combinations(starts, 3)
        if x + k <= y and y + k <= z
    )
    assert _window(nums, a, k) + _window(nums, b, k) + _window(nums, c, k) == best


def test_max_sum_of_three_exact_fit():
    assert max_sum_of_three_subarrays([1, 2, 3, 4, 5, 6], 2) == [0, 2, 4]


@pytest.mark.parametrize("nums,k", [([1, 2, 3, 4, 5], 2), ([1, 2, 3], 0)])
def test_max_sum_of_three_rejects_bad_sizes(nums, k):
    with pytest.raises(ValueError):
        max_sum_of_three_subarrays(nums, k)


def test_num_ways_worked_example():
    assert num_ways_to_form_target(["acca", "bbbb", "caca"], "aba") == 6


def test_num_ways_single_word_matches_itself_once():
    assert num_ways_to_form_target(["abc"], "abc") == 1


def test_num_ways_target_longer_than_words():
    assert num_ways_to_form_target(["ab", "ba"], "abc") == 0


def test_num_ways_empty_target():
    assert num_ways_to_form_target(["xyz"], "") == 1


def test_num_ways_doubling_words_scales_by_power_of_two():
    words = ["acca", "bbbb", "caca"]
    target = "ab"
    single = num_ways_to_form_target(words, target)
    doubled = num_ways_to_form_target(words * 2, target)
    assert doubled == single * 2 ** len(target) % MOD


def test_num_ways_requires_words():
    with pytest.raises(ValueError):
        num_ways_to_form_target([], "a")


def test_count_good_strings_fixed_length_binary():
    assert count_good_strings(10, 10, 1, 1) == 2**10


def test_count_good_strings_sum_over_lengths():
    assert count_good_strings(3, 5, 1, 1) == 2**3 + 2**4 + 2**5


def test_count_good_strings_is_reduced_modulo():
    assert count_good_strings(100, 100, 1, 1) == pow(2, 100, MOD)


def test_count_good_strings_additive_over_ranges():
    whole = count_good_strings(2, 9, 2, 3)
    parts = count_good_strings(2, 5, 2, 3) + count_good_strings(6, 9, 2, 3)
    assert whole == parts


def test_count_good_strings_rejects_zero_block():
    with pytest.raises(ValueError):
        count_good_strings(1, 3, 0, 1)


def test_min_cost_tickets_worked_example():
    assert min_cost_tickets([1, 4, 6, 7, 8, 20], [2, 7, 15]) == 11


def test_min_cost_tickets_single_day_takes_cheapest_pass():
    assert min_cost_tickets([5], [4, 3, 9]) == 3


def test_min_cost_tickets_month_pass_covers_a_month():
    days = list(range(1, 31))
    assert min_cost_tickets(days, [2, 7, 15]) == 15


def test_min_cost_tickets_bounded_by_day_passes():
    days = [1, 3, 9, 17, 40, 41, 42, 90]
    costs = [3, 10, 40]
    assert min_cost_tickets(days, costs) <= len(days) * costs[0]


def test_min_cost_tickets_requires_days():
    with pytest.raises(ValueError):
        min_cost_tickets([], [1, 2, 3])