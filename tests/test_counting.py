import pytest

from algokit.counting import (
    can_construct_palindromes,
    max_split_score,
    min_operations,
    prefix_count,
    shift_letters,
    string_matching,
    vowel_strings_in_ranges,
    ways_to_split_array,
    word_subsets,
)

WORDS = ["pay", "attention", "practice", "attend"]


def test_prefix_count_empty_prefix_matches_all():
    assert prefix_count(WORDS, "") == len(WORDS)


def test_prefix_count_matches_startswith():
    assert prefix_count(WORDS, "at") == len([w for w in WORDS if w[:2] == "at"])


def test_prefix_count_longer_than_words():
    assert prefix_count(["a", "ab"], "abc") == 0


@pytest.mark.parametrize(
    "s,k,expected",
    [
        ("annabelle", 2, True),
        ("leetcode", 3, False),
        ("true", 4, True),
        ("racecar", 1, True),
        ("ab", 1, False),
        ("ab", 3, False),
    ],
)
def test_can_construct_palindromes(s, k, expected):
    assert can_construct_palindromes(s, k) is expected


def test_vowel_strings_worked_example():
    words = ["aba", "bcb", "ece", "aa", "e"]
    assert vowel_strings_in_ranges(words, [[0, 2], [1, 4], [1, 1]]) == [2, 3, 0]


def test_vowel_strings_ranges_are_additive():
    words = ["a", "ebe", "xyz", "ooo", "u", "bad", "ice"]
    singles = vowel_strings_in_ranges(words, [(i, i) for i in range(len(words))])
    assert vowel_strings_in_ranges(words, [(0, len(words) - 1)]) == [sum(singles)]


@pytest.mark.parametrize("s", ["00", "0000", "00000"])
def test_max_split_score_all_zeros(s):
    assert max_split_score(s) == len(s) - 1


@pytest.mark.parametrize("s", ["11", "1111"])
def test_max_split_score_all_ones(s):
    assert max_split_score(s) == len(s) - 1


def test_max_split_score_perfect_split():
    s = "000111"
    assert max_split_score(s) == len(s)


def test_min_operations_worked_example():
    assert min_operations("001011") == [11, 8, 5, 4, 3, 4]


@pytest.mark.parametrize("position", [0, 3, 6])
def test_min_operations_single_ball_is_distance(position):
    boxes = "".join("1" if i == position else "0" for i in range(7))
    assert min_operations(boxes) == [abs(i - position) for i in range(7)]


def test_min_operations_empty_boxes():
    assert min_operations("0000") == [0, 0, 0, 0]


def test_ways_to_split_all_zeros():
    nums = [0, 0, 0, 0]
    assert ways_to_split_array(nums) == len(nums) - 1


def test_ways_to_split_dominant_first_element():
    nums = [100, 1, 2, 3]
    assert ways_to_split_array(nums) == len(nums) - 1


def test_ways_to_split_dominant_last_element():
    assert ways_to_split_array([1, 2, 3, 100]) == 0


def test_shift_letters_worked_example():
    assert shift_letters("abc", [[0, 1, 0], [1, 2, 1], [0, 2, 1]]) == "ace"


def test_shift_letters_forward_and_back_cancel():
    s = "hello"
    assert shift_letters(s, [[1, 3, 1], [1, 3, 0]]) == s


def test_shift_letters_wraps_around():
    assert shift_letters("za", [[0, 1, 1], [1, 1, 0], [1, 1, 0]]) == "az"


def test_shift_letters_full_cycle():
    s = "xyz"
    assert shift_letters(s, [[0, 2, 1]] * 26) == s


def test_string_matching_keeps_input_order():
    words = ["mass", "as", "hero", "superhero"]
    assert string_matching(words) == ["as", "hero"]


def test_string_matching_none_contained():
    assert string_matching(["blue", "green", "bu"]) == []


def test_string_matching_duplicates_match_each_other():
    assert string_matching(["ab", "ab"]) == ["ab", "ab"]


def test_word_subsets_single_letters():
    words1 = ["amazon", "apple", "facebook", "google", "leetcode"]
    assert word_subsets(words1, ["e", "o"]) == ["facebook", "google", "leetcode"]


def test_word_subsets_respects_multiplicity():
    words1 = ["amazon", "apple", "facebook", "google", "leetcode"]
    assert word_subsets(words1, ["e", "oo"]) == ["facebook", "google"]


def test_word_subsets_no_requirements_keeps_everything():
    words1 = ["x", "yy", "zzz"]
    assert word_subsets(words1, []) == words1