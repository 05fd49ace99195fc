"""Prefix-sum and frequency-count problems on strings and arrays."""

from collections import Counter
from itertools import accumulate

_VOWELS = frozenset("aeiou")
_ALPHABET = 26


def prefix_count(words, pref):
    """Return how many of ``words`` start with ``pref``."""
    return sum(word.startswith(pref) for word in words)


def can_construct_palindromes(s, k):
    """Return True if all letters of ``s`` can form exactly ``k`` palindromes."""
    if k > len(s):
        return False
    odd = sum(count % 2 for count in Counter(s).values())
    return odd <= k


def _is_vowel_string(word):
    return bool(word) and word[0] in _VOWELS and word[-1] in _VOWELS


def vowel_strings_in_ranges(words, queries):
    """For each inclusive (first, last) range, count words starting and ending with a vowel."""
    totals = list(accumulate((_is_vowel_string(word) for word in words), initial=0))
    return [totals[last + 1] - totals[first] for first, last in queries]


def max_split_score(s):
    """Return the best zeros-on-the-left plus ones-on-the-right over non-empty splits."""
    zeros_left = 0
    ones_right = s.count("1")
    best = 0
    for ch in s[:-1]:
        if ch == "0":
            zeros_left += 1
        else:
            ones_right -= 1
        best = max(best, zeros_left + ones_right)
    return best


def _moves_from_left(boxes):
    moves = balls = 0
    for ch in boxes:
        yield moves
        balls += ch == "1"
        moves += balls


def min_operations(boxes):
    """Return, for each box, the moves needed to bring every ball into it."""
    from_right = list(_moves_from_left(boxes[::-1]))[::-1]
    return [a + b for a, b in zip(_moves_from_left(boxes), from_right)]


def ways_to_split_array(nums):
    """Return how many split points leave a left part summing to at least the right."""
    total = sum(nums)
    left = 0
    count = 0
    for value in nums[:-1]:
        left += value
        if left >= total - left:
            count += 1
    return count


def shift_letters(s, shifts):
    """Apply (start, end, direction) shifts to a lowercase string and return it.

    Direction 1 shifts forward in the alphabet, anything else shifts backward;
    both wrap around.
    """
    delta = [0] * (len(s) + 1)
    for start, end, direction in shifts:
        step = 1 if direction == 1 else -1
        delta[start] += step
        delta[end + 1] -= step
    return "".join(
        chr((ord(ch) - ord("a") + offset) % _ALPHABET + ord("a"))
        for ch, offset in zip(s, accumulate(delta))
    )


def string_matching(words):
    """Return the words that occur inside some other word of the list, in input order."""
    return [
        word
        for i, word in enumerate(words)
        if any(word in other for j, other in enumerate(words) if i != j)
    ]


def word_subsets(words1, words2):
    """Return the words of ``words1`` that contain every word of ``words2`` as a multiset."""
    required = Counter()
    for word in set(words2):
        required |= Counter(word)
    result = []
    for word in words1:
        counts = Counter(word)
        if all(counts[ch] >= need for ch, need in required.items()):
            result.append(word)
    return result