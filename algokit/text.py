"""String algorithms: prefix function, KMP, parsing and validation."""

from collections import Counter
from itertools import takewhile

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_DIGITS = frozenset("0123456789")
_OPENERS = frozenset("([{")
_CLOSER_TO_OPENER = {")": "(", "]": "[", "}": "{"}


def prefix_function(s):
    """Return, for each position, the length of the longest proper border of s[:i+1]."""
    lps = [0] * len(s)
    length = 0
    for i in range(1, len(s)):
        while length and s[i] != s[length]:
            length = lps[length - 1]
        if s[i] == s[length]:
            length += 1
        lps[i] = length
    return lps


def atoi(s):
    """Parse a leading signed decimal integer, clamped to the 32-bit signed range.

    Leading blanks and zeros are skipped; an optional '-' may follow them.
    Anything that does not start with a digit yields 0.
    """
    start = 0
    while start < len(s) and s[start] in "0 ":
        start += 1
    negative = s[start:start + 1] == "-"
    if negative:
        start += 1
    limit = -INT_MIN if negative else INT_MAX
    value = 0
    for ch in takewhile(lambda c: c in _DIGITS, s[start:]):
        value = value * 10 + int(ch)
        if value > limit:
            return INT_MIN if negative else INT_MAX
    return -value if negative else value


def kmp_search(pattern, text):
    """Return every start index at which ``pattern`` occurs in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    matches = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = lps[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            matches.append(i - j + 1)
            j = lps[j - 1]
    return matches


def longest_happy_prefix(s):
    """Return the longest proper prefix of ``s`` that is also its suffix."""
    if not s:
        return ""
    return s[:prefix_function(s)[-1]]


def unique_permutations(s):
    """Return the distinct permutations of ``s`` in lexicographic order."""
    counts = Counter(s)
    letters = sorted(counts)
    size = len(s)

    def build(prefix):
        if len(prefix) == size:
            yield "".join(prefix)
            return
        for ch in letters:
            if counts[ch]:
                counts[ch] -= 1
                prefix.append(ch)
                yield from build(prefix)
                prefix.pop()
                counts[ch] += 1

    return list(build([]))


def is_rotated_by_two(s1, s2):
    """Return True if ``s2`` is ``s1`` rotated by exactly two places either way."""
    if len(s1) != len(s2) or len(s1) < 2:
        return False
    return s2 == s1[2:] + s1[:2] or s2 == s1[-2:] + s1[:-2]


def _valid_octet(part):
    return (
        bool(part)
        and all(ch in _DIGITS for ch in part)
        and str(int(part)) == part
        and int(part) <= 255
    )


def is_valid_ipv4(s):
    """Return True if ``s`` is a dotted-quad IPv4 address without leading zeros."""
    parts = s.split(".")
    return len(parts) == 4 and all(_valid_octet(part) for part in parts)


def is_balanced(s):
    """Return True if the brackets ()[]{} in ``s`` are properly nested.

    Any other character makes the string unbalanced.
    """
    stack = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif not stack or stack.pop() != _CLOSER_TO_OPENER.get(ch):
            return False
    return not stack