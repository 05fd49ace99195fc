"""Binary-search style algorithms."""

import math


def _fits(pages, limit, k):
    """Return True if ``pages`` split into at most ``k`` runs each summing to <= limit."""
    extra_readers = 0
    current = 0
    for count in pages:
        if count > limit:
            return False
        if current + count <= limit:
            current += count
        else:
            current = count
            extra_readers += 1
        if extra_readers == k:
            return False
    return True


def find_pages(pages, k):
    """Return the least possible maximum of pages given to one of ``k`` readers.

    Books are handed out in order, each reader taking a contiguous run.
    """
    n = len(pages)
    if k < 1 or k > n:
        raise ValueError(f"cannot split {n} books between {k} readers")
    if k == n:
        return max(pages)
    low, high = max(pages), sum(pages)
    answer = high
    while low <= high:
        mid = (low + high) // 2
        if _fits(pages, mid, k):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def peak_element(arr):
    """Return the index of an element strictly greater than its neighbours."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        current = arr[mid]
        left = arr[mid - 1] if mid > 0 else -math.inf
        right = arr[mid + 1] if mid + 1 < len(arr) else -math.inf
        if left < current and right < current:
            return mid
        if right > current:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError("no peak element found")


def search_rotated(arr, key):
    """Return the index of ``key`` in a rotated sorted list, or None."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == key:
            return mid
        if arr[low] <= arr[mid]:
            if arr[low] <= key < arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] < key <= arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def smallest_missing_positive(arr):
    """Return the smallest positive integer not in ``arr``."""
    present = set(arr)
    return next(i for i in range(1, len(arr) + 2) if i not in present)


def floor_sqrt(n):
    """Return the floor of the square root of a positive integer."""
    if n < 1:
        raise ValueError("floor_sqrt() needs a positive integer")
    answer = 1
    low, high = 1, n // 2
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == n:
            return mid
        if square > n:
            high = mid - 1
        else:
            answer = mid
            low = mid + 1
    return answer