"""Small algorithms over sequences of integers."""

from collections import Counter
from collections.abc import Iterable, Sequence


def dutch_national_flag(values: Iterable[int]) -> list[int]:
    """Return the 0s, 1s and 2s of ``values`` grouped in order with one pass.

    Raises ValueError if any value is not 0, 1 or 2.
    """
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        value = items[mid]
        if value == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
        else:
            raise ValueError(f"value {value!r} is not 0, 1 or 2")
    return items


def odd_occurrence(values: Iterable[int]) -> int:
    """Return the first value that occurs an odd number of times.

    Raises ValueError if every value occurs an even number of times.
    """
    items = list(values)
    counts = Counter(items)
    for value in items:
        if counts[value] % 2:
            return value
    raise ValueError("no value occurs an odd number of times")


def merge_sorted(
    first: Iterable[int], second: Iterable[int]
) -> tuple[list[int], list[int]]:
    """Merge two sorted sequences without an extra buffer.

    The result keeps the lengths of the inputs: the first list holds the
    smallest elements of both, the second the rest, each sorted.
    """
    left = list(first)
    right = list(second)
    i = len(left) - 1
    j = 0
    while j < len(right) and i >= 0 and right[j] < left[i]:
        left[i], right[j] = right[j], left[i]
        i -= 1
        j += 1
    left.sort()
    right.sort()
    return left, right


def reverse_range(values: Sequence[int], start: int, end: int) -> list[int]:
    """Return a copy of ``values`` with the items ``start..end`` (inclusive) reversed."""
    items = list(values)
    if start >= end:
        return items
    if start < 0 or end >= len(items):
        raise IndexError(f"range {start}..{end} outside sequence of {len(items)}")
    items[start : end + 1] = items[start : end + 1][::-1]
    return items


def rotate_right(values: Sequence[int]) -> list[int]:
    """Return a copy of ``values`` rotated one place to the right."""
    items = list(values)
    if not items:
        return items
    return [items[-1], *items[:-1]]