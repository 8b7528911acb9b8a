"""Operations that rearrange sequences of integers."""

from __future__ import annotations

from collections.abc import Iterable


def reverse(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def rotate_right(values: Iterable[int], k: int) -> list[int]:
    """Return the values rotated right by k positions."""
    items = list(values)
    if not items:
        raise ValueError("cannot rotate an empty array")
    if k < 0:
        raise ValueError("rotation count must not be negative")
    k %= len(items)
    if k == 0:
        return items
    return items[-k:] + items[:-k]


def sort_descending(values: Iterable[int]) -> list[int]:
    """Return the values sorted from largest to smallest."""
    return sorted(values, reverse=True)


def sort_ascending(values: Iterable[int]) -> list[int]:
    """Return the values sorted from smallest to largest."""
    return sorted(values)


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """Return the values with later repeats dropped, keeping first occurrences."""
    return list(dict.fromkeys(values))