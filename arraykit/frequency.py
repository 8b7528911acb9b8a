"""Counting, ranking and pairing operations on sequences of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def frequencies(values: Iterable[int]) -> dict[int, int]:
    """Return how often each value occurs, in order of first appearance."""
    return dict(Counter(values))


def split_repeating(values: Iterable[int]) -> tuple[list[int], list[int]]:
    """Return (values seen more than once, values seen once), each distinct."""
    counts = frequencies(values)
    repeating = [value for value, count in counts.items() if count > 1]
    non_repeating = [value for value, count in counts.items() if count == 1]
    return repeating, non_repeating


def sort_by_frequency(values: Iterable[int]) -> list[int]:
    """Return values grouped by descending frequency, smaller value first on ties."""
    counts = Counter(values)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [value for value, count in ordered for _ in range(count)]


def ranks(values: Iterable[int]) -> list[int]:
    """Return each value's dense rank: one more than the distinct smaller values."""
    items = list(values)
    rank_of = {value: rank for rank, value in enumerate(sorted(set(items)), start=1)}
    return [rank_of[value] for value in items]


def symmetric_pairs(pairs: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Return each pair (a, b) whose mirror (b, a) appeared earlier."""
    seen: dict[int, int] = {}
    found: list[tuple[int, int]] = []
    for first, second in pairs:
        if second in seen and seen[second] == first:
            found.append((first, second))
        else:
            seen[first] = second
    return found