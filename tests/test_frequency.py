import pytest

from arraykit.frequency import (
    frequencies,
    ranks,
    sort_by_frequency,
    split_repeating,
    symmetric_pairs,
)


def test_frequencies_first_appearance_order():
    values = [4, 2, 4, 7, 2, 4]
    result = frequencies(values)
    assert list(result) == [4, 2, 7]
    assert result[4] == values.count(4)
    assert sum(result.values()) == len(values)


def test_frequencies_empty():
    assert frequencies([]) == {}


def test_split_repeating_partitions_distinct_values():
    values = [1, 2, 2, 3, 3, 3, 4]
    repeating, non_repeating = split_repeating(values)
    assert repeating == [2, 3]
    assert non_repeating == [1, 4]
    assert set(repeating) | set(non_repeating) == set(values)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([5, 5, 4, 6, 4], [4, 4, 5, 5, 6]),
        ([9, 9, 9, 2, 5], [9, 9, 9, 2, 5]),
    ],
)
def test_sort_by_frequency_examples(values, expected):
    assert sort_by_frequency(values) == expected


def test_sort_by_frequency_is_permutation():
    values = [3, 1, 3, 2, 2, 2, 7]
    assert sorted(sort_by_frequency(values)) == sorted(values)


def test_ranks_preserve_order():
    values = [8, -3, 8, 0, 15]
    result = ranks(values)
    for (a, ra) in zip(values, result):
        for (b, rb) in zip(values, result):
            assert (a < b) == (ra < rb)


def test_symmetric_pairs_example():
    pairs = [[10, 20], [30, 40], [20, 10], [50, 60]]
    assert symmetric_pairs(pairs) == [(20, 10)]


def test_symmetric_pairs_none():
    assert symmetric_pairs([(1, 2), (3, 4)]) == []


def test_symmetric_pairs_rejects_malformed_pair():
    with pytest.raises(ValueError):
        symmetric_pairs([(1, 2, 3)])