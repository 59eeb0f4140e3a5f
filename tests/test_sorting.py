import pytest

from algobox.sorting import count_sort, merge_sort, rank_positions, selection_sort

DRIVER = [6, 5, 12, 10, 9, 1]
SAMPLES = [
    [],
    [1],
    DRIVER,
    [3, 3, 1, 2, 2, -5, 0],
    [9, 8, 7, 6, 5, 4, 3, 2, 1],
    [4, -1, 4, -1, 7, 0, 0, 12, -30],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


def test_merge_sort_leaves_input_untouched():
    data = list(DRIVER)
    merge_sort(data)
    assert data == DRIVER


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Keyed:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in merge_sort(Keyed(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])


@pytest.mark.parametrize("values", SAMPLES)
def test_count_sort_matches_sorted(values):
    assert count_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_selection_sort_sorts(values):
    result, _ = selection_sort(values)
    assert result == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_selection_sort_comparison_count(values):
    _, comparisons = selection_sort(values)
    n = len(values)
    assert comparisons == n * (n - 1) // 2


def test_rank_positions_driver_example():
    assert rank_positions([10, 16, 7, 14, 5, 3, 12, 9]) == [4, 7, 2, 6, 1, 0, 5, 3]


@pytest.mark.parametrize("values", SAMPLES)
def test_rank_positions_is_permutation(values):
    assert sorted(rank_positions(values)) == list(range(len(values)))


@pytest.mark.parametrize("values", SAMPLES)
def test_rank_positions_respects_order(values):
    ranks = rank_positions(values)
    for a, ra in zip(values, ranks):
        for b, rb in zip(values, ranks):
            if a < b:
                assert ra < rb