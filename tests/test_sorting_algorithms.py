from collections import Counter
from itertools import permutations
from functools import cmp_to_key
from random import Random

import pytest

from comparison_sorts import count_comparisons, is_sorted, sorting_algorithms, swap
from comparison_sorts.comparison_counter import ComparisonCountMismatchError, InvalidSortingAlgorithmError
from comparison_sorts.sorting_algorithms.SortingAlgorithm import SortingAlgorithm

ids = [sorting_algorithm.name for sorting_algorithm in sorting_algorithms]


def test_registry():
    assert sorted(ids) == ["block sort", "heap sort", "merge sort", "quick sort", "tree sort"]
    assert [s.name for s in sorting_algorithms if s.stable] == ["merge sort"]


def test_swap():
    arr = [1, 2, 3]
    swap(arr, 0, 2)
    assert arr == [3, 2, 1]
    swap(arr, 1, 1)
    assert arr == [3, 2, 1]


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([7])
    assert is_sorted([1, 1, 2, 3, 3])
    assert not is_sorted([2, 1])
    assert not is_sorted([1, 2, 4, 3, 5])


@pytest.mark.parametrize("sorting_algorithm", sorting_algorithms, ids=ids)
@pytest.mark.parametrize(
    "arr",
    [
        [],
        [42],
        [1, 2, 3, 4, 5, 6, 7],
        [7, 6, 5, 4, 3, 2, 1],
        [3, 3, 3, 3, 3],
        [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5],
        [-2, 0, -7, 11, 0, -2],
    ],
    ids=["empty", "single", "sorted", "reversed", "all equal", "duplicates", "negatives"],
)
def test_sorts_in_place(sorting_algorithm: SortingAlgorithm, arr: list):
    expected = sorted(arr)
    cmp_cnt = sorting_algorithm.func(arr)
    assert arr == expected
    assert is_sorted(arr)
    assert isinstance(cmp_cnt, int)
    if len(arr) <= 1:
        assert cmp_cnt == 0
    else:
        assert cmp_cnt > 0


@pytest.mark.parametrize("sorting_algorithm", sorting_algorithms, ids=ids)
def test_random_input(sorting_algorithm: SortingAlgorithm):
    r = Random(2024)
    for n in (2, 3, 10, 31, 100, 1000):
        values = [r.randrange(n * 2) for _ in range(n)]
        result, _ = count_comparisons(sorting_algorithm, values)
        assert result == sorted(values)
        assert Counter(result) == Counter(values)


@pytest.mark.parametrize("sorting_algorithm", sorting_algorithms, ids=ids)
def test_every_permutation(sorting_algorithm: SortingAlgorithm):
    for n in range(7):
        for perm in permutations(range(n)):
            arr = list(perm)
            sorting_algorithm.func(arr)
            assert arr == list(range(n))


@pytest.mark.parametrize("sorting_algorithm", sorting_algorithms, ids=ids)
def test_reported_count_matches_observed(sorting_algorithm: SortingAlgorithm):
    # count_comparisons raises if the reported and observed counts disagree
    for perm in permutations([1, 1, 2, 3, 3, 4]):
        count_comparisons(sorting_algorithm, perm)
    r = Random(7)
    values = [r.randrange(1_000_000) for _ in range(500)]
    result, cmp_cnt = count_comparisons(sorting_algorithm, values)
    arr = values[:]
    assert sorting_algorithm.func(arr) == cmp_cnt
    assert arr == result


@pytest.mark.parametrize("sorting_algorithm", sorting_algorithms, ids=ids)
def test_strings(sorting_algorithm: SortingAlgorithm):
    arr = ["pear", "apple", "fig", "banana", "apple", "cherry"]
    sorting_algorithm.func(arr)
    assert arr == ["apple", "apple", "banana", "cherry", "fig", "pear"]


@pytest.mark.parametrize("sorting_algorithm", sorting_algorithms, ids=ids)
def test_unhashable_elements(sorting_algorithm: SortingAlgorithm):
    result, cmp_cnt = count_comparisons(sorting_algorithm, [[3], [1], [2]])
    assert result == [[1], [2], [3]]
    assert cmp_cnt > 0
    result, _ = count_comparisons(sorting_algorithm, [[2, "b"], [1], [2, "a"], [1]])
    assert result == [[1], [1], [2, "a"], [2, "b"]]


@pytest.mark.parametrize("sorting_algorithm", sorting_algorithms, ids=ids)
def test_deterministic(sorting_algorithm: SortingAlgorithm):
    r = Random(99)
    values = [r.randrange(50) for _ in range(200)]
    a, b = values[:], values[:]
    assert sorting_algorithm.func(a) == sorting_algorithm.func(b)
    assert a == b


@pytest.mark.parametrize("sorting_algorithm", sorting_algorithms, ids=ids)
def test_large_sorted_input(sorting_algorithm: SortingAlgorithm):
    # deep enough to exceed the default recursion limit for a recursive quick sort or tree sort
    arr = list(range(2000))
    sorting_algorithm.func(arr)
    assert arr == list(range(2000))
    arr.reverse()
    sorting_algorithm.func(arr)
    assert arr == list(range(2000))


@pytest.mark.parametrize("sorting_algorithm", sorting_algorithms, ids=ids)
def test_incomparable_elements(sorting_algorithm: SortingAlgorithm):
    with pytest.raises(TypeError):
        sorting_algorithm.func([3, None, 1])
    with pytest.raises(TypeError):
        sorting_algorithm.func([1, "a", 0])


@pytest.mark.parametrize("sorting_algorithm", [s for s in sorting_algorithms if s.stable], ids=lambda s: s.name)
def test_stable(sorting_algorithm: SortingAlgorithm):
    key = cmp_to_key(lambda x, y: x[0] - y[0])
    r = Random(5)
    values = [(r.randrange(5), i) for i in range(100)]
    arr = [key(x) for x in values]
    sorting_algorithm.func(arr)
    result = [x.obj for x in arr]
    assert result == sorted(values, key=lambda x: x[0])


def test_count_mismatch_detected():
    def undercounting_sort(arr: list) -> int:
        arr.sort()
        return 0

    with pytest.raises(ComparisonCountMismatchError, match="reported 0 comparisons"):
        count_comparisons(SortingAlgorithm("undercounting sort", undercounting_sort, 0), [2, 1, 3])


def test_invalid_algorithm_detected():
    def lossy_sort(arr: list) -> int:
        arr[:] = [arr[0]] * len(arr)
        return 0

    def reversing_sort(arr: list) -> int:
        arr.reverse()
        return 0

    with pytest.raises(InvalidSortingAlgorithmError, match="lossy sort"):
        count_comparisons(SortingAlgorithm("lossy sort", lossy_sort, 0), [1, 2, 3])
    with pytest.raises(InvalidSortingAlgorithmError):
        count_comparisons(SortingAlgorithm("reversing sort", reversing_sort, 0), [1, 2, 3])
