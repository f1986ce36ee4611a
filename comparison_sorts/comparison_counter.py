from collections.abc import Iterable
from functools import cmp_to_key

from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid sorting algorithm: `{name}` did not produce a sorted permutation of its input")


class ComparisonCountMismatchError(Exception):
    def __init__(self, name: str, reported: int, observed: int) -> None:
        super().__init__(f"Comparison count mismatch: `{name}` reported {reported} comparisons, {observed} were made")


def count_comparisons(sorting_algorithm: SortingAlgorithm, values: Iterable) -> tuple[list, int]:
    """Sorts a copy of ``values`` and checks the algorithm's own comparison count.

    Every element is wrapped in a key that counts each ordering decision made on it.
    Elements only need to be ordered, not hashable.
    Returns the sorted values and the comparison count.
    """

    def cmp(x, y) -> int:
        nonlocal observed
        observed += 1
        return 1 if x > y else -1 if x < y else 0

    values = list(values)
    key = cmp_to_key(cmp)
    arr = [key(x) for x in values]
    observed = 0
    reported = sorting_algorithm.func(arr)
    result = [x.obj for x in arr]
    if reported != observed:
        raise ComparisonCountMismatchError(sorting_algorithm.name, reported, observed)
    if not sorting_algorithm.validator(result) or result != sorted(values):
        raise InvalidSortingAlgorithmError(sorting_algorithm.name)
    return result, reported
