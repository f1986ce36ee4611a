from collections.abc import Callable, Generator, Iterable, Sequence
from itertools import permutations
from math import factorial
from random import Random
from typing import NamedTuple

from .utils import is_sorted


def _sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    arr = list(range(N))
    while True:
        r.shuffle(arr)
        yield arr


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[list], int]
    max_N: int
    stable: bool = False
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    input_total: Callable[[int], int] = factorial
    output_total: Callable[[int], int] = lambda _: 1
    sampler: Callable[[int, Random], Generator[Sequence[int], None, None]] = _sampler
    validator: Callable[[Sequence], bool] = is_sorted
