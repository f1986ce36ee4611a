from typing import Optional

import numpy as np

from .Config import *
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.utils import is_sorted


def main(N: int = DRIVER_N, seed: Optional[int] = None) -> dict[str, tuple[int, bool]]:
    rng = np.random.default_rng(seed)
    values: list[int] = rng.integers(0, DRIVER_MAX_VALUE, size=N).tolist()

    results: dict[str, tuple[int, bool]] = {}
    for sorting_algorithm in sorting_algorithms:
        arr = values[:]
        cmp_cnt = sorting_algorithm.func(arr)
        results[sorting_algorithm.name] = (cmp_cnt, is_sorted(arr))

    width = max(map(len, results), default=0)
    for name, (cmp_cnt, _) in results.items():
        print(f"{name.capitalize():<{width}} comparisons: {cmp_cnt}")
    print()
    for name, (_, ok) in results.items():
        print(f"{name.capitalize():<{width}} sorted: {ok}")
    return results


if __name__ == "__main__":
    main()
