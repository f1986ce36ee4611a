from ..SortingAlgorithm import SortingAlgorithm
from ..utils import swap

SHRINK_FACTOR = 1.3


def block_sort(arr: list) -> int:
    "Comb sort: bubble sort over a gap that shrinks by SHRINK_FACTOR down to 1."
    n = len(arr)
    cmp_cnt = 0
    gap = n
    swapped = False
    while gap > 1 or swapped:
        gap = max(1, int(gap / SHRINK_FACTOR))
        swapped = False
        for i in range(n - gap):
            cmp_cnt += 1
            if arr[i] > arr[i + gap]:
                swap(arr, i, i + gap)
                swapped = True
    return cmp_cnt


algorithm = SortingAlgorithm("block sort", block_sort, 8)
