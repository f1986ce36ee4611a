from ..SortingAlgorithm import SortingAlgorithm
from ..utils import swap


def heap_sort(arr: list) -> int:
    def push_down(i: int, n: int) -> int:
        # one comparison per in-range child, two at most
        cmp_cnt = 0
        k = i
        while True:
            largest = k
            l, r = 2 * k + 1, 2 * k + 2
            if l < n:
                cmp_cnt += 1
                if arr[l] > arr[largest]:
                    largest = l
            if r < n:
                cmp_cnt += 1
                if arr[r] > arr[largest]:
                    largest = r
            if largest == k:
                return cmp_cnt
            swap(arr, k, largest)
            k = largest

    cmp_cnt = 0
    for i in range(len(arr) // 2 - 1, -1, -1):
        cmp_cnt += push_down(i, len(arr))
    for i in range(len(arr) - 1, 0, -1):
        swap(arr, 0, i)
        cmp_cnt += push_down(0, i)
    return cmp_cnt


algorithm = SortingAlgorithm("heap sort", heap_sort, 8)
