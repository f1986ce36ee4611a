from ..SortingAlgorithm import SortingAlgorithm
from ..utils import swap


def quick_sort(arr: list) -> int:
    """First-element pivot, no randomization: sorted input degenerates to O(n^2).

    Pending ranges live on an explicit stack so degenerate input cannot exhaust the
    interpreter's recursion limit; the comparison count is the same as the recursive form.
    """

    def partition(L: list, low: int, high: int) -> tuple[int, int]:
        cmp_cnt = 0
        pivot = L[low]
        left, right = low + 1, high
        while left <= right:
            while left <= right:
                cmp_cnt += 1
                if L[left] > pivot:
                    break
                left += 1
            while left <= right:
                cmp_cnt += 1
                if L[right] < pivot:
                    break
                right -= 1
            if left < right:
                swap(L, left, right)
                left += 1
                right -= 1
        swap(L, low, right)
        return right, cmp_cnt

    cmp_cnt = 0
    ranges = [(0, len(arr) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        p, cnt = partition(arr, low, high)
        cmp_cnt += cnt
        ranges.append((p + 1, high))
        ranges.append((low, p - 1))
    return cmp_cnt


algorithm = SortingAlgorithm("quick sort", quick_sort, 8)
