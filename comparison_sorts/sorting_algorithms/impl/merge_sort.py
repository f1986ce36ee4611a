from ..SortingAlgorithm import SortingAlgorithm


def merge_sort(arr: list) -> int:
    buf = arr[:]

    def merge(l: int, m: int, r: int) -> int:
        cmp_cnt = 0
        buf[l : r + 1] = arr[l : r + 1]
        i, j, k = l, m + 1, l
        while i <= m and j <= r:
            cmp_cnt += 1
            # ties take the left head, which keeps the sort stable
            if buf[j] < buf[i]:
                arr[k] = buf[j]
                j += 1
            else:
                arr[k] = buf[i]
                i += 1
            k += 1
        # the leftover tail is copied without comparisons
        arr[k : r + 1] = buf[i : m + 1] + buf[j : r + 1]
        return cmp_cnt

    def impl(l: int, r: int) -> int:
        if l >= r:
            return 0
        m = (l + r) // 2
        return impl(l, m) + impl(m + 1, r) + merge(l, m, r)

    return impl(0, len(arr) - 1)


algorithm = SortingAlgorithm("merge sort", merge_sort, 8, stable=True)
