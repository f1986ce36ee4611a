from collections.abc import MutableSequence, Sequence


def swap(arr: MutableSequence, i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]


def is_sorted(arr: Sequence) -> bool:
    "Comparisons made here are never part of an algorithm's count."
    for i in range(1, len(arr)):
        if arr[i - 1] > arr[i]:
            return False
    return True
