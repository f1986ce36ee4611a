from typing import Generic, Optional, TypeVar

from ..SortingAlgorithm import SortingAlgorithm

T = TypeVar("T")


class Node(Generic[T]):
    def __init__(self, val: T) -> None:
        self.val: T = val
        self.left: Optional[Node[T]] = None
        self.right: Optional[Node[T]] = None

    __slots__ = ("val", "left", "right")


def _insert(root: Node[T], val: T) -> int:
    "Returns the depth of the new leaf, which is the number of comparisons made."
    node = root
    depth = 0
    while True:
        depth += 1
        if val <= node.val:
            if node.left is None:
                node.left = Node(val)
                return depth
            node = node.left
        else:
            if node.right is None:
                node.right = Node(val)
                return depth
            node = node.right


def _inorder(root: Node[T]) -> list[T]:
    ret: list[T] = []
    stack: list[Node[T]] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        ret.append(node.val)
        node = node.right
    return ret


def tree_sort(arr: list) -> int:
    if not arr:
        return 0
    root = Node(arr[0])
    cmp_cnt = sum(_insert(root, val) for val in arr[1:])
    for i, val in enumerate(_inorder(root)):
        arr[i] = val
    return cmp_cnt


algorithm = SortingAlgorithm("tree sort", tree_sort, 8)
