from .comparison_counter import ComparisonCountMismatchError, InvalidSortingAlgorithmError, count_comparisons
from .sorting_algorithms.impl.block_sort import block_sort
from .sorting_algorithms.impl.heap_sort import heap_sort
from .sorting_algorithms.impl.merge_sort import merge_sort
from .sorting_algorithms.impl.quick_sort import quick_sort
from .sorting_algorithms.impl.tree_sort import tree_sort
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.utils import is_sorted, swap
