from importlib import import_module
from pathlib import Path

from .SortingAlgorithm import SortingAlgorithm

sorting_algorithms: list[SortingAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*_sort.py")):
    module = import_module(f".{file.stem}", package="comparison_sorts.sorting_algorithms.impl")
    sorting_algorithms.append(module.algorithm)
