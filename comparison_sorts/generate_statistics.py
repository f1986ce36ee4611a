from collections.abc import Iterable
from itertools import product
from math import log2, nan
from multiprocessing import Pool
from random import Random
from time import thread_time
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd
import plotly.express as px
from tqdm import tqdm

from .comparison_counter import count_comparisons
from .Config import *
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm
from .sorting_algorithms.sorting_algorithms import sorting_algorithms


class ComparisonStats(NamedTuple):
    best: int
    worst: int
    avg: float
    samples: int
    exhaustive: bool


COLUMNS = ("name", "N", "exhaustive", "samples", "lower bound", "best", "worst", "avg", "ratio")


def get_comparison_stats(sorting_algorithm: SortingAlgorithm, N: int) -> ComparisonStats:
    """Comparison counts over every permutation of ``range(N)``, or over seeded shuffles above ``max_N``.

    Each input goes through :func:`count_comparisons`, so every count in the result has been
    observed through the elements themselves and every output is a sorted permutation.
    """
    do_sample = N > sorting_algorithm.max_N
    operation_cnts: list[int] = []
    r = Random(SAMPLE_SEED)
    start_time = thread_time()
    for val_array in sorting_algorithm.sampler(N, r) if do_sample else sorting_algorithm.generator(N):
        operation_cnts.append(count_comparisons(sorting_algorithm, val_array)[1])
        if do_sample and (len(operation_cnts) >= MAX_SAMPLES or int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS):
            break

    data = np.array(operation_cnts, dtype=np.int64)
    return ComparisonStats(int(data.min()), int(data.max()), float(data.mean()), len(data), not do_sample)


def _work(args: tuple[int, int]) -> dict:
    sorting_algorithm_idx, N = args
    sorting_algorithm = sorting_algorithms[sorting_algorithm_idx]
    stats = get_comparison_stats(sorting_algorithm, N)
    # log2(N!) comparisons are needed to tell all inputs apart
    input_total = sorting_algorithm.input_total(N)
    output_total = sorting_algorithm.output_total(N)
    lower_bound = log2(input_total) - log2(output_total)
    return {
        "name": sorting_algorithm.name,
        "N": N,
        "exhaustive": stats.exhaustive,
        "samples": stats.samples,
        "lower bound": lower_bound,
        "best": stats.best,
        "worst": stats.worst,
        "avg": stats.avg,
        "ratio": nan if input_total <= output_total else stats.avg / lower_bound,
    }


def generate_statistics(Ns: Optional[Iterable[int]] = None, processes: Optional[int] = None) -> pd.DataFrame:
    Ns = STATISTICS_NS if Ns is None else list(Ns)
    tasks = list(product(range(len(sorting_algorithms)), Ns))
    print(f"init: {len(sorting_algorithms)} algorithms, {len(Ns)} input sizes")
    with Pool(processes) as pool:
        rows = list(tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)))
    df = pd.DataFrame(rows, columns=COLUMNS).sort_values(["name", "N"], ignore_index=True)
    save_result(df)
    print(f"fin:  results written to {RESULT_DIR}")
    return df


def save_result(df: pd.DataFrame) -> None:
    "Writes the combined table and one table per algorithm next to it."
    RESULT_DIR.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(RESULT_DIR, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(RESULT_DIR.parent / f"{name}.csv", index=False)


def plot_result(df: pd.DataFrame) -> None:
    bound = df.drop_duplicates("N").assign(name="lower bound", avg=lambda x: x["lower bound"])
    fig = px.line(
        pd.concat([df, bound]),
        x="N",
        y="avg",
        color="name",
        markers=True,
        log_x=True,
        log_y=True,
        title="Average Comparison Count",
        labels={"avg": "Comparisons"},
    )
    fig.write_html(RESULT_DIR.with_suffix(".html"))


if __name__ == "__main__":
    plot_result(generate_statistics())
