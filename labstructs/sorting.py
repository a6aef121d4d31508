"""Bubble sort variants that count comparisons, and a benchmark comparing them."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

MAX_SIZE = 250_000
"""Largest array size accepted by the benchmark."""

DEFAULT_SEED = 2

SortResult = Tuple[List[int], int]


def _sweep(data: List[int], limit: int) -> Tuple[int, bool]:
    """Compare neighbours ``data[j], data[j + 1]`` for ``j < limit``.

    Returns the number of comparisons made and whether anything was swapped.
    """
    swapped = False
    for j in range(limit):
        if data[j] > data[j + 1]:
            data[j], data[j + 1] = data[j + 1], data[j]
            swapped = True
    return max(limit, 0), swapped


def bubble_sort(values: Iterable[int]) -> SortResult:
    """Plain bubble sort: every pass scans the whole array."""
    data = list(values)
    n = len(data)
    comparisons = 0
    for _ in range(n - 1):
        made, _swapped = _sweep(data, n - 1)
        comparisons += made
    return data, comparisons


def bubble_sort_shrinking(values: Iterable[int]) -> SortResult:
    """Bubble sort that skips the already sorted tail on each pass."""
    data = list(values)
    n = len(data)
    comparisons = 0
    for i in range(n - 1):
        made, _swapped = _sweep(data, n - 1 - i)
        comparisons += made
    return data, comparisons


def bubble_sort_early_exit(values: Iterable[int]) -> SortResult:
    """Bubble sort that stops after a pass with no swaps."""
    data = list(values)
    n = len(data)
    comparisons = 0
    for _ in range(n - 1):
        made, swapped = _sweep(data, n - 1)
        comparisons += made
        if not swapped:
            break
    return data, comparisons


def bubble_sort_optimized(values: Iterable[int]) -> SortResult:
    """Bubble sort with both the shrinking tail and the early exit."""
    data = list(values)
    n = len(data)
    comparisons = 0
    for i in range(n - 1):
        made, swapped = _sweep(data, n - 1 - i)
        comparisons += made
        if not swapped:
            break
    return data, comparisons


_VARIANTS: Tuple[Tuple[str, Callable[[Iterable[int]], SortResult]], ...] = (
    ("Alg1", bubble_sort),
    ("Alg1_impr_i", bubble_sort_early_exit),
    ("Alg1_impr_j", bubble_sort_shrinking),
    ("Alg1_impr", bubble_sort_optimized),
)


@dataclass(frozen=True)
class VariantStats:
    """Averages for one variant over all repetitions.

    ``gain`` is the mean number of comparisons saved with respect to the
    plain variant.
    """

    name: str
    mean_seconds: float
    mean_comparisons: float
    gain: float


def _run(
    size: int,
    repetitions: int,
    seed: int,
    report: Optional[Callable[[str, List[int]], None]] = None,
) -> List[VariantStats]:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size > MAX_SIZE:
        raise ValueError(f"maximum allowed size is {MAX_SIZE}")
    if repetitions <= 0:
        raise ValueError(f"repetitions must be positive, got {repetitions}")

    rng = random.Random(seed)
    seconds = {name: 0.0 for name, _ in _VARIANTS}
    comparisons = {name: 0 for name, _ in _VARIANTS}
    for _ in range(repetitions):
        values = [rng.randrange(100) for _ in range(size)]
        if report:
            report("input", values)
        for name, sort in _VARIANTS:
            start = time.perf_counter()
            result, made = sort(values)
            seconds[name] += time.perf_counter() - start
            comparisons[name] += made
            if report:
                report(name, result)

    baseline = comparisons[_VARIANTS[0][0]]
    return [
        VariantStats(
            name=name,
            mean_seconds=seconds[name] / repetitions,
            mean_comparisons=comparisons[name] / repetitions,
            gain=(baseline - comparisons[name]) / repetitions,
        )
        for name, _ in _VARIANTS
    ]


def compare_variants(size: int, repetitions: int, seed: int) -> List[VariantStats]:
    """Sort ``repetitions`` random arrays of ``size`` values in 0..99 with each variant."""
    return _run(size, repetitions, seed)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the comparison and print mean times and comparison counts."""
    parser = argparse.ArgumentParser(
        prog="labstructs-sorting", description="Compare bubble sort variants."
    )
    parser.add_argument("size", type=int, help="array size")
    parser.add_argument("verbosity", type=int, help="non-zero prints every array")
    parser.add_argument("repetitions", type=int, help="number of repetitions")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    args = parser.parse_args(argv)

    def show(_label: str, values: List[int]) -> None:
        print(" ".join(str(value) for value in values))

    try:
        stats = _run(
            args.size, args.repetitions, args.seed, show if args.verbosity else None
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    base, *others = stats
    print(f"Execution time of {base.name}: {base.mean_seconds:f}")
    print(f"\t Mean comparisons: {base.mean_comparisons:.3e}")
    for entry in others:
        print(f"Execution time of {entry.name}: {entry.mean_seconds:f}")
        print(
            f"\t Mean comparisons: {entry.mean_comparisons:.3e}, "
            f"gain {entry.gain:.3e}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())