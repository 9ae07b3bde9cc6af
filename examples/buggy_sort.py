"""Catching a planted bug in a sorting function.

quicksort() below is a randomized quicksort with a deliberate defect:
at the top level, a list of at most three elements whose first element
is smaller than its last is returned unchanged. for_all() finds an input
that exposes it, and a reporter prints where the output goes wrong.

The script also checks idempotent sorting, which always holds, and float
distributivity, which rounding can break on any trial.

Python 3.13+.
"""

from __future__ import annotations

import logging
import random

from propcheck import RandomSource, TrialReport, for_all, generate, lists

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

source = RandomSource(seed=1234)

# Pivot choices use their own stream, separate from the generators' source
pivots = random.Random(99)


def quicksort(values: list[int], *, nested: bool = False) -> list[int]:
    """Sort values ascending. Contains a planted bug for short lists."""
    if not nested and 0 < len(values) <= 3 and values[0] < values[-1]:
        return values
    if len(values) <= 1:
        return values
    pivot = values[pivots.randrange(len(values))]
    smaller = [value for value in values if value < pivot]
    equal = [value for value in values if value == pivot]
    larger = [value for value in values if value > pivot]
    return quicksort(smaller, nested=True) + equal + quicksort(larger, nested=True)


def print_report(report: TrialReport) -> None:
    print(
        f"{report.passed!s:<6}\t{report.requested_trials:<6} "
        f"{report.completed_trials:<6} {report.failure_repr or ''}"
    )


def idempotent_sort(values: list[int]) -> bool:
    return sorted(values) == sorted(sorted(values))


def expanding_float(a: float, b: float, c: float) -> bool:
    return a * (b + c) == a * b + a * c


float_unit = generate(float, -1.0, 1.0, source=source)


def small_float() -> float:
    return float_unit()


def sort_properties(values: list[int]) -> bool:
    """Sorted output keeps its length and is ascending."""
    result = quicksort(list(values))
    preserves_length = len(result) == len(values)
    ascending = all(left <= right for left, right in zip(result, result[1:], strict=False))
    if not preserves_length:
        print(">> Length is not preserved")
    if not ascending:
        print(">> The sorted list is not in ascending order")
    return preserves_length and ascending


def sort_reporter(values: list[int]) -> None:
    """Print the first out-of-order pair in the sorted output."""
    result = quicksort(list(values))
    for index, (left, right) in enumerate(zip(result, result[1:], strict=False)):
        if left > right:
            print(f"At index {index} of the 'sorted' list: {[left, right]}")
            return


def main() -> None:
    print("idempotent sorting on lists of int")
    print_report(for_all(idempotent_sort, list[int], source=source))

    print("\nexpanding_float on three generated floats")
    floats = generate(float, source=source)
    print_report(for_all(expanding_float, floats, floats, floats, trials=10_000, source=source))

    print("\nexpanding_float on three small floats")
    print_report(
        for_all(expanding_float, small_float, small_float, small_float, trials=5, source=source)
    )

    print("\nquicksort on lists of at most 1000 integers in [-400, 400]")
    report = for_all(
        sort_properties,
        lists(generate(int, -400, 400, source=source), 1000, source=source),
        trials=10_000,
        reporter=sort_reporter,
        source=source,
    )
    print_report(report)


if __name__ == "__main__":
    main()
