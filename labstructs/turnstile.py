"""Smallest number of people consistent with a turnstile log."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, List, Optional, Sequence

EXIT = -1


def min_people(changes: Iterable[int]) -> int:
    """Count the fewest people needed to explain the passages.

    A value of -1 is an exit; any other value is an entry.
    """
    answer = 0
    exits = 0
    entries = 0
    for change in changes:
        if change == EXIT:
            exits += 1
            if entries > 0:
                entries -= 1
            else:
                answer += 1
        else:
            entries += 1
            if exits > 0:
                exits -= 1
            else:
                answer += 1
    return answer


def _take(numbers: Iterator[int]) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise ValueError("input ends before all cases are read") from None


def solve_cases(text: str) -> List[int]:
    """Solve every case of ``text``: a case count, then per case N and N values."""
    try:
        numbers = iter([int(token) for token in text.split()])
    except ValueError as exc:
        raise ValueError(f"input holds a non-integer value: {exc}") from exc
    cases = _take(numbers)
    results = []
    for _ in range(cases):
        count = _take(numbers)
        results.append(min_people([_take(numbers) for _ in range(count)]))
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read cases from a file and write ``Case #t: answer`` lines to another."""
    parser = argparse.ArgumentParser(
        prog="labstructs-turnstile", description="Solve turnstile cases."
    )
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("output", nargs="?", default="output.txt")
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as source:
            results = solve_cases(source.read())
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    with open(args.output, "w", encoding="utf-8") as target:
        for number, answer in enumerate(results, start=1):
            target.write(f"Case #{number}: {answer}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())