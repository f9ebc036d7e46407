"""Merge sort of non-negative integers, timed on a list and on a deque."""

from __future__ import annotations

import heapq
import re
import sys
import time
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1


def _atoi(text: str) -> int:
    """Read a leading integer the way the C library does; 0 if there is none."""
    match = _INTEGER.match(text)
    if match is None:
        return 0
    number = min(max(int(match.group(1)), _LONG_MIN), _LONG_MAX)
    return (number + (1 << 31)) % (1 << 32) - (1 << 31)


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Convert arguments to integers, rejecting negative ones."""
    numbers = []
    for arg in args:
        number = _atoi(arg)
        if number < 0:
            raise ValueError("Negative numbers are not allowed.")
        numbers.append(number)
    return numbers


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order using a stable top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) + 1) // 2
    return list(heapq.merge(merge_sort(items[:middle]), merge_sort(items[middle:])))


def _microseconds() -> int:
    return time.process_time_ns() // 1000


@dataclass(frozen=True)
class SortReport:
    """The input, the sorted result and the time each container took."""

    before: tuple[int, ...]
    after: tuple[int, ...]
    vector_time: int
    deque_time: int

    def format(self) -> str:
        before = "".join(f" {number}" for number in self.before)
        after = "".join(f" {number}" for number in self.after)
        return (
            f"Before sorting:{before}\n"
            f"After sorting:{after}\n"
            f"Time taken for vector: {self.vector_time} microseconds\n"
            f"Time taken for deque: {self.deque_time} microseconds"
        )


def sort_and_time(numbers: Sequence[int]) -> SortReport:
    """Sort the numbers once as a list and once as a deque, timing each."""
    as_list = list(numbers)
    as_deque = deque(numbers)

    start = _microseconds()
    as_list = merge_sort(as_list)
    vector_time = _microseconds() - start

    start = _microseconds()
    as_deque = deque(merge_sort(as_deque))
    deque_time = _microseconds() - start

    return SortReport(
        before=tuple(numbers),
        after=tuple(as_deque),
        vector_time=vector_time,
        deque_time=deque_time,
    )


def main(argv=None) -> int:
    """Sort the numbers given as arguments and report the timings."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Error: No arguments provided.", file=sys.stderr)
        return 1
    try:
        numbers = parse_numbers(args)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(sort_and_time(numbers).format())
    return 0