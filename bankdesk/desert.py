"""Meeting point for a group in the desert and the oasis nearest to it."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence


def quick_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` using a last-element pivot quicksort."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items


def _quick_sort(items: list[int], low: int, high: int) -> None:
    if low < high:
        pivot_index = _partition(items, low, high)
        _quick_sort(items, low, pivot_index - 1)
        _quick_sort(items, pivot_index + 1, high)


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for current in range(low, high):
        if items[current] <= pivot:
            boundary += 1
            items[boundary], items[current] = items[current], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def nearest_value(
    values: Sequence[int], target: int, low: int = 0, high: Optional[int] = None
) -> int:
    """Binary-search sorted ``values`` for ``target`` or the value closest to it."""
    if not values:
        raise ValueError("no values to search")
    if high is None:
        high = len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return values[mid]
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    best = values[min(low, len(values) - 1)]
    if high >= 0 and low < len(values):
        if abs(values[high] - target) < abs(values[low] - target):
            best = values[high]
    return best


class Group:
    """Three people on a line who look for the point that minimises walking."""

    def __init__(self, positions: Sequence[int]) -> None:
        if len(positions) != 3:
            raise ValueError("a group holds exactly three positions")
        self.positions = list(positions)
        self.median = 0
        self.distance = 0

    def find_median(self) -> int:
        """Sort the positions and return the middle one."""
        self.positions = quick_sort(self.positions)
        self.median = self.positions[1]
        return self.median

    def total_distance(self) -> int:
        """Return the sum of the distances from every position to the median."""
        self.distance = sum(abs(self.median - value) for value in self.positions)
        return self.distance


class Oasis:
    """A set of oasis positions that can be searched for the nearest one."""

    def __init__(self, positions: Sequence[int]) -> None:
        self.positions = list(positions)

    def sort(self) -> None:
        """Sort the positions so they can be binary searched."""
        self.positions = quick_sort(self.positions)

    def nearest(self, point: int) -> tuple[int, int]:
        """Return the nearest oasis to ``point`` and the distance to it."""
        closest = nearest_value(self.positions, point)
        return closest, abs(point - closest)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find the meeting point of a group and the nearest oasis."
    )
    parser.add_argument("--group", nargs=3, type=int, default=[-5, 3, 10])
    parser.add_argument("--oasis", nargs="+", type=int, default=[-6, 0, 9, 15])
    args = parser.parse_args(argv)

    group = Group(args.group)
    group.find_median()
    group.total_distance()
    print(f"Punto de encuentro: {group.median}")
    print(f"Distancia total: {group.distance}")

    oasis = Oasis(args.oasis)
    oasis.sort()
    closest, distance = oasis.nearest(group.median)
    print(f"Oasis más cercano: {closest} a distancia {distance}")
    return 0


if __name__ == "__main__":
    sys.exit(main())