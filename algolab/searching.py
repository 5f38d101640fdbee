"""Searching sorted data, finding a peak and finding extreme values."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Extremes:
    """Smallest and largest values, with the next distinct ones when they exist."""

    minimum: Any
    maximum: Any
    second_minimum: Optional[Any]
    second_maximum: Optional[Any]

    @property
    def has_seconds(self):
        """True when both a distinct second minimum and second maximum exist."""
        return self.second_minimum is not None and self.second_maximum is not None


def binary_search(items, target):
    """Return an index of ``target`` in the ascending sequence ``items``, or None."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return None


def find_peak(items):
    """Return the first index whose value is larger than both neighbours."""
    sequence = list(items)
    for index, (before, value, after) in enumerate(
        zip(sequence, sequence[1:], sequence[2:]), start=1
    ):
        if before < value > after:
            return index
    raise ValueError("sequence has no peak")


def find_extremes(items):
    """Find minimum, maximum and the distinct second minimum and maximum in one pass."""
    iterator = iter(items)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("Array should have at least two elements.") from None
    minimum = maximum = first
    second_min = second_max = None
    count = 1
    for value in iterator:
        count += 1
        if value < minimum:
            second_min, minimum = minimum, value
        elif value != minimum and (second_min is None or value < second_min):
            second_min = value
        if value > maximum:
            second_max, maximum = maximum, value
        elif value != maximum and (second_max is None or value > second_max):
            second_max = value
    if count < 2:
        raise ValueError("Array should have at least two elements.")
    return Extremes(minimum, maximum, second_min, second_max)