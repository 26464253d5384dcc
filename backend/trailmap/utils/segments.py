"""
TrailMap Segment Utilities
Partition a route's coordinates between its declared days
"""

from typing import NamedTuple


class DayRange(NamedTuple):
    """Inclusive index range of one day's coordinates."""

    start_index: int
    end_index: int

    def is_valid_for(self, total: int) -> bool:
        """True when both ends point at an existing coordinate."""
        return 0 <= self.start_index <= self.end_index < total


def points_per_day(total: int, day_count: int) -> int:
    if day_count < 1:
        raise ValueError(f"day_count must be at least 1, got {day_count}")
    return max(total, 0) // day_count


def day_index_ranges(total: int, day_count: int) -> list[DayRange]:
    """
    Split `total` coordinates into `day_count` contiguous index ranges.

    Every day gets floor(total / day_count) points; the last day absorbs
    the remainder. With fewer points than days some ranges come out
    invalid (start > end) and must be skipped by the caller.

    Args:
        total: Number of coordinates in the route
        day_count: Number of declared days

    Returns:
        One DayRange per day, in day order
    """
    per_day = points_per_day(total, day_count)
    ranges = []

    for i in range(day_count):
        start = i * per_day
        if i == day_count - 1:
            end = total - 1
        else:
            end = (i + 1) * per_day - 1
        ranges.append(DayRange(start, end))

    return ranges


def day_slice_bounds(total: int, day_count: int) -> list[tuple[int, int]]:
    """
    Slice bounds for drawing each day as its own polyline.

    Unlike day_index_ranges, the upper bound is inclusive of the next day's
    first point so adjacent day lines touch. Use as
    `coordinates[start:stop + 1]`.
    """
    per_day = points_per_day(total, day_count)
    bounds = []

    for i in range(day_count):
        start = i * per_day
        stop = total if i == day_count - 1 else (i + 1) * per_day
        bounds.append((start, stop))

    return bounds
