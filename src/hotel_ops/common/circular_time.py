"""Minute-of-day arithmetic on a 24h clock face.

Every value is an int in ``[0, 1440)``. A window ``(start, end)`` is half-open and
wraps past midnight when ``end < start``; ``start == end`` is the empty window.
"""
from __future__ import annotations

from typing import List, Tuple

from ..core.constants import MINUTES_PER_DAY

Range = Tuple[int, int]


def forward_diff(a: int, b: int) -> int:
    """Minutes walked forward on the clock from ``a`` to ``b``."""
    return (b - a) % MINUTES_PER_DAY


def in_range(minute: int, start: int, end: int) -> bool:
    if start == end:
        return False
    if start < end:
        return start <= minute < end
    return minute >= start or minute < end


def duration(start: int, end: int) -> int:
    if end > start:
        return end - start
    return MINUTES_PER_DAY - start + end


def minutes_until_end(minute: int, start: int, end: int) -> int:
    """Minutes left before ``end``; 0 unless ``minute`` is inside the window."""
    if not in_range(minute, start, end):
        return 0
    return forward_diff(minute, end)


def minutes_until_start(minute: int, start: int, end: int) -> int:
    """Minutes until the window next opens; 0 while inside it."""
    if in_range(minute, start, end):
        return 0
    return forward_diff(minute, start)


def expand(start: int, end: int) -> List[Range]:
    """Split a window into non-wrapping ranges usable with :func:`overlaps`."""
    if start == end:
        return []
    if start < end:
        return [(start, end)]
    parts = [(start, MINUTES_PER_DAY)]
    if end > 0:
        parts.append((0, end))
    return parts


def overlaps(range_a: Range, range_b: Range) -> bool:
    return range_a[0] < range_b[1] and range_b[0] < range_a[1]
