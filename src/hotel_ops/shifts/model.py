from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common import circular_time
from ..common.datetime_utils import format_hhmm
from ..core.enums import BreakKind, OverrideReason, SegmentKind


@dataclass(frozen=True)
class Window:
    """Half-open time-of-day range ``[start, end)`` in minutes since midnight."""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def wraps_midnight(self) -> bool:
        return self.end < self.start

    @property
    def duration(self) -> int:
        return circular_time.duration(self.start, self.end)

    def contains(self, minute: int) -> bool:
        return circular_time.in_range(minute, self.start, self.end)

    def covers(self, other: Window) -> bool:
        """True when ``other`` lies entirely inside this window."""
        if self.is_empty or other.is_empty:
            return False
        offset = circular_time.forward_diff(self.start, other.start)
        return offset < self.duration and offset + other.duration <= self.duration

    def overlaps(self, other: Window) -> bool:
        return any(
            circular_time.overlaps(a, b)
            for a in circular_time.expand(self.start, self.end)
            for b in circular_time.expand(other.start, other.end)
        )

    def __str__(self) -> str:
        return f"{format_hhmm(self.start)}-{format_hhmm(self.end)}"


@dataclass(frozen=True)
class ShiftConfig:
    """Domain entity: one worker's shift layout for a single day.

    A break is either a full Window or None. ``off_duty_reason`` is set when a
    date override takes the worker off for the whole day.
    """

    primary: Optional[Window] = None
    primary_break: Optional[Window] = None
    secondary: Optional[Window] = None
    secondary_break: Optional[Window] = None
    off_duty_reason: Optional[OverrideReason] = None

    @property
    def is_off_duty(self) -> bool:
        return self.off_duty_reason is not None

    @property
    def is_dual_shift(self) -> bool:
        return self.primary is not None and self.secondary is not None


@dataclass(frozen=True)
class Segment:
    """Derived WORK/BREAK interval; rebuilt on every evaluation."""

    kind: SegmentKind
    shift_number: int
    window: Window
    parent_window: Window
    break_kind: Optional[BreakKind] = None
