from __future__ import annotations

from typing import Sequence

from ...common.circular_time import minutes_until_end
from ...common.datetime_utils import format_hhmm
from ...core.enums import AvailabilityStatus, BreakKind, SegmentKind
from ...shifts.model import Segment
from ..model import Availability
from .base import AvailabilityStrategy, active_segment, next_work_segment


class BreakStrategy(AvailabilityStrategy):
    """Minute falls inside a scheduled break."""

    def decide(self, *, minute: int, segments: Sequence[Segment]) -> Availability:
        seg = active_segment(segments, minute, SegmentKind.BREAK)
        if seg is None:
            raise ValueError(f"no BREAK segment covers minute {minute}")

        left = minutes_until_end(minute, seg.window.start, seg.window.end)

        if seg.break_kind == BreakKind.INTER_SHIFT:
            # The gap ends exactly where the next shift begins.
            return Availability(
                status=AvailabilityStatus.SHIFT_BREAK,
                active_window=seg.window,
                break_kind=BreakKind.INTER_SHIFT,
                minutes_until_state_change=left,
                next_shift_number=seg.shift_number,
                next_shift_start=format_hhmm(seg.window.end),
                minutes_until_next_shift=left,
            )

        upcoming = next_work_segment(segments, minute)
        return Availability(
            status=AvailabilityStatus.SHIFT_BREAK,
            current_shift_number=seg.shift_number,
            active_window=seg.window,
            break_kind=seg.break_kind,
            minutes_until_state_change=left,
            next_shift_number=upcoming[0].shift_number if upcoming else None,
            next_shift_start=format_hhmm(upcoming[0].window.start) if upcoming else None,
            minutes_until_next_shift=upcoming[1] if upcoming else None,
        )
