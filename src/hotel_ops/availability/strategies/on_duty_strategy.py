from __future__ import annotations

from typing import Sequence

from ...common.circular_time import minutes_until_end
from ...common.datetime_utils import format_hhmm
from ...core.constants import HANDOVER_WARNING_MINUTES
from ...core.enums import AvailabilityStatus, SegmentKind
from ...shifts.model import Segment
from ..model import Availability
from .base import AvailabilityStrategy, active_segment


class OnDutyStrategy(AvailabilityStrategy):
    """Minute falls inside a WORK segment.

    The countdown stops at the segment boundary (a break or the real end of the
    shift). When the parent shift runs past it, the shift end is surfaced through
    the next-shift fields so a worker heading into lunch still sees closing time.
    """

    def __init__(self, handover_minutes: int = HANDOVER_WARNING_MINUTES):
        self._handover_minutes = int(handover_minutes)

    def decide(self, *, minute: int, segments: Sequence[Segment]) -> Availability:
        seg = active_segment(segments, minute, SegmentKind.WORK)
        if seg is None:
            raise ValueError(f"no WORK segment covers minute {minute}")

        left = minutes_until_end(minute, seg.window.start, seg.window.end)
        parent = seg.parent_window
        shift_left = minutes_until_end(minute, parent.start, parent.end)

        next_start = None
        until_next = None
        if shift_left > left:
            next_start = format_hhmm(parent.end)
            until_next = shift_left

        return Availability(
            status=AvailabilityStatus.AVAILABLE,
            current_shift_number=seg.shift_number,
            active_window=seg.window,
            minutes_until_state_change=left,
            next_shift_start=next_start,
            minutes_until_next_shift=until_next,
            is_ending_soon=0 < left <= self._handover_minutes,
        )
