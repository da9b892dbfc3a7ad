from __future__ import annotations

from typing import Sequence

from ...common.datetime_utils import format_hhmm
from ...core.enums import AvailabilityStatus
from ...shifts.model import Segment
from ..model import Availability
from .base import AvailabilityStrategy, next_work_segment


class OffDutyStrategy(AvailabilityStrategy):
    """No segment covers the minute; report the next shift start if there is one."""

    def decide(self, *, minute: int, segments: Sequence[Segment]) -> Availability:
        upcoming = next_work_segment(segments, minute)
        if upcoming is None:
            return Availability(status=AvailabilityStatus.OFF_DUTY)

        seg, wait = upcoming
        return Availability(
            status=AvailabilityStatus.OFF_DUTY,
            minutes_until_state_change=wait,
            next_shift_number=seg.shift_number,
            next_shift_start=format_hhmm(seg.window.start),
            minutes_until_next_shift=wait,
        )
