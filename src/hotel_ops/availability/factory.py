from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.constants import HANDOVER_WARNING_MINUTES
from ..core.enums import SegmentKind
from ..shifts.model import Segment
from .strategies.base import AvailabilityStrategy, active_segment
from .strategies.break_strategy import BreakStrategy
from .strategies.off_duty_strategy import OffDutyStrategy
from .strategies.on_duty_strategy import OnDutyStrategy


@dataclass
class AvailabilityStrategyFactory:
    """Factory Pattern: choose the strategy for the segment covering ``minute``.

    WORK wins over BREAK if a malformed config makes them overlap.
    """

    handover_minutes: int = HANDOVER_WARNING_MINUTES

    def for_minute(self, *, segments: Sequence[Segment], minute: int) -> AvailabilityStrategy:
        if active_segment(segments, minute, SegmentKind.WORK):
            return OnDutyStrategy(self.handover_minutes)
        if active_segment(segments, minute, SegmentKind.BREAK):
            return BreakStrategy()
        return OffDutyStrategy()
