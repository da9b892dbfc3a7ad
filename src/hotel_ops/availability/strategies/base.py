from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

from ...common.circular_time import minutes_until_start
from ...core.enums import SegmentKind
from ...shifts.model import Segment
from ..model import Availability


def active_segment(segments: Sequence[Segment], minute: int, kind: SegmentKind) -> Optional[Segment]:
    for seg in segments:
        if seg.kind == kind and seg.window.contains(minute):
            return seg
    return None


def next_work_segment(segments: Sequence[Segment], minute: int) -> Optional[Tuple[Segment, int]]:
    """Nearest WORK segment that has not started yet, with the minutes until it does."""
    best: Optional[Tuple[Segment, int]] = None
    for seg in segments:
        if seg.kind != SegmentKind.WORK:
            continue
        wait = minutes_until_start(minute, seg.window.start, seg.window.end)
        if wait <= 0:
            continue
        if best is None or wait < best[1]:
            best = (seg, wait)
    return best


class AvailabilityStrategy(ABC):
    """Strategy Pattern: encapsulate how a status is reported for one kind of minute."""

    @abstractmethod
    def decide(self, *, minute: int, segments: Sequence[Segment]) -> Availability:
        raise NotImplementedError
