"""Turn a ShiftConfig into an ordered list of WORK/BREAK segments."""
from __future__ import annotations

from typing import List, Optional

from ..core.enums import BreakKind, SegmentKind
from .model import Segment, ShiftConfig, Window


def _expand_shift(shift: Window, shift_break: Optional[Window], shift_number: int) -> List[Segment]:
    if shift.is_empty:
        return []

    if shift_break is None:
        return [Segment(SegmentKind.WORK, shift_number, shift, shift)]

    parts = [
        Segment(SegmentKind.WORK, shift_number, Window(shift.start, shift_break.start), shift),
        Segment(SegmentKind.BREAK, shift_number, shift_break, shift, BreakKind.INTRA_SHIFT),
        Segment(SegmentKind.WORK, shift_number, Window(shift_break.end, shift.end), shift),
    ]
    return [seg for seg in parts if not seg.window.is_empty]


def build_segments(config: ShiftConfig) -> List[Segment]:
    """Segments in chronological order, starting from the primary shift.

    The gap between shift 1 and shift 2 becomes an INTER_SHIFT break numbered
    after the shift it leads into; its parent window is the gap itself.
    """
    if config.primary is None or config.is_off_duty:
        return []

    segments = _expand_shift(config.primary, config.primary_break, 1)

    secondary = config.secondary
    if secondary is None:
        return segments

    if config.primary.end != secondary.start:
        gap = Window(config.primary.end, secondary.start)
        segments.append(Segment(SegmentKind.BREAK, 2, gap, gap, BreakKind.INTER_SHIFT))

    segments.extend(_expand_shift(secondary, config.secondary_break, 2))
    return segments
