from __future__ import annotations

from ..common.datetime_utils import format_12h
from ..core.enums import SegmentKind
from .model import ShiftConfig, Window
from .segments import build_segments


def working_minutes(config: ShiftConfig) -> int:
    """Net minutes on duty for the day (breaks excluded)."""
    return sum(seg.window.duration for seg in build_segments(config) if seg.kind == SegmentKind.WORK)


def format_duration(minutes: int) -> str:
    hours, mins = divmod(max(int(minutes), 0), 60)
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def format_range(window: Window) -> str:
    return f"{format_12h(window.start)} - {format_12h(window.end)}"
