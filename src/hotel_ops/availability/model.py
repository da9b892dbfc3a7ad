from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import format_hhmm
from ..core.enums import AvailabilityStatus, BreakKind
from ..shifts.model import Window


@dataclass(frozen=True)
class Availability:
    """Evaluator output for one worker at one minute of the day.

    ``minutes_until_state_change`` counts down to the next status flip (end of
    the current work/break segment, or start of the next shift when off duty).
    """

    status: AvailabilityStatus
    current_shift_number: Optional[int] = None
    active_window: Optional[Window] = None
    break_kind: Optional[BreakKind] = None
    minutes_until_state_change: Optional[int] = None
    next_shift_number: Optional[int] = None
    next_shift_start: Optional[str] = None
    minutes_until_next_shift: Optional[int] = None
    is_ending_soon: bool = False

    def to_dict(self) -> dict:
        window = self.active_window
        return {
            "status": self.status.value,
            "current_shift_number": self.current_shift_number,
            "active_window": {"start": format_hhmm(window.start), "end": format_hhmm(window.end)} if window else None,
            "break_kind": self.break_kind.value if self.break_kind else None,
            "minutes_until_state_change": self.minutes_until_state_change,
            "next_shift_number": self.next_shift_number,
            "next_shift_start": self.next_shift_start,
            "minutes_until_next_shift": self.minutes_until_next_shift,
            "is_ending_soon": self.is_ending_soon,
        }


@dataclass(frozen=True)
class AssignmentDecision:
    can_assign: bool
    reason: Optional[str] = None
