from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import OverrideReason
from ..shifts.model import Window


@dataclass(frozen=True)
class ScheduleOverride:
    """Date-specific schedule that replaces a worker's standing shift for one day.

    ``shift``/``break_window`` are the legacy single-shift fields; ``shift_1`` and
    ``shift_2`` (with their breaks) describe dual-shift days explicitly.
    """

    override_id: int
    worker_id: str
    schedule_date: date
    shift: Optional[Window] = None
    break_window: Optional[Window] = None
    shift_1: Optional[Window] = None
    shift_1_break: Optional[Window] = None
    shift_2: Optional[Window] = None
    shift_2_break: Optional[Window] = None
    is_override: bool = False
    override_reason: Optional[OverrideReason] = None
    notes: Optional[str] = None

    @property
    def has_explicit_shifts(self) -> bool:
        return any(w is not None for w in (self.shift_1, self.shift_1_break, self.shift_2, self.shift_2_break))
