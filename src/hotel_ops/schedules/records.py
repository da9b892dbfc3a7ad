from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.datetime_utils import parse_iso_date
from ..core.enums import OverrideReason
from ..shifts.records import break_from_fields, window_from_fields
from .model import ScheduleOverride

logger = logging.getLogger(__name__)


def _reason(value: Any):
    if not value or value == "none":
        return None
    try:
        return OverrideReason(str(value).strip().lower())
    except ValueError:
        logger.warning("Unknown override reason %r; keeping the day off without a reason code", value)
        return None


def override_from_record(row: Mapping[str, Any]) -> ScheduleOverride:
    """Map a ``shift_schedules`` row to a ScheduleOverride."""
    is_override = bool(row.get("is_override"))
    reason = _reason(row.get("override_reason"))
    if is_override and reason is None:
        reason = OverrideReason.LEAVE

    return ScheduleOverride(
        override_id=int(row.get("id") or 0),
        worker_id=str(row["worker_id"]),
        schedule_date=parse_iso_date(str(row["schedule_date"])[:10]),
        shift=window_from_fields(row, "shift_start", "shift_end"),
        break_window=break_from_fields(row, "break_start", "break_end", "has_break"),
        shift_1=window_from_fields(row, "shift_1_start", "shift_1_end"),
        shift_1_break=window_from_fields(row, "shift_1_break_start", "shift_1_break_end"),
        shift_2=window_from_fields(row, "shift_2_start", "shift_2_end"),
        shift_2_break=window_from_fields(row, "shift_2_break_start", "shift_2_break_end"),
        is_override=is_override,
        override_reason=reason if is_override else None,
        notes=row.get("notes") or None,
    )
