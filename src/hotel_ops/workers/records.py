from __future__ import annotations

from typing import Any, Mapping

from ..core.enums import Department, Role
from ..shifts.model import ShiftConfig
from ..shifts.records import break_from_fields, window_from_fields
from .model import Worker


def worker_from_record(row: Mapping[str, Any]) -> Worker:
    """Map a user row (``shift_start``/``shift_end``/``has_break``...) to a Worker."""
    secondary = window_from_fields(row, "shift_2_start", "shift_2_end")
    shift = ShiftConfig(
        primary=window_from_fields(row, "shift_start", "shift_end"),
        primary_break=break_from_fields(row, "break_start", "break_end", "has_break"),
        secondary=secondary,
        secondary_break=(
            break_from_fields(row, "shift_2_break_start", "shift_2_break_end", "shift_2_has_break")
            if secondary
            else None
        ),
    )
    return Worker(
        worker_id=str(row["id"]),
        name=str(row.get("name") or row["id"]),
        role=Role(row.get("role") or Role.WORKER.value),
        department=Department(row.get("department") or Department.HOUSEKEEPING.value),
        shift=shift,
        is_available=bool(row.get("is_available", True)),
    )
