from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.validators import require_non_empty
from ..core.enums import OverrideReason, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..shifts.model import Window
from ..shifts.validators import validate_dual_shift
from .model import ScheduleOverride
from .repository import ScheduleOverrideRepository

SCHEDULE_EDITORS = frozenset({Role.SUPERVISOR, Role.FRONT_OFFICE, Role.ADMIN})


class ScheduleService:
    """Use case: edit date-specific schedules (shift changes and days off)."""

    def __init__(self, overrides: ScheduleOverrideRepository):
        self._overrides = overrides

    @staticmethod
    def _require_editor(current_role: Role) -> None:
        if current_role not in SCHEDULE_EDITORS:
            raise AuthorizationError("You are not allowed to edit schedules")

    def save_override(
        self,
        *,
        current_role: Role,
        worker_id: str,
        schedule_date: date,
        shift_1: Window,
        shift_1_break: Optional[Window] = None,
        shift_2: Optional[Window] = None,
        shift_2_break: Optional[Window] = None,
        notes: Optional[str] = None,
    ) -> int:
        self._require_editor(current_role)
        worker_id = require_non_empty(worker_id, "Worker")

        result = validate_dual_shift(shift_1, shift_1_break, shift_2, shift_2_break)
        if not result.valid:
            raise ValidationError(result.reason or "Invalid shift configuration")

        return self._overrides.upsert(
            ScheduleOverride(
                override_id=0,
                worker_id=worker_id,
                schedule_date=schedule_date,
                shift_1=shift_1,
                shift_1_break=shift_1_break,
                shift_2=shift_2,
                shift_2_break=shift_2_break,
                notes=notes.strip() if notes else None,
            )
        )

    def mark_off_duty(
        self,
        *,
        current_role: Role,
        worker_id: str,
        schedule_date: date,
        reason: OverrideReason = OverrideReason.LEAVE,
        notes: Optional[str] = None,
    ) -> int:
        self._require_editor(current_role)
        worker_id = require_non_empty(worker_id, "Worker")
        return self._overrides.upsert(
            ScheduleOverride(
                override_id=0,
                worker_id=worker_id,
                schedule_date=schedule_date,
                is_override=True,
                override_reason=reason,
                notes=notes.strip() if notes else None,
            )
        )

    def delete(self, *, current_role: Role, override_id: int) -> None:
        self._require_editor(current_role)

        if not self._overrides.delete(override_id=int(override_id)):
            raise ValidationError("Schedule override not found")
