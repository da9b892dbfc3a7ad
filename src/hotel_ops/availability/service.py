from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from ..common.datetime_utils import local_datetime, minute_of_day, now_local
from ..common.validators import require_positive_int
from ..core.constants import HANDOVER_WARNING_MINUTES
from ..core.enums import AvailabilityStatus
from ..core.exceptions import ValidationError
from ..schedules.repository import ScheduleOverrideRepository
from ..schedules.resolver import resolve
from ..shifts.hours import format_duration, working_minutes
from ..shifts.model import ShiftConfig
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from . import assignment
from .evaluator import evaluate_shift
from .factory import AvailabilityStrategyFactory
from .model import AssignmentDecision, Availability

_STATUS_RANK = {
    AvailabilityStatus.AVAILABLE: 0,
    AvailabilityStatus.SHIFT_BREAK: 1,
    AvailabilityStatus.OFF_DUTY: 2,
}


@dataclass(frozen=True)
class WorkerStatus:
    worker: Worker
    shift: ShiftConfig
    availability: Availability


class AvailabilityService:
    """Use case: answer "is this worker on duty right now" for the UI and task assignment."""

    def __init__(
        self,
        workers: WorkerRepository,
        overrides: ScheduleOverrideRepository,
        *,
        handover_minutes: int = HANDOVER_WARNING_MINUTES,
        fail_open: bool = True,
        default_tz_offset_minutes: Optional[int] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._workers = workers
        self._overrides = overrides
        self._handover_minutes = int(handover_minutes)
        self._fail_open = bool(fail_open)
        self._default_tz_offset = default_tz_offset_minutes
        self._clock = clock
        self._factory = AvailabilityStrategyFactory(handover_minutes=self._handover_minutes)

    def _get_worker(self, worker_id: str) -> Worker:
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise ValidationError(f"Worker {worker_id} does not exist")
        return worker

    def _instant(self, now: Optional[datetime], tz_offset_minutes: Optional[int]) -> tuple[datetime, Optional[int]]:
        offset = tz_offset_minutes if tz_offset_minutes is not None else self._default_tz_offset
        return now or self._clock(), offset

    @property
    def handover_minutes(self) -> int:
        return self._handover_minutes

    def local_date(self, *, now: Optional[datetime] = None, tz_offset_minutes: Optional[int] = None) -> date:
        """Calendar date at the worker's site, using the same clock and default offset as evaluation."""
        now, offset = self._instant(now, tz_offset_minutes)
        return local_datetime(now, offset).date()

    def shift_for_date(self, worker: Worker, work_date: date) -> ShiftConfig:
        override = self._overrides.get_for_worker_and_date(worker_id=worker.worker_id, schedule_date=work_date)
        return resolve(worker, work_date, [override] if override else [])

    def _evaluate(self, worker: Worker, now: datetime, offset: Optional[int]) -> WorkerStatus:
        local = local_datetime(now, offset)
        shift = self.shift_for_date(worker, local.date())
        availability = evaluate_shift(
            shift,
            minute_of_day(now, offset),
            fail_open=self._fail_open,
            factory=self._factory,
        )
        return WorkerStatus(worker=worker, shift=shift, availability=availability)

    def availability_for(
        self,
        worker_id: str,
        *,
        now: Optional[datetime] = None,
        tz_offset_minutes: Optional[int] = None,
    ) -> Availability:
        worker = self._get_worker(worker_id)
        now, offset = self._instant(now, tz_offset_minutes)
        return self._evaluate(worker, now, offset).availability

    def can_assign_task(
        self,
        worker_id: str,
        expected_duration_minutes: int,
        *,
        now: Optional[datetime] = None,
        tz_offset_minutes: Optional[int] = None,
    ) -> AssignmentDecision:
        duration = require_positive_int(expected_duration_minutes, "Expected duration")
        availability = self.availability_for(worker_id, now=now, tz_offset_minutes=tz_offset_minutes)
        return assignment.can_assign_task(availability, duration)

    def needs_handover(
        self,
        worker_id: str,
        *,
        now: Optional[datetime] = None,
        tz_offset_minutes: Optional[int] = None,
    ) -> bool:
        availability = self.availability_for(worker_id, now=now, tz_offset_minutes=tz_offset_minutes)
        return assignment.needs_handover(availability, self._handover_minutes)

    def roster_status(
        self,
        *,
        now: Optional[datetime] = None,
        tz_offset_minutes: Optional[int] = None,
    ) -> list[WorkerStatus]:
        """Every worker with their status: on duty first, then on break, then off duty."""
        now, offset = self._instant(now, tz_offset_minutes)
        rows = [self._evaluate(w, now, offset) for w in self._workers.list_all()]
        rows.sort(key=lambda r: (_STATUS_RANK[r.availability.status], r.worker.name.lower()))
        return rows

    def working_summary(self, worker_id: str, work_date: date) -> dict:
        worker = self._get_worker(worker_id)
        shift = self.shift_for_date(worker, work_date)
        minutes = working_minutes(shift)
        return {
            "worker_id": worker.worker_id,
            "date": work_date.strftime("%Y-%m-%d"),
            "off_duty_reason": shift.off_duty_reason.value if shift.off_duty_reason else None,
            "working_minutes": minutes,
            "working_hours": format_duration(minutes),
        }
