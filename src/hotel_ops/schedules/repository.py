from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ScheduleOverride


class ScheduleOverrideRepository(Protocol):
    def get_for_worker_and_date(self, *, worker_id: str, schedule_date: date) -> Optional[ScheduleOverride]:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date, worker_id: Optional[str] = None) -> Sequence[ScheduleOverride]:
        raise NotImplementedError

    def upsert(self, override: ScheduleOverride) -> int:
        """Create or replace the override for ``(worker_id, schedule_date)``.

        Returns override_id.
        """

        raise NotImplementedError

    def delete(self, *, override_id: int) -> bool:
        raise NotImplementedError
