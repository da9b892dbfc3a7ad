from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Iterable, Optional, Sequence

from .model import ScheduleOverride
from .repository import ScheduleOverrideRepository


class InMemoryScheduleOverrideRepository(ScheduleOverrideRepository):
    def __init__(self, overrides: Iterable[ScheduleOverride] = ()):
        self._by_key: dict[tuple[str, date], ScheduleOverride] = {}
        self._next_id = 1
        for o in overrides:
            self.upsert(o)

    def get_for_worker_and_date(self, *, worker_id: str, schedule_date: date) -> Optional[ScheduleOverride]:
        return self._by_key.get((worker_id, schedule_date))

    def list_range(self, *, start: date, end: date, worker_id: Optional[str] = None) -> Sequence[ScheduleOverride]:
        items = [
            o
            for o in self._by_key.values()
            if start <= o.schedule_date <= end and (worker_id is None or o.worker_id == worker_id)
        ]
        items.sort(key=lambda o: (o.schedule_date, o.worker_id))
        return items

    def upsert(self, override: ScheduleOverride) -> int:
        key = (override.worker_id, override.schedule_date)
        existing = self._by_key.get(key)
        if existing:
            override_id = existing.override_id
        elif override.override_id > 0:
            override_id = override.override_id
        else:
            override_id = self._next_id
        self._next_id = max(self._next_id, override_id + 1)
        self._by_key[key] = replace(override, override_id=override_id)
        return override_id

    def delete(self, *, override_id: int) -> bool:
        for key, o in list(self._by_key.items()):
            if o.override_id == override_id:
                del self._by_key[key]
                return True
        return False
