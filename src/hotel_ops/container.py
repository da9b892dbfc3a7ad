from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .availability.service import AvailabilityService
from .bootstrap import load_seed_file
from .core.constants import HANDOVER_WARNING_MINUTES
from .schedules.memory_schedule_repository import InMemoryScheduleOverrideRepository
from .schedules.service import ScheduleService
from .workers.memory_worker_repository import InMemoryWorkerRepository


@dataclass(frozen=True)
class Container:
    workers_repo: InMemoryWorkerRepository
    overrides_repo: InMemoryScheduleOverrideRepository

    availability_service: AvailabilityService
    schedule_service: ScheduleService


def build_container(
    *,
    seed_file: Optional[str] = None,
    handover_minutes: int = HANDOVER_WARNING_MINUTES,
    fail_open: bool = True,
    default_tz_offset_minutes: Optional[int] = None,
) -> Container:
    workers, overrides = [], []
    if seed_file:
        workers, overrides = load_seed_file(Path(seed_file))

    workers_repo = InMemoryWorkerRepository(workers)
    overrides_repo = InMemoryScheduleOverrideRepository(overrides)

    availability_service = AvailabilityService(
        workers_repo,
        overrides_repo,
        handover_minutes=handover_minutes,
        fail_open=fail_open,
        default_tz_offset_minutes=default_tz_offset_minutes,
    )
    schedule_service = ScheduleService(overrides_repo)

    return Container(
        workers_repo=workers_repo,
        overrides_repo=overrides_repo,
        availability_service=availability_service,
        schedule_service=schedule_service,
    )
