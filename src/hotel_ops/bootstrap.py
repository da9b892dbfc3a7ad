"""Load development seed data (workers and schedule overrides) from JSON."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Tuple

from .schedules.model import ScheduleOverride
from .schedules.records import override_from_record
from .workers.model import Worker
from .workers.records import worker_from_record

logger = logging.getLogger(__name__)


def load_seed_file(path: Path) -> Tuple[List[Worker], List[ScheduleOverride]]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    workers = [worker_from_record(row) for row in data.get("workers", [])]
    overrides = [override_from_record(row) for row in data.get("shift_schedules", [])]
    logger.info("Seed %s: %d workers, %d schedule overrides", path, len(workers), len(overrides))
    return workers, overrides
