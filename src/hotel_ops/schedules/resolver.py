"""Pick the ShiftConfig that applies to a worker on a given date."""
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..core.enums import OverrideReason
from ..shifts.model import ShiftConfig, Window
from ..workers.model import Worker
from .model import ScheduleOverride

logger = logging.getLogger(__name__)


def find_override(worker_id: str, work_date: date, overrides: Iterable[ScheduleOverride]) -> Optional[ScheduleOverride]:
    for o in overrides:
        if o.worker_id == worker_id and o.schedule_date == work_date:
            return o
    return None


def _config_from_mixed_row(override: ScheduleOverride) -> ShiftConfig:
    """Legacy ``shift``/``break_window`` fields combined with the ``shift_2`` fields.

    The legacy shift is shift 1. When it runs into shift 2 it is cut back to the
    break start (if the break is the gap between the shifts) or to shift 2's start.
    The legacy break is kept only when it sits inside shift 1 and is not that gap.
    """
    shift, brk, shift_2 = override.shift, override.break_window, override.shift_2
    if shift_2 is None:
        return ShiftConfig(primary=shift, primary_break=brk if brk and shift.covers(brk) else None)

    primary = shift
    if shift.overlaps(shift_2):
        if brk is not None and brk.end == shift_2.start:
            primary, brk = Window(shift.start, brk.start), None
        else:
            primary = Window(shift.start, shift_2.start)
        logger.warning(
            "Override %s for worker %s on %s: shift %s runs into shift 2 %s; using %s as shift 1",
            override.override_id,
            override.worker_id,
            override.schedule_date,
            shift,
            shift_2,
            primary,
        )

    if brk is not None and brk == Window(primary.end, shift_2.start):
        brk = None
    elif brk is not None and not primary.covers(brk):
        logger.warning(
            "Override %s for worker %s on %s: ignoring break %s outside shift 1 %s",
            override.override_id,
            override.worker_id,
            override.schedule_date,
            brk,
            primary,
        )
        brk = None

    return ShiftConfig(
        primary=primary,
        primary_break=brk,
        secondary=shift_2,
        secondary_break=override.shift_2_break,
    )


def config_from_override(override: ScheduleOverride) -> ShiftConfig:
    if override.is_override:
        return ShiftConfig(off_duty_reason=override.override_reason or OverrideReason.LEAVE)

    if override.has_explicit_shifts:
        if override.shift_1 is None and override.shift is not None:
            return _config_from_mixed_row(override)
        return ShiftConfig(
            primary=override.shift_1 or override.shift,
            primary_break=override.shift_1_break,
            secondary=override.shift_2,
            secondary_break=override.shift_2_break if override.shift_2 else None,
        )

    shift, brk = override.shift, override.break_window
    if shift is not None and brk is not None and brk.end != shift.end:
        # Legacy rows store a split day as one long shift whose "break" is the gap
        # between the two halves; rebuild shift 2 from the end of that gap.
        logger.warning(
            "Override %s for worker %s on %s: inferring second shift %s from break %s",
            override.override_id,
            override.worker_id,
            override.schedule_date,
            Window(brk.end, shift.end),
            brk,
        )
        return ShiftConfig(
            primary=Window(shift.start, brk.start),
            secondary=Window(brk.end, shift.end),
        )

    return ShiftConfig(primary=shift, primary_break=brk)


def resolve(worker: Worker, work_date: date, overrides: Iterable[ScheduleOverride]) -> ShiftConfig:
    """Day config for ``worker``: the date override if any, else the standing shift."""
    override = find_override(worker.worker_id, work_date, overrides)
    if override is None:
        return worker.shift
    return config_from_override(override)
