"""Project a minute of the day onto a worker's segments.

Pure functions: the result depends only on the arguments, so callers can poll
as often as they like (UI widgets re-evaluate every 30 seconds).
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import MINUTES_PER_DAY
from ..core.enums import AvailabilityStatus
from ..shifts.model import Segment, ShiftConfig
from ..shifts.segments import build_segments
from .factory import AvailabilityStrategyFactory
from .model import Availability

logger = logging.getLogger(__name__)

_DEFAULT_FACTORY = AvailabilityStrategyFactory()


def evaluate(
    segments: Sequence[Segment],
    minute: int,
    *,
    factory: Optional[AvailabilityStrategyFactory] = None,
) -> Availability:
    minute = int(minute) % MINUTES_PER_DAY
    strategy = (factory or _DEFAULT_FACTORY).for_minute(segments=segments, minute=minute)
    return strategy.decide(minute=minute, segments=segments)


def evaluate_shift(
    config: Optional[ShiftConfig],
    minute: int,
    *,
    fail_open: bool = True,
    factory: Optional[AvailabilityStrategyFactory] = None,
) -> Availability:
    """Evaluate a resolved day config, applying the off-duty and missing-shift rules.

    A config with no primary shift is reported AVAILABLE without timing when
    ``fail_open`` is set, otherwise OFF_DUTY. Either way a warning is logged.
    """
    if config is not None and config.is_off_duty:
        return Availability(status=AvailabilityStatus.OFF_DUTY)

    if config is None or config.primary is None:
        if fail_open:
            logger.warning("No primary shift configured; reporting worker as available")
            return Availability(status=AvailabilityStatus.AVAILABLE)
        logger.warning("No primary shift configured; reporting worker as off duty")
        return Availability(status=AvailabilityStatus.OFF_DUTY)

    return evaluate(build_segments(config), minute, factory=factory)
