from __future__ import annotations

from ..core.constants import HANDOVER_WARNING_MINUTES
from ..core.enums import AvailabilityStatus
from .model import AssignmentDecision, Availability


def can_assign_task(availability: Availability, expected_duration_minutes: int) -> AssignmentDecision:
    if availability.status == AvailabilityStatus.OFF_DUTY:
        return AssignmentDecision(can_assign=False, reason="Worker is currently off duty")

    if availability.status == AvailabilityStatus.SHIFT_BREAK:
        return AssignmentDecision(can_assign=False, reason="Worker is on a shift break")

    remaining = availability.minutes_until_state_change
    if remaining is not None and expected_duration_minutes > remaining:
        return AssignmentDecision(
            can_assign=False,
            reason=f"Task duration ({expected_duration_minutes}min) exceeds remaining shift time ({remaining}min)",
        )
    return AssignmentDecision(can_assign=True)


def needs_handover(availability: Availability, handover_minutes: int = HANDOVER_WARNING_MINUTES) -> bool:
    remaining = availability.minutes_until_state_change
    return (
        availability.status == AvailabilityStatus.AVAILABLE
        and remaining is not None
        and remaining <= handover_minutes
    )
