from hotel_ops.availability.assignment import can_assign_task, needs_handover
from hotel_ops.availability.model import Availability
from hotel_ops.core.enums import AvailabilityStatus, BreakKind


def test_handover_needed_inside_warning_window():
    assert needs_handover(Availability(status=AvailabilityStatus.AVAILABLE, minutes_until_state_change=25))
    assert needs_handover(Availability(status=AvailabilityStatus.AVAILABLE, minutes_until_state_change=30))


def test_no_handover_with_time_left():
    assert not needs_handover(Availability(status=AvailabilityStatus.AVAILABLE, minutes_until_state_change=45))


def test_no_handover_when_not_working():
    assert not needs_handover(
        Availability(
            status=AvailabilityStatus.SHIFT_BREAK,
            break_kind=BreakKind.INTRA_SHIFT,
            minutes_until_state_change=10,
        )
    )
    assert not needs_handover(Availability(status=AvailabilityStatus.OFF_DUTY, minutes_until_state_change=10))
    assert not needs_handover(Availability(status=AvailabilityStatus.AVAILABLE))


def test_handover_window_is_configurable():
    availability = Availability(status=AvailabilityStatus.AVAILABLE, minutes_until_state_change=45)

    assert needs_handover(availability, handover_minutes=60)


def test_cannot_assign_when_off_duty_or_on_break():
    off = can_assign_task(Availability(status=AvailabilityStatus.OFF_DUTY), 15)
    assert off.can_assign is False
    assert off.reason == "Worker is currently off duty"

    on_break = can_assign_task(Availability(status=AvailabilityStatus.SHIFT_BREAK, minutes_until_state_change=20), 15)
    assert on_break.can_assign is False
    assert on_break.reason == "Worker is on a shift break"


def test_task_must_fit_in_remaining_time():
    availability = Availability(status=AvailabilityStatus.AVAILABLE, minutes_until_state_change=60)

    assert can_assign_task(availability, 45).can_assign is True
    assert can_assign_task(availability, 60).can_assign is True

    too_long = can_assign_task(availability, 90)
    assert too_long.can_assign is False
    assert too_long.reason == "Task duration (90min) exceeds remaining shift time (60min)"


def test_unknown_remaining_time_allows_assignment():
    decision = can_assign_task(Availability(status=AvailabilityStatus.AVAILABLE), 240)

    assert decision.can_assign is True
    assert decision.reason is None
