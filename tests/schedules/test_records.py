import logging
from datetime import date

from hotel_ops.core.enums import Department, OverrideReason, Role
from hotel_ops.schedules.records import override_from_record
from hotel_ops.shifts.model import Window
from hotel_ops.workers.records import worker_from_record


def test_worker_record_with_break():
    worker = worker_from_record(
        {
            "id": 7,
            "name": "Lan",
            "role": "supervisor",
            "department": "maintenance",
            "shift_start": "09:00:00",
            "shift_end": "17:00:00",
            "has_break": 1,
            "break_start": "13:00",
            "break_end": "14:00",
        }
    )

    assert worker.worker_id == "7"
    assert worker.role == Role.SUPERVISOR
    assert worker.department == Department.MAINTENANCE
    assert worker.shift.primary == Window(540, 1020)
    assert worker.shift.primary_break == Window(780, 840)
    assert worker.shift.secondary is None


def test_worker_record_break_flag_off_ignores_times():
    worker = worker_from_record(
        {"id": "w1", "shift_start": "22:00", "shift_end": "06:00", "has_break": 0, "break_start": "01:00", "break_end": "01:30"}
    )

    assert worker.shift.primary == Window(1320, 360)
    assert worker.shift.primary_break is None
    assert worker.role == Role.WORKER
    assert worker.department == Department.HOUSEKEEPING


def test_half_filled_break_is_dropped_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        worker = worker_from_record(
            {"id": "w1", "shift_start": "09:00", "shift_end": "17:00", "has_break": 1, "break_start": "13:00"}
        )

    assert worker.shift.primary_break is None
    assert "Ignoring incomplete window" in caplog.text


def test_worker_record_without_shift():
    worker = worker_from_record({"id": "w1", "name": "New hire"})

    assert worker.shift.primary is None


def test_override_record_with_dual_shift():
    override = override_from_record(
        {
            "id": 3,
            "worker_id": 7,
            "schedule_date": "2025-03-10 00:00:00",
            "shift_1_start": "06:00",
            "shift_1_end": "10:00",
            "shift_2_start": "14:00",
            "shift_2_end": "18:00",
            "is_override": 0,
            "override_reason": "none",
        }
    )

    assert override.override_id == 3
    assert override.worker_id == "7"
    assert override.schedule_date == date(2025, 3, 10)
    assert override.shift_2 == Window(840, 1080)
    assert override.has_explicit_shifts
    assert override.override_reason is None


def test_override_record_reason_is_case_insensitive():
    override = override_from_record(
        {"worker_id": "w1", "schedule_date": "2025-03-10", "is_override": True, "override_reason": "Sick"}
    )

    assert override.is_override
    assert override.override_reason == OverrideReason.SICK


def test_override_record_unknown_reason_defaults_to_leave(caplog):
    with caplog.at_level(logging.WARNING):
        override = override_from_record(
            {"worker_id": "w1", "schedule_date": "2025-03-10", "is_override": 1, "override_reason": "vacation"}
        )

    assert override.override_reason == OverrideReason.LEAVE
    assert "Unknown override reason" in caplog.text
