import logging

import pytest

from hotel_ops.core.enums import AvailabilityStatus, BreakKind, OverrideReason, SegmentKind
from hotel_ops.availability.evaluator import evaluate, evaluate_shift
from hotel_ops.shifts.model import ShiftConfig, Window
from hotel_ops.shifts.segments import build_segments


def hm(hours: int, minutes: int = 0) -> int:
    return hours * 60 + minutes


DAY_WITH_LUNCH = ShiftConfig(primary=Window(hm(9), hm(17)), primary_break=Window(hm(13), hm(14)))
NIGHT = ShiftConfig(primary=Window(hm(22), hm(6)))
SPLIT_DAY = ShiftConfig(primary=Window(hm(6), hm(10)), secondary=Window(hm(14), hm(18)))


def test_overnight_shift_before_midnight():
    result = evaluate_shift(NIGHT, hm(23, 30))

    assert result.status == AvailabilityStatus.AVAILABLE
    assert result.current_shift_number == 1
    assert result.minutes_until_state_change == 390
    assert result.is_ending_soon is False
    assert result.next_shift_start is None


def test_overnight_shift_after_midnight():
    result = evaluate_shift(NIGHT, hm(5, 45))

    assert result.status == AvailabilityStatus.AVAILABLE
    assert result.minutes_until_state_change == 15
    assert result.is_ending_soon is True


def test_overnight_shift_off_duty_during_the_day():
    result = evaluate_shift(NIGHT, hm(10))

    assert result.status == AvailabilityStatus.OFF_DUTY
    assert result.next_shift_start == "22:00"
    assert result.next_shift_number == 1
    assert result.minutes_until_next_shift == 720
    assert result.minutes_until_state_change == 720


def test_intra_shift_break():
    result = evaluate_shift(DAY_WITH_LUNCH, hm(13, 30))

    assert result.status == AvailabilityStatus.SHIFT_BREAK
    assert result.break_kind == BreakKind.INTRA_SHIFT
    assert result.current_shift_number == 1
    assert result.active_window == Window(hm(13), hm(14))
    assert result.minutes_until_state_change == 30
    assert result.next_shift_start == "14:00"
    assert result.minutes_until_next_shift == 30


def test_work_before_lunch_reports_shift_end_as_next():
    result = evaluate_shift(DAY_WITH_LUNCH, hm(12))

    assert result.status == AvailabilityStatus.AVAILABLE
    assert result.active_window == Window(hm(9), hm(13))
    assert result.minutes_until_state_change == 60
    assert result.next_shift_start == "17:00"
    assert result.minutes_until_next_shift == 300


def test_inter_shift_gap():
    result = evaluate_shift(SPLIT_DAY, hm(12))

    assert result.status == AvailabilityStatus.SHIFT_BREAK
    assert result.break_kind == BreakKind.INTER_SHIFT
    assert result.minutes_until_state_change == 120
    assert result.next_shift_number == 2
    assert result.next_shift_start == "14:00"
    assert result.minutes_until_next_shift == 120


def test_second_shift_reports_its_number():
    result = evaluate_shift(SPLIT_DAY, hm(15))

    assert result.status == AvailabilityStatus.AVAILABLE
    assert result.current_shift_number == 2
    assert result.minutes_until_state_change == 180


@pytest.mark.parametrize(
    "minute, status",
    [
        (hm(8, 59), AvailabilityStatus.OFF_DUTY),
        (hm(9), AvailabilityStatus.AVAILABLE),
        (hm(13), AvailabilityStatus.SHIFT_BREAK),
        (hm(14), AvailabilityStatus.AVAILABLE),
        (hm(17), AvailabilityStatus.OFF_DUTY),
    ],
)
def test_boundaries_are_half_open(minute, status):
    assert evaluate_shift(DAY_WITH_LUNCH, minute).status == status


def test_ending_soon_threshold_is_inclusive():
    assert evaluate_shift(DAY_WITH_LUNCH, hm(16, 30)).is_ending_soon is True
    assert evaluate_shift(DAY_WITH_LUNCH, hm(16, 29)).is_ending_soon is False


def test_every_minute_maps_to_the_covering_segment():
    segments = build_segments(DAY_WITH_LUNCH)
    expected_by_kind = {SegmentKind.WORK: AvailabilityStatus.AVAILABLE, SegmentKind.BREAK: AvailabilityStatus.SHIFT_BREAK}

    for minute in range(1440):
        covering = [s for s in segments if s.window.contains(minute)]
        assert len(covering) <= 1
        expected = expected_by_kind[covering[0].kind] if covering else AvailabilityStatus.OFF_DUTY
        assert evaluate(segments, minute).status == expected


def test_minute_is_normalised_and_result_is_repeatable():
    segments = build_segments(DAY_WITH_LUNCH)

    assert evaluate(segments, hm(12) + 1440) == evaluate(segments, hm(12))
    assert evaluate(segments, hm(12)) == evaluate(segments, hm(12))


def test_off_duty_override_wins():
    config = ShiftConfig(primary=Window(hm(9), hm(17)), off_duty_reason=OverrideReason.SICK)
    result = evaluate_shift(config, hm(10))

    assert result.status == AvailabilityStatus.OFF_DUTY
    assert result.next_shift_start is None


def test_missing_shift_fails_open_by_default(caplog):
    with caplog.at_level(logging.WARNING):
        result = evaluate_shift(ShiftConfig(), hm(10))

    assert result.status == AvailabilityStatus.AVAILABLE
    assert result.minutes_until_state_change is None
    assert "No primary shift configured" in caplog.text


def test_missing_shift_can_fail_closed():
    assert evaluate_shift(ShiftConfig(), hm(10), fail_open=False).status == AvailabilityStatus.OFF_DUTY
    assert evaluate_shift(None, hm(10), fail_open=False).status == AvailabilityStatus.OFF_DUTY


def test_to_dict_renders_windows_as_hhmm():
    data = evaluate_shift(DAY_WITH_LUNCH, hm(13, 30)).to_dict()

    assert data["status"] == "SHIFT_BREAK"
    assert data["break_kind"] == "INTRA_SHIFT"
    assert data["active_window"] == {"start": "13:00", "end": "14:00"}
