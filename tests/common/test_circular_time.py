from hotel_ops.common.circular_time import (
    duration,
    expand,
    forward_diff,
    in_range,
    minutes_until_end,
    minutes_until_start,
    overlaps,
)


def hm(hours: int, minutes: int = 0) -> int:
    return hours * 60 + minutes


def test_in_range_same_day_window_is_half_open():
    assert in_range(hm(9), hm(9), hm(17))
    assert in_range(hm(16, 59), hm(9), hm(17))
    assert not in_range(hm(17), hm(9), hm(17))
    assert not in_range(hm(8, 59), hm(9), hm(17))


def test_in_range_wraps_past_midnight():
    assert in_range(hm(23, 30), hm(22), hm(6))
    assert in_range(hm(0), hm(22), hm(6))
    assert in_range(hm(5, 59), hm(22), hm(6))
    assert not in_range(hm(6), hm(22), hm(6))
    assert not in_range(hm(10), hm(22), hm(6))


def test_in_range_empty_window_never_matches():
    assert not in_range(hm(9), hm(9), hm(9))


def test_duration_handles_overnight():
    assert duration(hm(9), hm(17)) == 480
    assert duration(hm(22), hm(6)) == 480
    assert duration(hm(23), hm(0)) == 60


def test_forward_diff_walks_forward_only():
    assert forward_diff(hm(23), hm(1)) == 120
    assert forward_diff(hm(1), hm(23)) == 1320
    assert forward_diff(hm(8), hm(8)) == 0


def test_minutes_until_end_inside_and_outside():
    assert minutes_until_end(hm(23, 30), hm(22), hm(6)) == 390
    assert minutes_until_end(hm(3), hm(22), hm(6)) == 180
    assert minutes_until_end(hm(10), hm(22), hm(6)) == 0


def test_minutes_until_start_is_zero_inside():
    assert minutes_until_start(hm(10), hm(22), hm(6)) == 720
    assert minutes_until_start(hm(23), hm(22), hm(6)) == 0
    assert minutes_until_start(hm(18), hm(9), hm(17)) == 900


def test_expand_splits_wrapping_windows():
    assert expand(hm(9), hm(17)) == [(540, 1020)]
    assert expand(hm(22), hm(6)) == [(1320, 1440), (0, 360)]
    assert expand(hm(22), hm(0)) == [(1320, 1440)]
    assert expand(hm(5), hm(5)) == []


def test_overlaps_treats_touching_ranges_as_disjoint():
    assert overlaps((hm(8), hm(12)), (hm(11), hm(13)))
    assert not overlaps((hm(8), hm(12)), (hm(12), hm(13)))
    assert overlaps((hm(9), hm(10)), (hm(8), hm(18)))
