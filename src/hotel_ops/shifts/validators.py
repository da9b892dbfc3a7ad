"""Schedule editing checks.

Validators report problems through :class:`ValidationResult` instead of raising,
so the schedule editor can show the reason inline.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.circular_time import duration, forward_diff
from ..common.datetime_utils import format_hhmm
from ..core.constants import (
    MAX_BREAK_MINUTES_DUAL_SHIFT,
    MAX_BREAK_MINUTES_SINGLE_SHIFT,
    MAX_INTER_SHIFT_GAP_MINUTES,
    MAX_SHIFT_MINUTES,
    MIN_INTER_SHIFT_GAP_MINUTES,
    MIN_SHIFT_MINUTES,
)
from .model import Window


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: Optional[str] = None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, reason: str) -> ValidationResult:
        return cls(valid=False, reason=reason)


def validate_shift_window(start: int, end: int) -> ValidationResult:
    length = duration(start, end)
    if length < MIN_SHIFT_MINUTES or length > MAX_SHIFT_MINUTES:
        return ValidationResult.fail(
            f"Shift {format_hhmm(start)}-{format_hhmm(end)} must last between "
            f"{MIN_SHIFT_MINUTES // 60} and {MAX_SHIFT_MINUTES // 60} hours"
        )
    return ValidationResult.ok()


def validate_break(
    shift_start: int,
    shift_end: int,
    break_start: int,
    break_end: int,
    dual_shift: bool = False,
) -> ValidationResult:
    if break_start == break_end:
        return ValidationResult.fail("Break end must be after break start")

    # A break may only cross midnight inside a shift that does too.
    shift_wraps = shift_end < shift_start
    if break_end < break_start and not shift_wraps:
        return ValidationResult.fail("Break end must be after break start")

    shift_length = duration(shift_start, shift_end)
    break_length = duration(break_start, break_end)
    offset = forward_diff(shift_start, break_start)
    if offset >= shift_length or offset + break_length > shift_length:
        return ValidationResult.fail(
            f"Break {format_hhmm(break_start)}-{format_hhmm(break_end)} must fall within "
            f"the shift {format_hhmm(shift_start)}-{format_hhmm(shift_end)}"
        )

    limit = MAX_BREAK_MINUTES_DUAL_SHIFT if dual_shift else MAX_BREAK_MINUTES_SINGLE_SHIFT
    if break_length > limit:
        return ValidationResult.fail(f"Break cannot exceed {limit} minutes (got {break_length})")

    return ValidationResult.ok()


def validate_dual_shift(
    shift_1: Window,
    break_1: Optional[Window] = None,
    shift_2: Optional[Window] = None,
    break_2: Optional[Window] = None,
) -> ValidationResult:
    """Validate a whole day: shift 1, its break and the optional second shift."""
    dual = shift_2 is not None

    result = validate_shift_window(shift_1.start, shift_1.end)
    if not result.valid:
        return result
    if break_1 is not None:
        result = validate_break(shift_1.start, shift_1.end, break_1.start, break_1.end, dual)
        if not result.valid:
            return result

    if shift_2 is None:
        if break_2 is not None:
            return ValidationResult.fail("Shift 2 break given without a second shift")
        return ValidationResult.ok()

    result = validate_shift_window(shift_2.start, shift_2.end)
    if not result.valid:
        return ValidationResult.fail(f"Shift 2: {result.reason}")
    if break_2 is not None:
        result = validate_break(shift_2.start, shift_2.end, break_2.start, break_2.end, dual)
        if not result.valid:
            return ValidationResult.fail(f"Shift 2: {result.reason}")

    if shift_1.overlaps(shift_2):
        return ValidationResult.fail(f"Shift 2 ({shift_2}) overlaps shift 1 ({shift_1})")

    gap = forward_diff(shift_1.end, shift_2.start)
    if gap < MIN_INTER_SHIFT_GAP_MINUTES or gap > MAX_INTER_SHIFT_GAP_MINUTES:
        return ValidationResult.fail("Shift 2 must start after shift 1 ends")

    return ValidationResult.ok()
