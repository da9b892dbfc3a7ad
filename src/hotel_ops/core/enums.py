from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Staff roles used for permission checks."""

    WORKER = "worker"
    SUPERVISOR = "supervisor"
    FRONT_OFFICE = "front_office"
    ADMIN = "admin"


class Department(str, Enum):
    HOUSEKEEPING = "housekeeping"
    MAINTENANCE = "maintenance"
    FRONT_DESK = "front_desk"


class AvailabilityStatus(str, Enum):
    """Where a worker stands relative to their shift at a given minute."""

    AVAILABLE = "AVAILABLE"
    SHIFT_BREAK = "SHIFT_BREAK"
    OFF_DUTY = "OFF_DUTY"


class SegmentKind(str, Enum):
    WORK = "WORK"
    BREAK = "BREAK"


class BreakKind(str, Enum):
    """INTRA_SHIFT breaks sit inside one shift, INTER_SHIFT is the gap between two."""

    INTRA_SHIFT = "INTRA_SHIFT"
    INTER_SHIFT = "INTER_SHIFT"


class OverrideReason(str, Enum):
    """Why a date override takes the worker off duty."""

    HOLIDAY = "holiday"
    LEAVE = "leave"
    SICK = "sick"
    EMERGENCY = "emergency"
