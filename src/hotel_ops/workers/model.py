from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import Department, Role
from ..shifts.model import ShiftConfig


@dataclass(frozen=True)
class Worker:
    """Domain entity: a staff member and their standing daily shift.

    Note: Plain data object (no persistence code).
    """

    worker_id: str
    name: str
    role: Role
    department: Department
    shift: ShiftConfig = field(default_factory=ShiftConfig)
    is_available: bool = True
