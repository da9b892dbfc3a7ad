from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..core.enums import OverrideReason, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container
from ..shifts.model import Window
from ..shifts.validators import validate_dual_shift

logger = logging.getLogger(__name__)


def _window(body: Mapping[str, Any], prefix: str, label: str) -> Optional[Window]:
    raw_start, raw_end = body.get(f"{prefix}_start"), body.get(f"{prefix}_end")
    if not raw_start and not raw_end:
        return None
    start, end = parse_hhmm(raw_start), parse_hhmm(raw_end)
    if start is None or end is None:
        raise ValidationError(f"{label} needs both a start and an end time (HH:MM)")
    return Window(start, end)


def _shift_fields(body: Mapping[str, Any]) -> dict:
    shift_1 = _window(body, "shift_1", "Shift 1")
    if shift_1 is None:
        raise ValidationError("Shift 1 start and end times are required")
    return {
        "shift_1": shift_1,
        "shift_1_break": _window(body, "shift_1_break", "Shift 1 break"),
        "shift_2": _window(body, "shift_2", "Shift 2"),
        "shift_2_break": _window(body, "shift_2_break", "Shift 2 break"),
    }


def _current_role() -> Role:
    try:
        return Role(session.get("role"))
    except ValueError:
        raise AuthorizationError("Sign in to edit schedules")


def register(app: Flask, container: Container) -> None:
    service = container.schedule_service

    @app.route("/api/shift-schedules/validate", methods=["POST"], endpoint="shift_schedules_validate")
    def shift_schedules_validate():
        body = request.get_json(silent=True) or {}
        try:
            fields = _shift_fields(body)
        except ValidationError as e:
            return jsonify({"valid": False, "reason": str(e)})
        result = validate_dual_shift(
            fields["shift_1"],
            fields["shift_1_break"],
            fields["shift_2"],
            fields["shift_2_break"],
        )
        return jsonify({"valid": result.valid, "reason": result.reason})

    @app.route("/api/shift-schedules", methods=["POST"], endpoint="shift_schedules_save")
    def shift_schedules_save():
        body = request.get_json(silent=True) or {}
        role = _current_role()
        worker_id = str(body.get("worker_id") or "")
        try:
            schedule_date = parse_iso_date(str(body.get("schedule_date") or ""))
        except ValueError:
            raise ValidationError("schedule_date must be YYYY-MM-DD")

        if body.get("is_override"):
            try:
                reason = OverrideReason(body.get("override_reason") or OverrideReason.LEAVE.value)
            except ValueError:
                raise ValidationError("Unknown override reason")
            override_id = service.mark_off_duty(
                current_role=role,
                worker_id=worker_id,
                schedule_date=schedule_date,
                reason=reason,
                notes=body.get("notes"),
            )
        else:
            override_id = service.save_override(
                current_role=role,
                worker_id=worker_id,
                schedule_date=schedule_date,
                notes=body.get("notes"),
                **_shift_fields(body),
            )

        logger.info("Saved schedule override %s for worker %s on %s", override_id, worker_id, schedule_date)
        return jsonify({"success": True, "id": override_id}), 201

    @app.route("/api/shift-schedules/<int:override_id>", methods=["DELETE"], endpoint="shift_schedules_delete")
    def shift_schedules_delete(override_id: int):
        service.delete(current_role=_current_role(), override_id=override_id)
        return jsonify({"success": True})
