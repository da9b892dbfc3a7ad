from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from ..container import Container
from . import assignment


def _tz_offset_arg():
    raw = request.args.get("tz_offset")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("tz_offset must be an integer number of minutes")


def register(app: Flask, container: Container) -> None:
    service = container.availability_service

    @app.route("/api/workers/status", methods=["GET"], endpoint="workers_status")
    def workers_status():
        rows = service.roster_status(tz_offset_minutes=_tz_offset_arg())
        return jsonify(
            {
                "success": True,
                "workers": [
                    {
                        "id": r.worker.worker_id,
                        "name": r.worker.name,
                        "role": r.worker.role.value,
                        "department": r.worker.department.value,
                        "shift": str(r.shift.primary) if r.shift.primary else None,
                        "off_duty_reason": r.shift.off_duty_reason.value if r.shift.off_duty_reason else None,
                        "availability": r.availability.to_dict(),
                    }
                    for r in rows
                ],
            }
        )

    @app.route("/api/workers/<worker_id>/availability", methods=["GET"], endpoint="worker_availability")
    def worker_availability(worker_id: str):
        availability = service.availability_for(worker_id, tz_offset_minutes=_tz_offset_arg())
        return jsonify(
            {
                "success": True,
                "worker_id": worker_id,
                "availability": availability.to_dict(),
                "needs_handover": assignment.needs_handover(availability, service.handover_minutes),
            }
        )

    @app.route("/api/workers/<worker_id>/can-assign", methods=["GET"], endpoint="worker_can_assign")
    def worker_can_assign(worker_id: str):
        decision = service.can_assign_task(
            worker_id,
            request.args.get("duration"),
            tz_offset_minutes=_tz_offset_arg(),
        )
        return jsonify({"success": True, "can_assign": decision.can_assign, "reason": decision.reason})

    @app.route("/api/workers/<worker_id>/working-hours", methods=["GET"], endpoint="worker_working_hours")
    def worker_working_hours(worker_id: str):
        raw = request.args.get("date")
        if raw:
            try:
                work_date = parse_iso_date(raw)
            except ValueError:
                raise ValidationError("date must be YYYY-MM-DD")
        else:
            work_date = service.local_date(tz_offset_minutes=_tz_offset_arg())
        return jsonify({"success": True, **service.working_summary(worker_id, work_date)})
