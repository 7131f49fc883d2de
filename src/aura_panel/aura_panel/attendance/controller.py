from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import MSG_SUBMIT_CONFIRM
from ..core.enums import Outcome
from ..core.exceptions import StudentNotFoundError
from .model import StudentId

log = logging.getLogger(__name__)

_STATUS_BY_OUTCOME = {
    Outcome.OK: 200,
    Outcome.NOOP: 200,
    Outcome.SUPERSEDED: 200,
    Outcome.BUSY: 409,
    Outcome.FAILED: 502,
}


def register(app: Flask, container: Container) -> None:
    client = container.sync_client

    def panel_response(outcome: Optional[Outcome] = None, status: Optional[int] = None, **extra):
        body = client.view().to_dict()
        body["class_name"] = container.class_name
        body.update(extra)
        if outcome is not None:
            body["outcome"] = outcome.value
        if status is None:
            status = _STATUS_BY_OUTCOME[outcome] if outcome is not None else 200
        return jsonify(body), status

    def resolve_student_id(raw: str) -> Optional[StudentId]:
        # URLs carry strings; the device may use numeric ids.
        snapshot = client.snapshot
        if snapshot is None:
            return None
        for s in snapshot.students:
            if str(s.student_id) == raw:
                return s.student_id
        return None

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "device_url": container.device.base_url})

    @app.route("/api/panel", methods=["GET"], endpoint="panel_state")
    def panel_state():
        return panel_response()

    @app.route("/api/panel/refresh", methods=["POST"], endpoint="panel_refresh")
    def panel_refresh():
        return panel_response(client.load())

    @app.route("/api/panel/students/<student_id>/toggle", methods=["POST"], endpoint="panel_toggle")
    def panel_toggle(student_id: str):
        resolved = resolve_student_id(student_id)
        if resolved is None:
            return jsonify({"success": False, "message": f"Student {student_id} is not in today's roster"}), 404
        try:
            outcome = client.toggle_presence(resolved)
        except StudentNotFoundError as e:
            # Roster was replaced between lookup and toggle.
            return jsonify({"success": False, "message": str(e)}), 404
        return panel_response(outcome)

    @app.route("/api/panel/save", methods=["POST"], endpoint="panel_save")
    def panel_save():
        return panel_response(client.save_changes())

    @app.route("/api/panel/submit", methods=["POST"], endpoint="panel_submit")
    def panel_submit():
        data = request.get_json(silent=True) or {}
        if data.get("confirm") is not True:
            return jsonify({"success": False, "confirm_required": True, "message": MSG_SUBMIT_CONFIRM}), 400
        log.info("submit confirmed from %s", request.remote_addr)
        outcome = client.submit()
        submitted = outcome is not Outcome.BUSY and client.submit_accepted
        # Locked on the device but the reload failed: not a failed submit.
        status = 200 if submitted else None
        return panel_response(outcome, status, submitted=submitted)
