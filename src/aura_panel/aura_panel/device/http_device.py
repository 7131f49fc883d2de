from __future__ import annotations

from ..attendance.model import AttendanceSnapshot, update_payload
from ..attendance.repository import AttendanceDevice
from ..core.constants import SUBMIT_PATH, TODAY_PATH, UPDATE_PATH
from .connection import DeviceConnection
from .http_base import request_json, require_ack


class HttpAttendanceDevice(AttendanceDevice):
    def __init__(self, conn: DeviceConnection):
        self._conn = conn

    @property
    def base_url(self) -> str:
        return self._conn.base_url

    def fetch_today(self) -> AttendanceSnapshot:
        data = request_json(self._conn, "GET", TODAY_PATH)
        return AttendanceSnapshot.from_payload(data)

    def push_update(self, snapshot: AttendanceSnapshot) -> None:
        data = request_json(self._conn, "POST", UPDATE_PATH, body=update_payload(snapshot))
        require_ack(data, UPDATE_PATH)

    def submit(self) -> None:
        data = request_json(self._conn, "POST", SUBMIT_PATH, body={})
        require_ack(data, SUBMIT_PATH)
