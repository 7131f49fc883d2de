from __future__ import annotations

from typing import Any, Callable, List, Optional

import pytest

from src.aura_panel.aura_panel.attendance.model import AttendanceSnapshot, update_payload
from src.aura_panel.aura_panel.core.exceptions import DeviceError


class FakeDevice:
    """In-memory stand-in for the classroom device.

    `today` is the payload returned by fetch_today; set `fail_*` to a
    DeviceError to make the matching call raise. `on_fetch` runs inside
    fetch_today, before it returns, to simulate overlapping calls.
    """

    base_url = "http://device.test"

    def __init__(self, today: dict):
        self.today = today
        self.fail_fetch: Optional[DeviceError] = None
        self.fail_update: Optional[DeviceError] = None
        self.fail_submit: Optional[DeviceError] = None
        self.on_fetch: Optional[Callable[[], Any]] = None
        self.fetch_calls = 0
        self.updates: List[dict] = []
        self.submit_calls = 0
        self.locked = False

    def fetch_today(self) -> AttendanceSnapshot:
        self.fetch_calls += 1
        payload = self.today
        if self.on_fetch is not None:
            hook, self.on_fetch = self.on_fetch, None
            hook()
        if self.fail_fetch is not None:
            raise self.fail_fetch
        return AttendanceSnapshot.from_payload(payload)

    def push_update(self, snapshot: AttendanceSnapshot) -> None:
        if self.fail_update is not None:
            raise self.fail_update
        payload = update_payload(snapshot)
        self.updates.append(payload)
        by_id = {p["student_id"]: p["present"] for p in payload["students"]}
        for s in self.today["students"]:
            if s["student_id"] in by_id and s["present"] != by_id[s["student_id"]]:
                s["present"] = by_id[s["student_id"]]
                s["source"] = "manual"

    def submit(self) -> None:
        self.submit_calls += 1
        if self.fail_submit is not None:
            raise self.fail_submit
        self.locked = True


@pytest.fixture()
def today_payload() -> dict:
    return {
        "date": "2024-05-01",
        "students": [
            {"student_id": 1, "roll_no": "A1", "name": "Asha", "present": False, "source": "iot"},
            {"student_id": 2, "roll_no": "A2", "name": "Bilal", "present": True, "source": "iot"},
            {"student_id": 3, "roll_no": "A3", "name": "Chen", "present": False, "source": "manual"},
        ],
    }


@pytest.fixture()
def device(today_payload) -> FakeDevice:
    return FakeDevice(today_payload)


@pytest.fixture()
def make_device() -> Callable[[dict], FakeDevice]:
    return FakeDevice
