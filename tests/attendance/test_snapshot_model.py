from __future__ import annotations

import pytest

from src.aura_panel.aura_panel.attendance.model import AttendanceSnapshot, toggle_presence, update_payload
from src.aura_panel.aura_panel.core.enums import RecordSource
from src.aura_panel.aura_panel.core.exceptions import ProtocolError


def test_from_payload_keeps_device_order(today_payload):
    snap = AttendanceSnapshot.from_payload(today_payload)

    assert snap.date == "2024-05-01"
    assert [s.student_id for s in snap.students] == [1, 2, 3]
    assert snap.students[2].source == RecordSource.MANUAL
    assert snap.total == 3
    assert snap.present_count == 1


def test_toggle_twice_restores_snapshot(today_payload):
    snap = AttendanceSnapshot.from_payload(today_payload)

    once = toggle_presence(snap, 2)
    twice = toggle_presence(once, 2)

    assert once != snap
    assert once.find(2).present is False
    assert twice == snap


def test_toggle_changes_only_one_record_and_not_source(today_payload):
    snap = AttendanceSnapshot.from_payload(today_payload)

    updated = toggle_presence(snap, 1)

    assert updated.find(1).present is True
    assert updated.find(1).source == RecordSource.IOT
    assert updated.students[1:] == snap.students[1:]
    # original is untouched
    assert snap.find(1).present is False


def test_toggle_unknown_id_returns_same_snapshot(today_payload):
    snap = AttendanceSnapshot.from_payload(today_payload)

    assert toggle_presence(snap, 99) is snap


def test_update_payload_has_one_pair_per_record(today_payload):
    snap = toggle_presence(AttendanceSnapshot.from_payload(today_payload), 3)

    assert update_payload(snap) == {
        "students": [
            {"student_id": 1, "present": False},
            {"student_id": 2, "present": True},
            {"student_id": 3, "present": True},
        ]
    }


def test_to_dict_round_trips_the_wire_shape(today_payload):
    assert AttendanceSnapshot.from_payload(today_payload).to_dict() == today_payload


@pytest.mark.parametrize(
    "mutate",
    [
        lambda p: p.pop("date"),
        lambda p: p.update(students="nope"),
        lambda p: p["students"][0].pop("name"),
        lambda p: p["students"][0].update(present="yes"),
        lambda p: p["students"][0].update(source="rfid"),
        lambda p: p["students"][1].update(student_id=1),
    ],
    ids=["no-date", "students-not-list", "missing-field", "present-not-bool", "unknown-source", "duplicate-id"],
)
def test_malformed_payload_raises_protocol_error(today_payload, mutate):
    mutate(today_payload)

    with pytest.raises(ProtocolError):
        AttendanceSnapshot.from_payload(today_payload)
