from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..core.enums import RecordSource
from ..core.exceptions import ProtocolError

StudentId = Union[int, str]

_RECORD_FIELDS = ("student_id", "roll_no", "name", "present", "source")


@dataclass(frozen=True)
class StudentRecord:
    """One roster row. Only `present` is ever changed by the panel."""

    student_id: StudentId
    roll_no: str
    name: str
    present: bool
    source: RecordSource

    @classmethod
    def from_payload(cls, raw: Any) -> "StudentRecord":
        if not isinstance(raw, Mapping):
            raise ProtocolError("student entry is not an object")
        missing = [f for f in _RECORD_FIELDS if f not in raw]
        if missing:
            raise ProtocolError(f"student entry missing {', '.join(missing)}")

        student_id = raw["student_id"]
        # bool is an int subclass; a boolean id is certainly a device bug.
        if isinstance(student_id, bool) or not isinstance(student_id, (int, str)):
            raise ProtocolError(f"invalid student_id {student_id!r}")
        if not isinstance(raw["present"], bool):
            raise ProtocolError(f"present must be a boolean for student {student_id!r}")
        try:
            source = RecordSource(raw["source"])
        except ValueError:
            raise ProtocolError(f"unknown source {raw['source']!r} for student {student_id!r}")

        return cls(
            student_id=student_id,
            roll_no=str(raw["roll_no"]),
            name=str(raw["name"]),
            present=raw["present"],
            source=source,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "student_id": self.student_id,
            "roll_no": self.roll_no,
            "name": self.name,
            "present": self.present,
            "source": self.source.value,
        }


@dataclass(frozen=True)
class AttendanceSnapshot:
    """Roster for one session, in device order."""

    date: str
    students: Tuple[StudentRecord, ...]

    def __post_init__(self):
        seen = set()
        for s in self.students:
            if s.student_id in seen:
                raise ProtocolError(f"duplicate student_id {s.student_id!r}")
            seen.add(s.student_id)

    @classmethod
    def from_payload(cls, raw: Any) -> "AttendanceSnapshot":
        """Build a snapshot from the body of the device's `today` endpoint."""
        if not isinstance(raw, Mapping):
            raise ProtocolError("attendance body is not an object")
        day = raw.get("date")
        if not isinstance(day, str):
            raise ProtocolError("attendance body has no date")
        students = raw.get("students")
        if not isinstance(students, list):
            raise ProtocolError("attendance body has no students list")
        return cls(date=day, students=tuple(StudentRecord.from_payload(s) for s in students))

    @property
    def total(self) -> int:
        return len(self.students)

    @property
    def present_count(self) -> int:
        return sum(1 for s in self.students if s.present)

    def find(self, student_id: StudentId) -> Optional[StudentRecord]:
        for s in self.students:
            if s.student_id == student_id:
                return s
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "students": [s.to_dict() for s in self.students]}


def toggle_presence(snapshot: AttendanceSnapshot, student_id: StudentId) -> AttendanceSnapshot:
    """Return a new snapshot with one student's `present` flag inverted.

    Unknown ids give back the same snapshot object. `source` is left alone:
    a manual toggle does not relabel an IoT record.
    """
    if snapshot.find(student_id) is None:
        return snapshot
    return replace(
        snapshot,
        students=tuple(
            replace(s, present=not s.present) if s.student_id == student_id else s
            for s in snapshot.students
        ),
    )


def update_payload(snapshot: AttendanceSnapshot) -> Dict[str, List[Dict[str, Any]]]:
    """Body for the device's `update` endpoint: one (id, present) pair per record."""
    return {"students": [{"student_id": s.student_id, "present": s.present} for s in snapshot.students]}
