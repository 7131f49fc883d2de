from __future__ import annotations

from typing import Protocol

from .model import AttendanceSnapshot


class AttendanceDevice(Protocol):
    """Gateway to the classroom attendance device.

    Implementations raise `DeviceError` subclasses; they never return a
    failure value.
    """

    def fetch_today(self) -> AttendanceSnapshot:
        raise NotImplementedError

    def push_update(self, snapshot: AttendanceSnapshot) -> None:
        """Send every (student_id, present) pair of the snapshot."""

        raise NotImplementedError

    def submit(self) -> None:
        """Finalize and lock today's record on the device."""

        raise NotImplementedError

    @property
    def base_url(self) -> str:
        raise NotImplementedError
