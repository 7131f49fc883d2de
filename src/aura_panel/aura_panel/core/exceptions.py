from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for the panel."""


class StudentNotFoundError(DomainError):
    """Raised by a strict toggle when the student id is not in the snapshot."""


class DeviceError(DomainError):
    """Base class for failures talking to the attendance device."""

    kind = "device"


class TransportError(DeviceError):
    """Network unreachable, timeout, DNS or connection failure."""

    kind = "transport"


class HttpError(DeviceError):
    """Device answered with a non-2xx status code."""

    kind = "http"

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = int(status_code)


class ProtocolError(DeviceError):
    """Well-formed HTTP response whose body has the wrong shape or a false ack."""

    kind = "protocol"
