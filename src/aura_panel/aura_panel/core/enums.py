from __future__ import annotations

from enum import Enum


class RecordSource(str, Enum):
    """Where a presence flag came from, as reported by the device."""

    IOT = "iot"
    MANUAL = "manual"


class SyncState(str, Enum):
    """States of the panel sync client."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    SAVING = "saving"
    SUBMITTING = "submitting"
    ERROR = "error"


class Outcome(str, Enum):
    """Result of one client operation."""

    OK = "ok"
    FAILED = "failed"
    BUSY = "busy"
    NOOP = "noop"
    SUPERSEDED = "superseded"
