from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.constants import (
    MSG_LOAD_FAILED,
    MSG_SAVE_FAILED,
    MSG_SAVED,
    MSG_SUBMIT_FAILED,
    MSG_SUBMITTED,
)
from ..core.enums import Outcome, SyncState
from ..core.exceptions import DeviceError, StudentNotFoundError
from .model import AttendanceSnapshot, StudentId, toggle_presence
from .repository import AttendanceDevice

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelView:
    """Read-only picture of the client handed to the UI layer."""

    state: SyncState
    snapshot: Optional[AttendanceSnapshot]
    error: str
    info: str
    device_url: str

    def to_dict(self) -> Dict[str, Any]:
        snap = self.snapshot
        return {
            "state": self.state.value,
            "error": self.error,
            "info": self.info,
            "device_url": self.device_url,
            "attendance": snap.to_dict() if snap else None,
            "present_count": snap.present_count if snap else 0,
            "total": snap.total if snap else 0,
        }


class AttendanceSyncClient:
    """Use case: keep one attendance snapshot in sync with the device.

    Network operations (load / save / submit) go through a single in-flight
    slot. Save and submit are refused with `Outcome.BUSY` while anything else
    is running. A newer load supersedes an older one that is still waiting on
    the device; the older result is dropped.

    Nothing raised by the gateway escapes: it turns into the ERROR state with a
    fixed message, and the error itself is kept in `last_failure`.
    `submit_accepted` tells whether the last submit reached the device, even
    when the reload after it failed.
    """

    def __init__(self, device: AttendanceDevice, *, auto_load: bool = True, strict: bool = False):
        self._device = device
        self._strict = bool(strict)
        self._lock = threading.Lock()

        self._state = SyncState.IDLE
        self._snapshot: Optional[AttendanceSnapshot] = None
        self._error = ""
        self._info = ""
        self._inflight: Optional[SyncState] = None
        self._load_token = 0
        self.last_failure: Optional[Exception] = None
        self.submit_accepted = False

        if auto_load:
            self._state = SyncState.LOADING
            self.load()

    # -- observed surface -------------------------------------------------

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def snapshot(self) -> Optional[AttendanceSnapshot]:
        return self._snapshot

    @property
    def error(self) -> str:
        return self._error

    @property
    def info(self) -> str:
        return self._info

    def view(self) -> PanelView:
        with self._lock:
            return PanelView(
                state=self._state,
                snapshot=self._snapshot,
                error=self._error,
                info=self._info,
                device_url=self._device.base_url,
            )

    # -- operations -------------------------------------------------------

    def load(self) -> Outcome:
        with self._lock:
            if self._inflight in (SyncState.SAVING, SyncState.SUBMITTING):
                log.info("load refused: %s in progress", self._inflight.value)
                return Outcome.BUSY
            self._begin(SyncState.LOADING)
            self._load_token += 1
            token = self._load_token
        return self._do_load(token)

    def toggle_presence(self, student_id: StudentId) -> Outcome:
        """Flip `present` for one student locally. Never touches the network."""
        with self._lock:
            if self._snapshot is None:
                return Outcome.NOOP
            updated = toggle_presence(self._snapshot, student_id)
            if updated is self._snapshot:
                if self._strict:
                    raise StudentNotFoundError(f"Student {student_id!r} is not in today's roster")
                return Outcome.NOOP
            self._snapshot = updated
            return Outcome.OK

    def save_changes(self) -> Outcome:
        with self._lock:
            if self._snapshot is None:
                return Outcome.NOOP
            if self._inflight is not None:
                log.info("save refused: %s in progress", self._inflight.value)
                return Outcome.BUSY
            self._begin(SyncState.SAVING)
            pending = self._snapshot

        try:
            self._device.push_update(pending)
        except Exception as e:
            with self._lock:
                self._fail(e, MSG_SAVE_FAILED, keep_snapshot=True)
            return Outcome.FAILED

        with self._lock:
            self._finish(SyncState.READY, info=MSG_SAVED)
        log.info("saved %d records to device", pending.total)
        return Outcome.OK

    def submit(self) -> Outcome:
        """Lock today's attendance on the device, then reload it.

        Callers are expected to have confirmed with the user first.
        """
        with self._lock:
            if self._inflight is not None:
                log.info("submit refused: %s in progress", self._inflight.value)
                return Outcome.BUSY
            self._begin(SyncState.SUBMITTING)
            self.submit_accepted = False

        try:
            self._device.submit()
        except Exception as e:
            with self._lock:
                self._fail(e, MSG_SUBMIT_FAILED, keep_snapshot=True)
            return Outcome.FAILED

        log.info("attendance submitted, reloading locked record")
        # The reload keeps the submit slot so no other load can overtake it.
        with self._lock:
            self.submit_accepted = True
            self._state = SyncState.LOADING
            self._load_token += 1
            token = self._load_token
        return self._do_load(token, info=MSG_SUBMITTED)

    # -- internals (callers hold self._lock unless noted) ------------------

    def _begin(self, state: SyncState) -> None:
        self._state = state
        self._inflight = state
        self._error = ""
        self._info = ""

    def _finish(self, state: SyncState, *, info: str = "") -> None:
        self._state = state
        self._inflight = None
        self._info = info
        self.last_failure = None

    def _fail(self, error: Exception, message: str, *, keep_snapshot: bool) -> None:
        if isinstance(error, DeviceError):
            log.warning("%s (%s error: %s)", message, error.kind, error)
        else:
            # Gateway bug rather than a device failure; keep the traceback.
            log.error("%s (unexpected %s)", message, type(error).__name__, exc_info=error)
        self._state = SyncState.ERROR
        self._inflight = None
        self._error = message
        self.last_failure = error
        if not keep_snapshot:
            self._snapshot = None

    def _do_load(self, token: int, *, info: str = "") -> Outcome:
        # Runs without the lock while waiting on the device.
        try:
            snapshot = self._device.fetch_today()
        except Exception as e:
            with self._lock:
                if token != self._load_token:
                    return Outcome.SUPERSEDED
                self._fail(e, MSG_LOAD_FAILED, keep_snapshot=False)
            return Outcome.FAILED

        with self._lock:
            if token != self._load_token:
                log.debug("dropping stale load result (token %d, current %d)", token, self._load_token)
                return Outcome.SUPERSEDED
            self._snapshot = snapshot
            self._finish(SyncState.READY, info=info)
        log.info("loaded %d students for %s", snapshot.total, snapshot.date)
        return Outcome.OK
