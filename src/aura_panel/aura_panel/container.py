from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.repository import AttendanceDevice
from .attendance.service import AttendanceSyncClient
from .core.constants import DEFAULT_TIMEOUT_SECONDS
from .device.connection import DeviceConfig, DeviceConnection
from .device.http_device import HttpAttendanceDevice


@dataclass(frozen=True)
class Container:
    device: AttendanceDevice
    sync_client: AttendanceSyncClient
    class_name: str = ""
    conn: Optional[DeviceConnection] = None


def build_container(
    *,
    device_config: dict,
    class_name: str = "",
    auto_load: bool = True,
    strict: bool = False,
    device: Optional[AttendanceDevice] = None,
) -> Container:
    """Wire settings into the device gateway and the sync client.

    Pass `device` to swap the HTTP gateway for a test double.
    """
    conn = None
    if device is None:
        config = DeviceConfig(
            base_url=str(device_config["base_url"]),
            timeout=float(device_config.get("timeout", DEFAULT_TIMEOUT_SECONDS)),
        )
        conn = DeviceConnection.get_instance(config)
        device = HttpAttendanceDevice(conn)

    sync_client = AttendanceSyncClient(device, auto_load=auto_load, strict=strict)

    return Container(device=device, sync_client=sync_client, class_name=class_name, conn=conn)
