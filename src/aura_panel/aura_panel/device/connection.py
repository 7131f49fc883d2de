from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from ..core.constants import DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class DeviceConfig:
    base_url: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS


class DeviceConnection:
    """Owns the HTTP session for one configured device.

    The base URL is fixed for the lifetime of the process; there is no
    discovery or re-resolution.
    """

    _instance: Optional["DeviceConnection"] = None

    def __init__(self, config: DeviceConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session

    @classmethod
    def get_instance(cls, config: DeviceConfig) -> "DeviceConnection":
        if cls._instance is None or cls._instance.config != config:
            if cls._instance is not None:
                cls._instance.close()
            cls._instance = DeviceConnection(config)
        return cls._instance

    @property
    def config(self) -> DeviceConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Accept": "application/json"})
        return self._session

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
