from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping

import requests

from ..core.exceptions import DeviceError, HttpError, ProtocolError, TransportError
from .connection import DeviceConnection

log = logging.getLogger(__name__)


@contextmanager
def device_errors(action: str) -> Iterator[None]:
    """Translate `requests` failures into `TransportError`."""
    try:
        yield
    except DeviceError:
        raise
    except requests.Timeout as e:
        raise TransportError(f"{action}: timed out ({e})")
    except requests.ConnectionError as e:
        raise TransportError(f"{action}: connection failed ({e})")
    except requests.RequestException as e:
        raise TransportError(f"{action}: {e}")


def request_json(conn: DeviceConnection, method: str, path: str, *, body: Any = None) -> Any:
    """Perform one call and return the decoded JSON body.

    Raises TransportError, HttpError (non-2xx) or ProtocolError (not JSON).
    """
    url = conn.url(path)
    log.debug("%s %s body=%r", method, url, body)
    with device_errors(f"{method} {path}"):
        kwargs = {"timeout": conn.config.timeout}
        if body is not None:
            kwargs["json"] = body
        resp = conn.session.request(method, url, **kwargs)

    if not 200 <= resp.status_code < 300:
        raise HttpError(resp.status_code, f"{method} {path}: HTTP {resp.status_code}")
    try:
        return resp.json()
    except ValueError:
        raise ProtocolError(f"{method} {path}: response is not JSON")


def require_ack(data: Any, path: str) -> None:
    """The device acknowledges writes with `{"ok": true}`."""
    if not isinstance(data, Mapping) or data.get("ok") is not True:
        raise ProtocolError(f"{path}: device did not acknowledge ({data!r})")
