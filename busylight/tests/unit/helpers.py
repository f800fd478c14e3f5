"""Stubs and fakes shared by the busylight unit tests."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from busylight.adapters.api_errors import ApiError
from busylight.domain.color import Color
from busylight.domain.status import RemoteStatus

INVALID_JSON = object()

COMPLETE_SETTINGS: Dict[str, Any] = {
    "host": "http://light.local",
    "endpointStatus": "/api/status",
    "endpointSwitch": "/api/switch",
    "endpointOn": "/api/on",
    "endpointOff": "/api/off",
}


class ResponseStub:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = "" if payload is INVALID_JSON else str(payload)

    def json(self) -> Any:
        if self._payload is INVALID_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class JsonSessionStub:
    """Replaces ``JsonSession`` on an adapter and records every call."""

    def __init__(self, responses: Sequence[Any]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def _next(self) -> ResponseStub:
        if not self._responses:
            raise RuntimeError("No stub response configured")
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url: str) -> ResponseStub:
        self.calls.append({"method": "GET", "url": url})
        return self._next()

    def post(self, url: str, *, json_body: Optional[Dict[str, Any]] = None) -> ResponseStub:
        self.calls.append({"method": "POST", "url": url, "json_body": json_body})
        return self._next()


class FakeStatusPort:
    def __init__(self, result: Any) -> None:
        self.result = result
        self.calls: List[Dict[str, str]] = []

    def fetch_status(self, host: str, status_path: str) -> RemoteStatus:
        self.calls.append({"host": host, "path": status_path})
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class FakeActuatorPort:
    def __init__(self, error: Optional[ApiError] = None) -> None:
        self.error = error
        self.switched: List[Dict[str, Any]] = []
        self.posted: List[Dict[str, str]] = []

    def switch_color(self, host: str, switch_path: str, color: Color) -> None:
        self.switched.append({"host": host, "path": switch_path, "color": color})
        if self.error is not None:
            raise self.error

    def post_path(self, host: str, path: str) -> None:
        self.posted.append({"host": host, "path": path})
        if self.error is not None:
            raise self.error


class FakeSwatch:
    def render(self, color: Color) -> str:
        return f"swatch:{color.to_hex()}"


class RecordingDisplay:
    def __init__(self) -> None:
        self.images: List[str] = []
        self.titles: List[str] = []

    def set_image(self, image: str) -> None:
        self.images.append(image)

    def set_title(self, title: str) -> None:
        self.titles.append(title)
