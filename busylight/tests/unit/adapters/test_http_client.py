from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest
from requests import exceptions as req_exc

from busylight.adapters.api_errors import ApiError, ApiTimeoutError
from busylight.adapters.http_client import HttpConfig, JsonSession


class _RequestsSessionStub:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> str:
        self.calls.append({"method": "GET", "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return "response"

    def post(self, url: str, **kwargs: Any) -> str:
        self.calls.append({"method": "POST", "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return "response"


def test_get_sends_json_headers_and_default_timeout() -> None:
    session = JsonSession()
    stub = _RequestsSessionStub()
    session.session = stub  # type: ignore[assignment]

    assert session.get("http://h/status") == "response"

    call = stub.calls[0]
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["headers"]["Accept"] == "application/json"
    assert call["timeout"] is None


def test_post_serializes_body_and_uses_configured_timeout() -> None:
    session = JsonSession(HttpConfig(request_timeout_s=2.5))
    stub = _RequestsSessionStub()
    session.session = stub  # type: ignore[assignment]

    session.post("http://h/switch", json_body={"red": 1, "green": 2, "blue": 3})

    call = stub.calls[0]
    assert json.loads(call["data"]) == {"red": 1, "green": 2, "blue": 3}
    assert call["timeout"] == 2.5


def test_connection_error_becomes_timeout_error_after_one_attempt() -> None:
    session = JsonSession()
    stub = _RequestsSessionStub(req_exc.ConnectionError("refused"))
    session.session = stub  # type: ignore[assignment]

    with pytest.raises(ApiTimeoutError) as exc:
        session.get("http://h/status")

    assert exc.value.context == "GET http://h/status"
    assert len(stub.calls) == 1


def test_other_request_errors_become_api_error() -> None:
    session = JsonSession()
    session.session = _RequestsSessionStub(req_exc.InvalidURL("bad"))  # type: ignore[assignment]

    with pytest.raises(ApiError) as exc:
        session.post("nope/switch")

    assert not isinstance(exc.value, ApiTimeoutError)
