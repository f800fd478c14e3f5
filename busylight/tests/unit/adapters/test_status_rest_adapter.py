from __future__ import annotations

import pytest

from busylight.adapters.api_errors import (
    ApiClientError,
    ApiServerError,
    ApiTimeoutError,
    MalformedResponseError,
)
from busylight.adapters.status_rest import StatusRestAdapter
from busylight.domain.color import AVAILABLE
from busylight.tests.unit.helpers import INVALID_JSON, JsonSessionStub, ResponseStub


def _adapter(*responses) -> tuple[StatusRestAdapter, JsonSessionStub]:
    adapter = StatusRestAdapter()
    stub = JsonSessionStub(responses)
    adapter.session = stub  # type: ignore[assignment]
    return adapter, stub


def test_fetch_status_concatenates_host_and_path() -> None:
    adapter, stub = _adapter(ResponseStub({"status": "on", "red": 0, "green": 255, "blue": 0}))

    status = adapter.fetch_status("http://light.local", "/api/status")

    assert stub.calls == [{"method": "GET", "url": "http://light.local/api/status"}]
    assert status.is_on is True
    assert status.color == AVAILABLE


def test_fetch_status_accepts_any_2xx() -> None:
    adapter, _ = _adapter(ResponseStub({"status": "off"}, status_code=203))

    assert adapter.fetch_status("http://h", "/s").is_on is False


def test_fetch_status_raises_server_error_on_5xx() -> None:
    adapter, _ = _adapter(ResponseStub({"detail": "boom"}, status_code=500))

    with pytest.raises(ApiServerError) as exc:
        adapter.fetch_status("http://h", "/s")
    assert exc.value.status == 500
    assert "HTTP 500" in str(exc.value)


def test_fetch_status_raises_client_error_on_4xx() -> None:
    adapter, _ = _adapter(ResponseStub("not found", status_code=404))

    with pytest.raises(ApiClientError):
        adapter.fetch_status("http://h", "/s")


def test_fetch_status_invalid_json_is_malformed() -> None:
    adapter, _ = _adapter(ResponseStub(INVALID_JSON))

    with pytest.raises(MalformedResponseError):
        adapter.fetch_status("http://h", "/s")


def test_fetch_status_unknown_state_is_malformed() -> None:
    adapter, _ = _adapter(ResponseStub({"status": "busy"}))

    with pytest.raises(MalformedResponseError) as exc:
        adapter.fetch_status("http://h", "/s")
    assert exc.value.payload == {"status": "busy"}


def test_fetch_status_propagates_transport_errors() -> None:
    adapter, _ = _adapter(ApiTimeoutError("Timeout contacting http://h/s"))

    with pytest.raises(ApiTimeoutError):
        adapter.fetch_status("http://h", "/s")


@pytest.mark.parametrize(
    "body",
    [{"error": "sensor fault"}, {"message": "sensor fault"}, "sensor fault\n"],
)
def test_error_detail_from_light_body_is_in_message(body) -> None:
    adapter, _ = _adapter(ResponseStub(body, status_code=500))

    with pytest.raises(ApiServerError) as exc:
        adapter.fetch_status("http://h", "/s")
    assert str(exc.value).endswith(": sensor fault (HTTP 500)")


def test_nested_error_body_falls_back_to_bare_status() -> None:
    adapter, _ = _adapter(ResponseStub({"error": {"code": 7}}, status_code=503))

    with pytest.raises(ApiServerError) as exc:
        adapter.fetch_status("http://h", "/s")
    assert str(exc.value).endswith(": HTTP 503")
    assert exc.value.payload == {"error": {"code": 7}}
