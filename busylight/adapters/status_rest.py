from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from busylight.adapters.http_client import HttpConfig, JsonSession
from busylight.domain.ports import StatusPort
from busylight.domain.status import RemoteStatus

from .api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    MalformedResponseError,
    error_message,
    error_payload,
)


class StatusRestAdapter(StatusPort):
    """REST adapter for the light's status endpoint."""

    def __init__(self, *, request_timeout_s: Optional[float] = None) -> None:
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s)
        self.session = JsonSession(self.cfg)
        self._log = logging.getLogger(__name__)

    def fetch_status(self, host: str, status_path: str) -> RemoteStatus:
        url = f"{host}{status_path}"
        ctx = f"status[{url}]"
        resp = self.session.get(url)
        self._ensure_ok(resp, ctx)
        payload = self._json_any(resp, ctx)
        try:
            status = RemoteStatus.from_payload(payload)
        except ValueError as exc:
            raise MalformedResponseError(
                f"{ctx}: {exc}", status=resp.status_code, payload=payload, context=ctx
            ) from exc
        self._log.debug("%s -> on=%s color=%s", ctx, status.is_on, status.color)
        return status

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        status = resp.status_code
        payload = error_payload(resp)
        message = error_message(ctx, status, payload)
        if 400 <= status < 500:
            raise ApiClientError(message, status=status, payload=payload, context=ctx)
        if 500 <= status < 600:
            raise ApiServerError(message, status=status, payload=payload, context=ctx)
        raise ApiError(message, status=status, payload=payload, context=ctx)

    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Any:
        try:
            return resp.json()
        except Exception as exc:
            snippet = (getattr(resp, "text", "") or "")[:400]
            raise MalformedResponseError(
                f"{ctx}: invalid JSON response: {snippet}",
                status=resp.status_code,
                context=ctx,
            ) from exc
