from __future__ import annotations

from typing import Any, Optional


class ApiError(RuntimeError):
    """Base class for busy light REST adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the light."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, payload=payload, context=context)


class ApiServerError(ApiError):
    """HTTP 5xx from the light."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, payload=payload, context=context)


class ApiTimeoutError(ApiError):
    """Transport level timeout or connectivity failure."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, context=context)


class MalformedResponseError(ApiError):
    """2xx response whose body could not be interpreted."""


def error_payload(resp: Any) -> Any:
    """Decoded JSON error body, else up to 400 chars of text, else ``None``."""
    try:
        return resp.json()
    except ValueError:
        return (getattr(resp, "text", "") or "")[:400] or None


def error_message(ctx: str, status: int, payload: Any) -> str:
    """Compose ``"<ctx>: <detail> (HTTP <status>)"``.

    The light's error bodies are undocumented. Detail is taken from a plain
    text body or from a top-level ``message``/``error``/``detail`` string of a
    JSON object; anything else yields the bare status.
    """
    detail = None
    if isinstance(payload, str):
        detail = payload.strip()
    elif isinstance(payload, dict):
        detail = next(
            (
                payload[key].strip()
                for key in ("message", "error", "detail")
                if isinstance(payload.get(key), str) and payload[key].strip()
            ),
            None,
        )
    if detail:
        return f"{ctx}: {detail} (HTTP {status})"
    return f"{ctx}: HTTP {status}"
