"""Translate adapter errors into UseCaseError instances."""

from __future__ import annotations

from busylight.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
    MalformedResponseError,
)
from busylight.domain.ports import UseCaseError

ENDPOINT_UNREACHABLE = "ENDPOINT_UNREACHABLE"
MALFORMED_RESPONSE = "MALFORMED_RESPONSE"


def map_api_error(exc: ApiError) -> UseCaseError:
    """Map an adapter exception to a stable UseCaseError code.

    Returns:
        UseCaseError: ``MALFORMED_RESPONSE`` for unreadable 2xx bodies,
        ``ENDPOINT_UNREACHABLE`` for timeouts and HTTP errors.
    """
    if isinstance(exc, MalformedResponseError):
        return UseCaseError(MALFORMED_RESPONSE, f"Light sent an unreadable response: {exc}")
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError(ENDPOINT_UNREACHABLE, "Light not reachable. Check host and network.")
    if isinstance(exc, ApiClientError):
        return UseCaseError(ENDPOINT_UNREACHABLE, f"Light rejected the request (HTTP {exc.status}).")
    if isinstance(exc, ApiServerError):
        return UseCaseError(ENDPOINT_UNREACHABLE, f"Light error (HTTP {exc.status}).")
    return UseCaseError(ENDPOINT_UNREACHABLE, str(exc) or "Light request failed.")


__all__ = ["ENDPOINT_UNREACHABLE", "MALFORMED_RESPONSE", "map_api_error"]
