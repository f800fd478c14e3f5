"""Shared HTTP transport utilities for the busy light adapters.

This module provides a thin wrapper around ``requests.Session`` so the status
and actuator adapters share header construction and transport error
translation.

Dependencies:
    - ``requests`` for network I/O.
    - ``busylight.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``StatusRestAdapter`` and ``ActuatorRestAdapter``.
    - Every call is a single attempt. Retries and backoff belong to callers.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from busylight.adapters.api_errors import ApiError, ApiTimeoutError

_log = logging.getLogger(__name__)


@dataclass
class HttpConfig:
    """Timeout configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Timeout in seconds, or ``None`` to keep the
            transport's default (no timeout).
    """
    request_timeout_s: Optional[float] = None


class JsonSession:
    """``requests`` wrapper that speaks JSON and raises ``ApiError`` subclasses.

    Callers decide how to map non-2xx responses; this class only fails for
    transport-level problems.
    """

    def __init__(self, cfg: Optional[HttpConfig] = None) -> None:
        """Create the session.

        Args:
            cfg: Timeout settings; defaults to ``HttpConfig()``.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.cfg = cfg or HttpConfig()

    @staticmethod
    def _headers(accept: str = "application/json") -> Dict[str, str]:
        # The light's firmware expects Content-Type even on GET.
        return {"Accept": accept, "Content-Type": "application/json"}

    def get(self, url: str) -> requests.Response:
        """Send one GET request.

        Raises:
            ApiTimeoutError: On timeout or connection failure.
            ApiError: On any other ``requests`` failure.
        """
        context = f"GET {url}"
        _log.debug(context)
        try:
            return self.session.get(
                url,
                headers=self._headers(),
                timeout=self.cfg.request_timeout_s,
            )
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise ApiTimeoutError(f"Timeout contacting {url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiError(str(exc), context=context) from exc

    def post(self, url: str, *, json_body: Optional[Dict[str, Any]] = None) -> requests.Response:
        """Send one POST request, serializing ``json_body`` with ``json.dumps``.

        Raises:
            ApiTimeoutError: On timeout or connection failure.
            ApiError: On any other ``requests`` failure.
        """
        context = f"POST {url}"
        data = None if json_body is None else json.dumps(json_body)
        _log.debug("%s %s", context, data or "")
        try:
            return self.session.post(
                url,
                data=data,
                headers=self._headers(),
                timeout=self.cfg.request_timeout_s,
            )
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise ApiTimeoutError(f"Timeout contacting {url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiError(str(exc), context=context) from exc


__all__ = ["HttpConfig", "JsonSession"]
