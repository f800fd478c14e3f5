"""Use case for reading the light's status as an optional value."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from busylight.adapters.api_errors import ApiError
from busylight.domain.endpoint import ResolvedEndpoint
from busylight.domain.ports import StatusPort
from busylight.domain.status import RemoteStatus
from busylight.usecases.error_mapping import map_api_error

_log = logging.getLogger(__name__)


@dataclass
class FetchStatus:
    """Return the light's status, or ``None`` when it is unavailable.

    HTTP errors, transport failures and malformed bodies are all logged and
    collapse into ``None``; none of them is ever read as "on" or "off".
    """

    status_port: StatusPort

    def __call__(self, endpoint: ResolvedEndpoint) -> Optional[RemoteStatus]:
        try:
            return self.status_port.fetch_status(endpoint.host, endpoint.endpoint_status)
        except ApiError as exc:
            err = map_api_error(exc)
            _log.warning("Status read failed [%s]: %s", err.code, err.message)
            return None


__all__ = ["FetchStatus"]
