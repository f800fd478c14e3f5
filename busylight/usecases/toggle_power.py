"""Use case for switching the light itself off or on (long press)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from busylight.adapters.api_errors import ApiError
from busylight.domain.color import Color
from busylight.domain.endpoint import EndpointConfig, missing_fields, resolve_endpoint
from busylight.domain.errors import ErrorCode, code_for_missing
from busylight.domain.outcome import ReconcileResult
from busylight.domain.ports import ActuatorPort, DisplayPort, StatusPort
from busylight.usecases.error_mapping import map_api_error
from busylight.usecases.fetch_status import FetchStatus

_log = logging.getLogger(__name__)


@dataclass
class TogglePower:
    """POST ``endpointOff`` when the light reports "on", ``endpointOn`` otherwise.

    The key title shows the new power state; the swatch and display state are
    left untouched.
    """

    status_port: StatusPort
    actuator_port: ActuatorPort
    display: DisplayPort

    def __call__(
        self, config: EndpointConfig, display_state: Optional[Color] = None
    ) -> ReconcileResult:
        endpoint = resolve_endpoint(config)
        if endpoint is None:
            missing = missing_fields(config)
            return ReconcileResult(
                outcome="config_incomplete",
                display_state=display_state,
                missing=missing,
                error_code=code_for_missing(missing),
            )

        status = FetchStatus(self.status_port)(endpoint)
        if status is None:
            return ReconcileResult(
                outcome="endpoint_unreachable",
                display_state=display_state,
                error_code=ErrorCode.HOST_NOT_RESPONDING,
            )

        path, title = (endpoint.endpoint_off, "off") if status.is_on else (endpoint.endpoint_on, "on")
        try:
            self.actuator_port.post_path(endpoint.host, path)
        except ApiError as exc:
            err = map_api_error(exc)
            _log.warning("Power switch failed [%s]: %s", err.code, err.message)
            return ReconcileResult(
                outcome="endpoint_unreachable",
                display_state=display_state,
                error_code=ErrorCode.HOST_NOT_RESPONDING,
            )

        _log.info("Light powered %s", title)
        self.display.set_title(title)
        return ReconcileResult(outcome="success", display_state=display_state, title=title)


__all__ = ["TogglePower"]
