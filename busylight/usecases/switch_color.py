from __future__ import annotations

import logging
from dataclasses import dataclass

from busylight.adapters.api_errors import ApiError
from busylight.domain.color import Color
from busylight.domain.endpoint import ResolvedEndpoint
from busylight.domain.ports import ActuatorPort
from busylight.usecases.error_mapping import map_api_error

_log = logging.getLogger(__name__)


@dataclass
class SwitchColor:
    """Tell the light to show ``color``; ``False`` when the request failed."""

    actuator_port: ActuatorPort

    def __call__(self, endpoint: ResolvedEndpoint, color: Color) -> bool:
        try:
            self.actuator_port.switch_color(endpoint.host, endpoint.endpoint_switch, color)
        except ApiError as exc:
            err = map_api_error(exc)
            _log.warning("Switching to %s failed [%s]: %s", color.to_hex(), err.code, err.message)
            return False
        _log.info("Light switched to %s", color.to_hex())
        return True


__all__ = ["SwitchColor"]
