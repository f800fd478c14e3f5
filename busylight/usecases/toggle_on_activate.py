"""Use case run on key press: flip the light between BUSY and AVAILABLE."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from busylight.domain.color import Color
from busylight.domain.endpoint import EndpointConfig, missing_fields, resolve_endpoint
from busylight.domain.errors import ErrorCode, code_for_missing
from busylight.domain.outcome import ReconcileResult
from busylight.domain.ports import ActuatorPort, DisplayPort, StatusPort, SwatchPort
from busylight.domain.reconciler import resolve_current_color, toggle_target
from busylight.usecases.fetch_status import FetchStatus
from busylight.usecases.switch_color import SwitchColor

_log = logging.getLogger(__name__)


@dataclass
class ToggleOnActivate:
    """Use-case callable for the key-down event.

    The display is only touched after the light accepted the new color, so a
    failed call never leaves an icon that disagrees with the light.
    """

    status_port: StatusPort
    actuator_port: ActuatorPort
    swatch: SwatchPort
    display: DisplayPort

    def __call__(
        self, config: EndpointConfig, display_state: Optional[Color] = None
    ) -> ReconcileResult:
        """Toggle the light and return the display state to persist.

        Args:
            config: Endpoint settings as persisted by the host.
            display_state: Last color shown on the key; used when the light
                does not report its channels.

        Returns:
            ReconcileResult: On ``success`` ``display_state`` is the new color.
            The caller owns writing it back.

        Call Chain:
            Host key press -> ``BusyLightAction.on_key_down`` ->
            ``ToggleOnActivate.__call__`` -> status read -> switch -> render.
        """
        endpoint = resolve_endpoint(config)
        if endpoint is None:
            missing = missing_fields(config)
            _log.info("Settings incomplete, ignoring key press; missing: %s", ", ".join(missing))
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

        current = resolve_current_color(status, display_state)
        target = toggle_target(current)
        _log.debug("Toggle %s -> %s", current.to_hex(), target.to_hex())

        if not SwitchColor(self.actuator_port)(endpoint, target):
            return ReconcileResult(
                outcome="endpoint_unreachable",
                display_state=display_state,
                error_code=ErrorCode.HOST_NOT_RESPONDING,
            )

        image = self.swatch.render(target)
        self.display.set_image(image)
        return ReconcileResult(
            outcome="success",
            display_state=target,
            target=target,
            image=image,
        )


__all__ = ["ToggleOnActivate"]
