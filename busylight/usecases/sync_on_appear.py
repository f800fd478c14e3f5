"""Use case run when the key appears: make the light match an "on" report.

Flow:
    validate config -> fetch status -> (on) switch to AVAILABLE -> render
    swatch -> show swatch. The host name is shown as title in every case, or
    ``"no host"`` when none is configured.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from busylight.domain.color import Color
from busylight.domain.endpoint import EndpointConfig, missing_fields, resolve_endpoint
from busylight.domain.errors import ErrorCode, code_for_missing
from busylight.domain.outcome import ReconcileResult
from busylight.domain.ports import ActuatorPort, DisplayPort, StatusPort, SwatchPort
from busylight.domain.reconciler import sync_target
from busylight.usecases.fetch_status import FetchStatus
from busylight.usecases.switch_color import SwitchColor

_log = logging.getLogger(__name__)

NO_HOST_TITLE = "no host"


def host_title(config: EndpointConfig) -> str:
    return config.host or NO_HOST_TITLE


@dataclass
class SyncOnAppear:
    """Use-case callable for the appear event.

    Attributes:
        status_port: Adapter reading the light's status.
        actuator_port: Adapter switching the light's color.
        swatch: Renderer producing the key image.
        display: Host display receiving image and title.
    """

    status_port: StatusPort
    actuator_port: ActuatorPort
    swatch: SwatchPort
    display: DisplayPort

    def __call__(
        self, config: EndpointConfig, display_state: Optional[Color] = None
    ) -> ReconcileResult:
        """Sync the light and key image with the reported state.

        Args:
            config: Endpoint settings as persisted by the host.
            display_state: Last color shown on the key, if known.

        Returns:
            ReconcileResult: ``success`` only when the light reported "on" and
            accepted the switch to AVAILABLE. ``display_state`` is unchanged
            otherwise.
        """
        title = host_title(config)
        endpoint = resolve_endpoint(config)
        if endpoint is None:
            missing = missing_fields(config)
            _log.info("Settings incomplete, missing: %s", ", ".join(missing))
            self.display.set_title(title)
            return ReconcileResult(
                outcome="config_incomplete",
                display_state=display_state,
                title=title,
                missing=missing,
                error_code=code_for_missing(missing),
            )

        status = FetchStatus(self.status_port)(endpoint)
        target = sync_target(status)
        if target is None:
            self.display.set_title(title)
            if status is None:
                return ReconcileResult(
                    outcome="endpoint_unreachable",
                    display_state=display_state,
                    title=title,
                    error_code=ErrorCode.HOST_NOT_RESPONDING,
                )
            _log.debug("Light reports off; leaving it alone")
            return ReconcileResult(outcome="no_change", display_state=display_state, title=title)

        if not SwitchColor(self.actuator_port)(endpoint, target):
            self.display.set_title(title)
            return ReconcileResult(
                outcome="endpoint_unreachable",
                display_state=display_state,
                title=title,
                error_code=ErrorCode.HOST_NOT_RESPONDING,
            )

        image = self.swatch.render(target)
        self.display.set_image(image)
        self.display.set_title(title)
        return ReconcileResult(
            outcome="success",
            display_state=target,
            target=target,
            image=image,
            title=title,
        )


__all__ = ["NO_HOST_TITLE", "SyncOnAppear", "host_title"]
