"""Key action adapter: host events in, settings to persist out.

The host hands over the action's persisted settings on every event. This
adapter turns them into typed settings, runs the matching use case and
returns the settings (with the updated ``displayState``) for the host to
store.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from ..adapters.actuator_rest import ActuatorRestAdapter
from ..adapters.status_rest import StatusRestAdapter
from ..adapters.swatch_png import PngSwatchRenderer
from ..domain.outcome import ReconcileResult
from ..domain.ports import ActuatorPort, DisplayPort, StatusPort, SwatchPort
from ..usecases.sync_on_appear import SyncOnAppear
from ..usecases.toggle_on_activate import ToggleOnActivate
from ..usecases.toggle_power import TogglePower
from ..viewmodels.settings_vm import SettingsVM


class BusyLightAction:
    """Bootstrap: wire the display and REST adapters into the three use cases."""

    def __init__(
        self,
        display: DisplayPort,
        *,
        status_port: Optional[StatusPort] = None,
        actuator_port: Optional[ActuatorPort] = None,
        swatch: Optional[SwatchPort] = None,
        request_timeout_s: Optional[float] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.display = display
        self.status_port = status_port or StatusRestAdapter(request_timeout_s=request_timeout_s)
        self.actuator_port = actuator_port or ActuatorRestAdapter(request_timeout_s=request_timeout_s)
        self.swatch = swatch or PngSwatchRenderer()

        self.uc_sync = SyncOnAppear(self.status_port, self.actuator_port, self.swatch, display)
        self.uc_toggle = ToggleOnActivate(self.status_port, self.actuator_port, self.swatch, display)
        self.uc_power = TogglePower(self.status_port, self.actuator_port, display)
        self.last_result: Optional[ReconcileResult] = None

    def on_will_appear(self, settings: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        vm = SettingsVM.from_dict(settings)
        return self._apply(vm, self.uc_sync(vm.endpoint_config(), vm.display_state))

    def on_key_down(self, settings: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        vm = SettingsVM.from_dict(settings)
        return self._apply(vm, self.uc_toggle(vm.endpoint_config(), vm.display_state))

    def on_long_press(self, settings: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        vm = SettingsVM.from_dict(settings)
        return self._apply(vm, self.uc_power(vm.endpoint_config(), vm.display_state))

    def _apply(self, vm: SettingsVM, result: ReconcileResult) -> Dict[str, Any]:
        self.last_result = result
        if not result.ok:
            self._log.info(
                "Reconcile ended with %s (code %s)",
                result.outcome,
                int(result.error_code) if result.error_code is not None else "-",
            )
        vm.display_state = result.display_state
        return vm.to_dict()


__all__ = ["BusyLightAction"]
