from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..domain.color import AVAILABLE, BUSY, Color
from ..domain.endpoint import SETTINGS_KEYS, EndpointConfig

DISPLAY_STATE_KEY = "displayState"
COLOR_KEYS = ("colorAvailable", "colorBusy")

_log = logging.getLogger(__name__)


@dataclass
class EndpointSettings:
    """Typed endpoint fields as entered in the host's settings UI."""

    host: Optional[str] = None
    endpoint_status: Optional[str] = None
    endpoint_switch: Optional[str] = None
    endpoint_on: Optional[str] = None
    endpoint_off: Optional[str] = None


class SettingsVM:
    """Keeps per-action settings state, no I/O here.

    Settings come from host storage and may be stale or hand-edited. Unusable
    values are dropped, never raised: a bad endpoint field leaves the config
    incomplete and the flows report that outcome.
    """

    def __init__(self, *, endpoints: Optional[EndpointSettings] = None) -> None:
        self.endpoints = endpoints or EndpointSettings()
        self.display_state: Optional[Color] = None
        # Keys this action does not own; written back untouched.
        self.extra: Dict[str, Any] = {}

    @classmethod
    def from_dict(cls, payload: Optional[Mapping[str, Any]]) -> "SettingsVM":
        vm = cls()
        if payload:
            vm.apply_dict(payload)
        return vm

    # ------------------------------------------------------------------
    def endpoint_config(self) -> EndpointConfig:
        return EndpointConfig(**asdict(self.endpoints))

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted host settings (camelCase keys) to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        owned = {*SETTINGS_KEYS.values(), *COLOR_KEYS, DISPLAY_STATE_KEY}
        self.extra = {key: value for key, value in payload.items() if key not in owned}

        updates: Dict[str, Any] = {}
        for attr, key in SETTINGS_KEYS.items():
            if key in payload:
                updates[attr] = self._coerce_optional_str(key, payload[key])
        if updates:
            self.endpoints = replace(self.endpoints, **updates)

        # colorAvailable/colorBusy are fixed; stored values are ignored.
        if DISPLAY_STATE_KEY in payload:
            self.display_state = self._coerce_color(DISPLAY_STATE_KEY, payload[DISPLAY_STATE_KEY])

    def to_dict(self) -> dict:
        snapshot: Dict[str, Any] = dict(self.extra)
        for attr, key in SETTINGS_KEYS.items():
            value = getattr(self.endpoints, attr)
            if value is not None:
                snapshot[key] = value
        snapshot["colorAvailable"] = AVAILABLE.to_payload()
        snapshot["colorBusy"] = BUSY.to_payload()
        if self.display_state is not None:
            snapshot[DISPLAY_STATE_KEY] = self.display_state.to_payload()
        return snapshot

    # ------------------------------------------------------------------
    @staticmethod
    def _coerce_optional_str(key: str, value: Any) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, str):
            _log.warning("Ignoring %s: expected a string, got %s", key, type(value).__name__)
            return None
        text = value.strip()
        return text or None

    @staticmethod
    def _coerce_color(key: str, value: Any) -> Optional[Color]:
        if value is None:
            return None
        if isinstance(value, Mapping):
            try:
                return Color.from_payload(value)
            except (TypeError, ValueError) as exc:
                _log.warning("Ignoring %s: %s", key, exc)
                return None
        _log.warning("Ignoring %s: expected an object with red/green/blue", key)
        return None
