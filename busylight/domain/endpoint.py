"""Endpoint settings and the completeness check that gates all network calls.

``EndpointConfig`` mirrors what the host persists: every field may be missing.
``resolve_endpoint`` is the single place where an incomplete config is turned
away; adapters and use cases only ever see a fully populated
``ResolvedEndpoint``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Tuple

# Dataclass field name -> host settings key.
SETTINGS_KEYS = {
    "host": "host",
    "endpoint_status": "endpointStatus",
    "endpoint_switch": "endpointSwitch",
    "endpoint_on": "endpointOn",
    "endpoint_off": "endpointOff",
}


@dataclass(frozen=True)
class EndpointConfig:
    """Host plus the four relative API paths, as read from settings."""

    host: Optional[str] = None
    endpoint_status: Optional[str] = None
    endpoint_switch: Optional[str] = None
    endpoint_on: Optional[str] = None
    endpoint_off: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "EndpointConfig":
        """Read the camelCase settings keys; non-string values count as missing."""
        values = {}
        for attr, key in SETTINGS_KEYS.items():
            raw = settings.get(key)
            values[attr] = raw if isinstance(raw, str) else None
        return cls(**values)


@dataclass(frozen=True)
class ResolvedEndpoint:
    """Complete endpoint configuration; every field is a non-empty string."""

    host: str
    endpoint_status: str
    endpoint_switch: str
    endpoint_on: str
    endpoint_off: str

    def url(self, path: str) -> str:
        return f"{self.host}{path}"


def _present(value: Optional[str]) -> bool:
    return isinstance(value, str) and value != ""


def missing_fields(config: EndpointConfig) -> Tuple[str, ...]:
    """Return the settings keys that are absent or empty, in declaration order."""
    return tuple(
        SETTINGS_KEYS[f.name]
        for f in fields(config)
        if not _present(getattr(config, f.name))
    )


def is_complete(config: EndpointConfig) -> bool:
    return not missing_fields(config)


def resolve_endpoint(config: EndpointConfig) -> Optional[ResolvedEndpoint]:
    if not is_complete(config):
        return None
    return ResolvedEndpoint(
        host=str(config.host),
        endpoint_status=str(config.endpoint_status),
        endpoint_switch=str(config.endpoint_switch),
        endpoint_on=str(config.endpoint_on),
        endpoint_off=str(config.endpoint_off),
    )


__all__ = [
    "EndpointConfig",
    "ResolvedEndpoint",
    "SETTINGS_KEYS",
    "is_complete",
    "missing_fields",
    "resolve_endpoint",
]
