"""Parsed status report of the busy light."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from busylight.domain.color import Color

_CHANNELS = ("red", "green", "blue")


@dataclass(frozen=True)
class RemoteStatus:
    """One status read: on/off flag and, when reported, the light's color."""

    is_on: bool
    color: Optional[Color] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "RemoteStatus":
        """Build a status from the decoded JSON body.

        Raises:
            ValueError: If the payload is not an object, ``status`` is not
                ``"on"``/``"off"``, or a reported channel is not an int in
                ``[0, 255]``.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("status payload must be a JSON object")

        raw_status = payload.get("status")
        if not isinstance(raw_status, str):
            raise ValueError("status payload has no 'status' string")
        state = raw_status.strip().lower()
        if state not in ("on", "off"):
            raise ValueError(f"unexpected status value {raw_status!r}")

        reported = {key: payload[key] for key in _CHANNELS if payload.get(key) is not None}
        color: Optional[Color] = None
        if reported:
            try:
                color = Color.from_payload(reported)
            except TypeError as exc:
                raise ValueError(str(exc)) from exc

        return cls(is_on=state == "on", color=color)


__all__ = ["RemoteStatus"]
