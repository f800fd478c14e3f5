"""Target color policies for the two reconciliation flows.

Sync (on appear) only ever resolves ``AVAILABLE`` and only when the light
reports "on". Toggle (on key press) flips between ``BUSY`` and ``AVAILABLE``
using the red channel as the sole discriminator.
"""

from __future__ import annotations

from typing import Optional

from busylight.domain.color import AVAILABLE, BUSY, OFF, Color
from busylight.domain.status import RemoteStatus


def sync_target(status: Optional[RemoteStatus]) -> Optional[Color]:
    """Return ``AVAILABLE`` for an "on" light, ``None`` to skip actuation."""
    if status is not None and status.is_on:
        return AVAILABLE
    return None


def resolve_current_color(status: RemoteStatus, display_state: Optional[Color]) -> Color:
    """Pick the color the toggle decision is based on.

    The light's own report wins; the last displayed color is the fallback.
    """
    if status.color is not None:
        return status.color
    if display_state is not None:
        return display_state
    return OFF


def toggle_target(current: Color) -> Color:
    if current.red == 255:
        return AVAILABLE
    return BUSY


__all__ = ["resolve_current_color", "sync_target", "toggle_target"]
