"""Result type returned by the reconciliation flows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from busylight.domain.color import Color
from busylight.domain.errors import ErrorCode

Outcome = Literal["success", "config_incomplete", "endpoint_unreachable", "no_change"]


@dataclass(frozen=True)
class ReconcileResult:
    """Immutable summary of one flow invocation.

    Attributes:
        outcome: Flow outcome token.
        target: Color sent to the actuator, if any.
        image: Data URI handed to the display, if one was rendered.
        title: Title text handed to the display, if any.
        display_state: Last displayed color after this call. Equals the input
            display state unless a new swatch was shown.
        missing: Settings keys that were missing for ``config_incomplete``.
        error_code: Numeric code for non-success outcomes.
    """

    outcome: Outcome
    display_state: Optional[Color] = None
    target: Optional[Color] = None
    image: Optional[str] = None
    title: Optional[str] = None
    missing: Tuple[str, ...] = ()
    error_code: Optional[ErrorCode] = None

    @property
    def ok(self) -> bool:
        return self.outcome == "success"


__all__ = ["Outcome", "ReconcileResult"]
