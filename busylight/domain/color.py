"""RGB color value object shared by the reconciler, actuator and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple


@dataclass(frozen=True)
class Color:
    """Immutable 8-bit RGB triple.

    Serialized on the wire as ``{"red": int, "green": int, "blue": int}``.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be between 0 and 255, got {value}")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Color":
        """Build a color from a ``red/green/blue`` mapping; absent channels are 0."""
        return cls(
            red=payload.get("red", 0),
            green=payload.get("green", 0),
            blue=payload.get("blue", 0),
        )

    def to_payload(self) -> Dict[str, int]:
        return {"red": self.red, "green": self.green, "blue": self.blue}

    def to_rgb_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


AVAILABLE = Color(0, 255, 0)
BUSY = Color(255, 0, 0)
OFF = Color(0, 0, 0)


__all__ = ["AVAILABLE", "BUSY", "OFF", "Color"]
