"""Solid-color PNG swatches for the key display.

Rendering is a pure function of color and size: Pillow writes no timestamp
chunks, so equal inputs give byte-identical output.
"""

from __future__ import annotations

import base64
import io

from PIL import Image

from busylight.domain.color import Color
from busylight.domain.ports import SwatchPort

DATA_URI_PREFIX = "data:image/png;base64,"


def render_swatch_png(color: Color, width: int = 100, height: int = 100) -> bytes:
    if width <= 0 or height <= 0:
        raise ValueError(f"swatch size must be positive, got {width}x{height}")
    img = Image.new("RGB", (width, height), color.to_rgb_tuple())
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def render_swatch(color: Color, width: int = 100, height: int = 100) -> str:
    """Return the swatch as base64 text, ready for a data URI."""
    return base64.b64encode(render_swatch_png(color, width, height)).decode("ascii")


def to_data_uri(payload: str) -> str:
    return f"{DATA_URI_PREFIX}{payload}"


class PngSwatchRenderer(SwatchPort):
    """``SwatchPort`` producing PNG data URIs of a fixed size."""

    def __init__(self, width: int = 100, height: int = 100) -> None:
        self.width = width
        self.height = height

    def render(self, color: Color) -> str:
        return to_data_uri(render_swatch(color, self.width, self.height))


__all__ = [
    "DATA_URI_PREFIX",
    "PngSwatchRenderer",
    "render_swatch",
    "render_swatch_png",
    "to_data_uri",
]
