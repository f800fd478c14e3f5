from __future__ import annotations
from typing import Any, Dict, Optional, Protocol

from busylight.domain.color import Color
from busylight.domain.status import RemoteStatus


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class StatusPort(Protocol):
    """Read the light's status endpoint."""

    def fetch_status(self, host: str, status_path: str) -> RemoteStatus: ...


class ActuatorPort(Protocol):
    """Write operations against the light."""

    def switch_color(self, host: str, switch_path: str, color: Color) -> None: ...
    def post_path(self, host: str, path: str) -> None: ...


class SwatchPort(Protocol):
    """Render a color into an embeddable image URI."""

    def render(self, color: Color) -> str: ...


class DisplayPort(Protocol):
    """Key display owned by the host (image + title)."""

    def set_image(self, image: str) -> None: ...
    def set_title(self, title: str) -> None: ...


class SettingsStoragePort(Protocol):
    """Persistence for per-action settings."""

    def load_settings(self) -> Optional[Dict[str, Any]]: ...
    def save_settings(self, settings: Dict[str, Any]) -> None: ...
