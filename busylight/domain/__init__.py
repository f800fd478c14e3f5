"""Domain package exports for value objects and policies."""

from .color import AVAILABLE, BUSY, OFF, Color
from .endpoint import EndpointConfig, ResolvedEndpoint, is_complete, missing_fields, resolve_endpoint
from .errors import ErrorCode
from .outcome import ReconcileResult
from .reconciler import resolve_current_color, sync_target, toggle_target
from .status import RemoteStatus

__all__ = [
    "AVAILABLE",
    "BUSY",
    "OFF",
    "Color",
    "EndpointConfig",
    "ErrorCode",
    "ReconcileResult",
    "RemoteStatus",
    "ResolvedEndpoint",
    "is_complete",
    "missing_fields",
    "resolve_current_color",
    "resolve_endpoint",
    "sync_target",
    "toggle_target",
]
