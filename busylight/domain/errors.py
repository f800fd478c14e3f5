"""Numeric error codes reported to the host alongside flow outcomes.

Values are kept stable so a settings UI can map them to messages.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence


class ErrorCode(IntEnum):
    HOST_NOT_SET = 100
    HOST_NOT_RESPONDING = 200
    ENDPOINT_STATUS_NOT_SET = 300
    ENDPOINT_SWITCH_NOT_SET = 400
    ENDPOINT_ON_NOT_SET = 500
    ENDPOINT_OFF_NOT_SET = 600
    UNKNOWN_ERROR = 700


_MISSING_FIELD_CODES = {
    "host": ErrorCode.HOST_NOT_SET,
    "endpointStatus": ErrorCode.ENDPOINT_STATUS_NOT_SET,
    "endpointSwitch": ErrorCode.ENDPOINT_SWITCH_NOT_SET,
    "endpointOn": ErrorCode.ENDPOINT_ON_NOT_SET,
    "endpointOff": ErrorCode.ENDPOINT_OFF_NOT_SET,
}


def code_for_missing(missing: Sequence[str]) -> Optional[ErrorCode]:
    """Return the code of the first missing settings key, if any."""
    for key in missing:
        code = _MISSING_FIELD_CODES.get(key)
        if code is not None:
            return code
    return None


__all__ = ["ErrorCode", "code_for_missing"]
