from __future__ import annotations

import logging
from typing import Optional

import requests

from busylight.adapters.http_client import HttpConfig, JsonSession
from busylight.domain.color import Color
from busylight.domain.ports import ActuatorPort


class ActuatorRestAdapter(ActuatorPort):
    """REST adapter for the light's write endpoints.

    A request that completes counts as delivered whatever its HTTP status;
    only transport failures raise.
    """

    def __init__(self, *, request_timeout_s: Optional[float] = None) -> None:
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s)
        self.session = JsonSession(self.cfg)
        self._log = logging.getLogger(__name__)

    def switch_color(self, host: str, switch_path: str, color: Color) -> None:
        url = f"{host}{switch_path}"
        resp = self.session.post(url, json_body=color.to_payload())
        self._note_status(resp, f"switch[{url}]")

    def post_path(self, host: str, path: str) -> None:
        url = f"{host}{path}"
        resp = self.session.post(url)
        self._note_status(resp, f"post[{url}]")

    def _note_status(self, resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            self._log.debug("%s -> HTTP %s", ctx, resp.status_code)
            return
        self._log.warning("%s answered HTTP %s; response ignored", ctx, resp.status_code)
