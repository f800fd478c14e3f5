# busylight/app/main.py
from __future__ import annotations

import argparse
import base64
import logging
import sys
from typing import List, Optional

from ..adapters.settings_local import SettingsLocal
from ..adapters.swatch_png import DATA_URI_PREFIX
from ..utils import logging as logging_utils
from .action import BusyLightAction

_log = logging.getLogger(__name__)


class ConsoleDisplay:
    """Display stand-in for the command line: titles to stdout, image to a file."""

    def __init__(self, image_out: Optional[str] = None) -> None:
        self.image_out = image_out
        self.title: Optional[str] = None
        self.image: Optional[str] = None

    def set_title(self, title: str) -> None:
        self.title = title
        print(title)

    def set_image(self, image: str) -> None:
        self.image = image
        if not self.image_out:
            return
        payload = image[len(DATA_URI_PREFIX):] if image.startswith(DATA_URI_PREFIX) else image
        with open(self.image_out, "wb") as f:
            f.write(base64.b64decode(payload))
        _log.debug("Swatch written to %s", self.image_out)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI args for a single reconciliation run."""
    parser = argparse.ArgumentParser(description="Sync or toggle a network busy light.")
    parser.add_argument("command", choices=("appear", "toggle", "power"))
    parser.add_argument("--settings", required=True, help="JSON settings file (read and updated)")
    parser.add_argument("--image-out", default=None, help="write the rendered PNG swatch here")
    parser.add_argument("--timeout", type=float, default=None, help="request timeout in seconds")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint; exit code 1 when the light or the settings need attention."""
    args = _parse_args(argv)
    logging_utils.configure_root(args.log_level)

    storage = SettingsLocal(args.settings)
    try:
        settings = storage.load_settings() or {}
    except ValueError as exc:
        # Unreadable file: report and leave it as is for the user to fix.
        _log.error("Cannot read settings %s: %s", args.settings, exc)
        print("busylight: config_incomplete", file=sys.stderr)
        return 1
    display = ConsoleDisplay(image_out=args.image_out)
    action = BusyLightAction(display, request_timeout_s=args.timeout)

    handlers = {
        "appear": action.on_will_appear,
        "toggle": action.on_key_down,
        "power": action.on_long_press,
    }
    updated = handlers[args.command](settings)
    storage.save_settings(updated)

    result = action.last_result
    if result is None or result.outcome not in ("success", "no_change"):
        outcome = result.outcome if result is not None else "unknown"
        print(f"busylight: {outcome}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
