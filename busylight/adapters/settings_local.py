from __future__ import annotations
import json, os
from typing import Any, Dict, Optional
from busylight.domain.ports import SettingsStoragePort


class SettingsLocal(SettingsStoragePort):
    """Action settings stored as one JSON file on the local filesystem."""

    def __init__(self, path: str) -> None:
        self.path = path

    def load_settings(self) -> Optional[Dict[str, Any]]:
        if not os.path.exists(self.path):
            return None
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path}: settings must be a JSON object")
        return data

    def save_settings(self, settings: Dict[str, Any]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(settings, f, ensure_ascii=False, indent=2)
