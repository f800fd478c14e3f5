import json

import pytest

from busylight.adapters.settings_local import SettingsLocal
from busylight.tests.unit.helpers import COMPLETE_SETTINGS


def test_settings_round_trip(tmp_path):
    storage = SettingsLocal(str(tmp_path / "cfg" / "settings.json"))
    payload = dict(COMPLETE_SETTINGS, displayState={"red": 255, "green": 0, "blue": 0})

    storage.save_settings(payload)

    assert storage.load_settings() == payload


def test_missing_settings_file_loads_none(tmp_path):
    assert SettingsLocal(str(tmp_path / "absent.json")).load_settings() is None


def test_non_object_settings_file_is_rejected(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(["host"]), encoding="utf-8")

    with pytest.raises(ValueError):
        SettingsLocal(str(path)).load_settings()
