from busylight.adapters.api_errors import ApiTimeoutError
from busylight.domain.color import BUSY
from busylight.domain.endpoint import EndpointConfig
from busylight.domain.status import RemoteStatus
from busylight.tests.unit.helpers import (
    COMPLETE_SETTINGS,
    FakeActuatorPort,
    FakeStatusPort,
    RecordingDisplay,
)
from busylight.usecases.toggle_power import TogglePower

CONFIG = EndpointConfig.from_settings(COMPLETE_SETTINGS)


def test_light_on_is_switched_off() -> None:
    actuator = FakeActuatorPort()
    display = RecordingDisplay()
    uc = TogglePower(FakeStatusPort(RemoteStatus(is_on=True)), actuator, display)

    result = uc(CONFIG, display_state=BUSY)

    assert result.outcome == "success"
    assert result.display_state == BUSY
    assert actuator.posted == [{"host": "http://light.local", "path": "/api/off"}]
    assert actuator.switched == []
    assert display.titles == ["off"]


def test_light_off_is_switched_on() -> None:
    actuator = FakeActuatorPort()
    uc = TogglePower(FakeStatusPort(RemoteStatus(is_on=False)), actuator, RecordingDisplay())

    assert uc(CONFIG).title == "on"
    assert actuator.posted[0]["path"] == "/api/on"


def test_power_failure_is_unreachable() -> None:
    display = RecordingDisplay()
    uc = TogglePower(
        FakeStatusPort(RemoteStatus(is_on=True)),
        FakeActuatorPort(ApiTimeoutError("timeout")),
        display,
    )

    assert uc(CONFIG).outcome == "endpoint_unreachable"
    assert display.titles == []


def test_incomplete_config_skips_network() -> None:
    status_port = FakeStatusPort(RemoteStatus(is_on=True))
    uc = TogglePower(status_port, FakeActuatorPort(), RecordingDisplay())

    assert uc(EndpointConfig(host="http://x")).outcome == "config_incomplete"
    assert status_port.calls == []
