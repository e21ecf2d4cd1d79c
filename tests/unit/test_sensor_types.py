from datetime import UTC, datetime
from typing import Any

import pytest
from pydantic import ValidationError

from huemodels import UNKNOWN
from huemodels.exceptions import MismatchedVariantPairError
from huemodels.sensor_types import factory
from huemodels.sensor_types import (
    SENSOR_TYPES,
    SUPPORTED_SENSOR_TYPES,
    CLIPGenericFlagConfig,
    CLIPGenericFlagState,
    CLIPHumidityState,
    CLIPTemperatureState,
    DaylightConfig,
    DaylightState,
    UnknownSensorConfig,
    UnknownSensorState,
    ZLLSwitchConfig,
    ZLLSwitchState,
    create_sensor_config,
    create_sensor_state,
    map_sensor_type,
)


def test_zll_switch_state_from_payload() -> None:
    state = create_sensor_state("ZLLSwitch", {"buttonevent": 34})

    assert type(state) is ZLLSwitchState
    assert state.buttonevent == 34


def test_bogus_type_creates_unknown_pair() -> None:
    config = create_sensor_config("Bogus", {})
    state = create_sensor_state("Bogus", {})

    assert type(config) is UnknownSensorConfig
    assert type(state) is UnknownSensorState


@pytest.mark.parametrize("sensor_type", [*SUPPORTED_SENSOR_TYPES, "Bogus", "zllswitch", "ZLLPresence", "", None])
def test_config_and_state_always_pair(sensor_type) -> None:
    config = create_sensor_config(sensor_type, {})
    state = create_sensor_state(sensor_type, {})

    assert type(config).sensor_type == type(state).sensor_type == map_sensor_type(sensor_type)


def test_sensor_type_registries_share_codes() -> None:
    assert SENSOR_TYPES.configs.codes == SENSOR_TYPES.states.codes == set(SUPPORTED_SENSOR_TYPES)
    assert list(SENSOR_TYPES.configs).count(UNKNOWN) == 1
    assert len(SUPPORTED_SENSOR_TYPES) == len(set(SUPPORTED_SENSOR_TYPES)) == 11


def test_generic_flag_resolves_to_its_own_pair() -> None:
    config, state = SENSOR_TYPES.create_pair("CLIPGenericFlag", {"on": True}, {"flag": True})

    assert type(config) is CLIPGenericFlagConfig
    assert type(state) is CLIPGenericFlagState
    assert state.flag is True


def test_generic_flag_with_trailing_space_is_unknown() -> None:
    assert map_sensor_type("CLIPGenericFlag ") == UNKNOWN


def test_none_payload_builds_defaults() -> None:
    config = create_sensor_config("ZLLSwitch")
    state = create_sensor_state("ZLLSwitch", None)

    assert type(config) is ZLLSwitchConfig
    assert config.on is True
    assert config.battery is None
    assert state.buttonevent is None
    assert state.lastupdated is None


def test_invalid_payload_error_propagates() -> None:
    with pytest.raises(ValidationError):
        create_sensor_config("ZLLSwitch", {"battery": 150})


def test_non_mapping_payload_error_propagates() -> None:
    with pytest.raises(ValidationError):
        create_sensor_state("ZLLSwitch", ["buttonevent", 34])  # pyright: ignore[reportArgumentType]


def test_states_are_frozen() -> None:
    state = create_sensor_state("ZLLSwitch", {"buttonevent": 34})

    with pytest.raises(ValidationError):
        state.buttonevent = 16  # pyright: ignore[reportAttributeAccessIssue]


# ── payload parsing ──────────────────────────────────────────────────


def test_lastupdated_is_utc() -> None:
    state = create_sensor_state("ZLLSwitch", {"buttonevent": 1002, "lastupdated": "2016-03-10T08:35:01"})

    assert state.lastupdated == datetime(2016, 3, 10, 8, 35, 1, tzinfo=UTC)


def test_lastupdated_none_string() -> None:
    assert create_sensor_state("CLIPTemperature", {"lastupdated": "none"}).lastupdated is None


def test_config_none_strings() -> None:
    config = create_sensor_config("CLIPTemperature", {"battery": "none", "url": "none", "reachable": True})

    assert config.battery is None
    assert config.url is None
    assert config.reachable is True


def test_humidity_and_temperature_units() -> None:
    humidity = create_sensor_state("CLIPHumidity", {"humidity": 3850})
    temperature = create_sensor_state("CLIPTemperature", {"temperature": 2150})

    assert isinstance(humidity, CLIPHumidityState) and humidity.humidity_percent == 38.5
    assert isinstance(temperature, CLIPTemperatureState) and temperature.celsius == 21.5
    assert CLIPTemperatureState().celsius is None


def test_daylight_config() -> None:
    config = create_sensor_config(
        "Daylight",
        {"on": True, "configured": True, "sunriseoffset": 30, "sunsetoffset": -30, "lat": "none", "long": "none"},
    )

    assert isinstance(config, DaylightConfig)
    assert config.configured is True
    assert config.lat is None and config.long is None
    assert config.sunsetoffset == -30


def test_daylight_offset_out_of_range() -> None:
    with pytest.raises(ValidationError):
        create_sensor_config("Daylight", {"sunriseoffset": 200})


def test_unknown_variants_keep_extra_keys() -> None:
    config = create_sensor_config("ZLLPresence", {"on": True, "sensitivity": 2})
    state = create_sensor_state("ZLLPresence", {"presence": True})

    assert config.extra("sensitivity") == 2
    assert state.extra("presence") is True
    assert state.extra("missing", "default") == "default"


def test_sensors_response_dispatch(sensors_response: dict[str, dict[str, Any]]) -> None:
    """Every sensor in a recorded bridge response parses into its matching pair."""
    parsed = {
        sensor_id: SENSOR_TYPES.create_pair(sensor["type"], sensor["config"], sensor["state"])
        for sensor_id, sensor in sensors_response.items()
    }

    assert {sensor_id: type(state).sensor_type for sensor_id, (_, state) in parsed.items()} == {
        "1": "Daylight",
        "2": "ZLLSwitch",
        "3": "ZGPSwitch",
        "4": "CLIPTemperature",
        "5": "CLIPGenericFlag",
        "6": UNKNOWN,
    }

    daylight_config, daylight_state = parsed["1"]
    assert isinstance(daylight_config, DaylightConfig)
    assert isinstance(daylight_state, DaylightState) and daylight_state.daylight is False

    _, temperature = parsed["4"]
    assert isinstance(temperature, CLIPTemperatureState) and temperature.celsius == 21.5


def test_mismatched_catalogue_pair_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(factory, "SENSOR_TYPE_PAIRS", ((ZLLSwitchConfig, DaylightState),))

    with pytest.raises(MismatchedVariantPairError) as err:
        factory._check_pairs()

    assert err.value.code == "ZLLSwitch"


# ── unknown sensor types ─────────────────────────────────────────────


def test_unknown_config_keeps_values_a_known_type_would_reject() -> None:
    config = create_sensor_config("ZLLFutureSensor", {"on": "maybe", "battery": 254, "url": "none", "ledindication": 1})

    assert type(config) is UnknownSensorConfig
    assert config.on == "maybe"
    assert config.battery == 254
    assert config.url is None
    assert config.extra("ledindication") == 1


def test_unknown_config_still_parses_valid_values() -> None:
    config = create_sensor_config("ZLLFutureSensor", {"on": False, "reachable": True, "battery": "80"})

    assert config.on is False
    assert config.reachable is True
    assert config.battery == 80


def test_unknown_state_keeps_unparsable_lastupdated() -> None:
    state = create_sensor_state("ZLLFutureSensor", {"lastupdated": "soon"})

    assert type(state) is UnknownSensorState
    assert state.lastupdated == "soon"


@pytest.mark.parametrize(
    ("lastupdated", "expected"),
    [("2016-03-10T08:35:01", datetime(2016, 3, 10, 8, 35, 1, tzinfo=UTC)), ("none", None), (None, None)],
)
def test_unknown_state_parses_valid_lastupdated(lastupdated, expected) -> None:
    assert create_sensor_state("ZLLFutureSensor", {"lastupdated": lastupdated}).lastupdated == expected


def test_invalid_config_still_dispatches_unknown_pair(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUEMODELS__UNKNOWN_CODE_LOG_LEVEL", "verbose")

    config, state = SENSOR_TYPES.create_pair("ZLLFutureSensor", {}, {})

    assert (type(config), type(state)) == (UnknownSensorConfig, UnknownSensorState)
