from collections.abc import Iterable, Mapping
from typing import Any

import huemodels.exceptions as exc
from huemodels.registry import PairedVariantRegistry

from .base import SensorConfig, SensorPayloadModel, SensorState
from .clip import (
    CLIPGenericFlagConfig,
    CLIPGenericFlagState,
    CLIPGenericStatusConfig,
    CLIPGenericStatusState,
    CLIPHumidityConfig,
    CLIPHumidityState,
    CLIPOpenCloseConfig,
    CLIPOpenCloseState,
    CLIPPresenceConfig,
    CLIPPresenceState,
    CLIPSwitchConfig,
    CLIPSwitchState,
    CLIPTemperatureConfig,
    CLIPTemperatureState,
)
from .daylight import DaylightConfig, DaylightState
from .unknown import UnknownSensorConfig, UnknownSensorState
from .zigbee import ZGPSwitchConfig, ZGPSwitchState, ZLLSwitchConfig, ZLLSwitchState

SENSOR_TYPE_PAIRS: tuple[tuple[type[SensorConfig], type[SensorState]], ...] = (
    (CLIPGenericFlagConfig, CLIPGenericFlagState),
    (CLIPGenericStatusConfig, CLIPGenericStatusState),
    (CLIPHumidityConfig, CLIPHumidityState),
    (CLIPOpenCloseConfig, CLIPOpenCloseState),
    (CLIPPresenceConfig, CLIPPresenceState),
    (CLIPSwitchConfig, CLIPSwitchState),
    (CLIPTemperatureConfig, CLIPTemperatureState),
    (DaylightConfig, DaylightState),
    (ZGPSwitchConfig, ZGPSwitchState),
    (ZLLSwitchConfig, ZLLSwitchState),
    (UnknownSensorConfig, UnknownSensorState),
)
"""Config and state model of every supported sensor type."""

SUPPORTED_SENSOR_TYPES: tuple[str, ...] = tuple(config_cls.sensor_type for config_cls, _ in SENSOR_TYPE_PAIRS)
"""Sensor types with dedicated config and state models, including 'Unknown'."""


def _check_pairs() -> None:
    for config_cls, state_cls in SENSOR_TYPE_PAIRS:
        if config_cls.sensor_type != state_cls.sensor_type:
            raise exc.MismatchedVariantPairError(
                "sensor types", config_cls.sensor_type, config_cls.__name__, state_cls.__name__
            )


def _constructors(models: Iterable[type[SensorPayloadModel]]) -> dict[str, Any]:
    return {model.sensor_type: model.from_payload for model in models}


_check_pairs()


SENSOR_TYPES: PairedVariantRegistry[SensorConfig, SensorState] = PairedVariantRegistry(
    "sensor types",
    SUPPORTED_SENSOR_TYPES,
    configs=_constructors([config_cls for config_cls, _ in SENSOR_TYPE_PAIRS]),
    states=_constructors([state_cls for _, state_cls in SENSOR_TYPE_PAIRS]),
)


def map_sensor_type(sensor_type: Any) -> str:
    """Map a bridge sensor `type` to a supported type, or 'Unknown'."""
    return SENSOR_TYPES.resolve(sensor_type)


def create_sensor_config(sensor_type: Any, config: Mapping[str, Any] | None = None) -> SensorConfig:
    """Create the config model for a sensor.

    Args:
        sensor_type: The sensor `type` reported by the bridge.
        config: The sensor's raw `config` object.

    Returns:
        The parsed config, as an UnknownSensorConfig if the type is not supported.

    Raises:
        ValidationError: If the payload does not match the config model.
    """
    return SENSOR_TYPES.create_config(sensor_type, config)


def create_sensor_state(sensor_type: Any, state: Mapping[str, Any] | None = None) -> SensorState:
    """Create the state model for a sensor.

    Args:
        sensor_type: The sensor `type` reported by the bridge.
        state: The sensor's raw `state` object.

    Returns:
        The parsed state, as an UnknownSensorState if the type is not supported.

    Raises:
        ValidationError: If the payload does not match the state model.
    """
    return SENSOR_TYPES.create_state(sensor_type, state)
