from .base import SensorConfig, SensorState, SwitchState
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
from .factory import (
    SENSOR_TYPE_PAIRS,
    SENSOR_TYPES,
    SUPPORTED_SENSOR_TYPES,
    create_sensor_config,
    create_sensor_state,
    map_sensor_type,
)
from .unknown import UnknownSensorConfig, UnknownSensorState
from .zigbee import ZGPSwitchConfig, ZGPSwitchState, ZLLSwitchConfig, ZLLSwitchState

__all__ = [
    "SENSOR_TYPES",
    "SENSOR_TYPE_PAIRS",
    "SUPPORTED_SENSOR_TYPES",
    "CLIPGenericFlagConfig",
    "CLIPGenericFlagState",
    "CLIPGenericStatusConfig",
    "CLIPGenericStatusState",
    "CLIPHumidityConfig",
    "CLIPHumidityState",
    "CLIPOpenCloseConfig",
    "CLIPOpenCloseState",
    "CLIPPresenceConfig",
    "CLIPPresenceState",
    "CLIPSwitchConfig",
    "CLIPSwitchState",
    "CLIPTemperatureConfig",
    "CLIPTemperatureState",
    "DaylightConfig",
    "DaylightState",
    "SensorConfig",
    "SensorState",
    "SwitchState",
    "UnknownSensorConfig",
    "UnknownSensorState",
    "ZGPSwitchConfig",
    "ZGPSwitchState",
    "ZLLSwitchConfig",
    "ZLLSwitchState",
    "create_sensor_config",
    "create_sensor_state",
    "map_sensor_type",
]
