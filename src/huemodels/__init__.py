import logging

from . import exceptions
from .config import HuemodelsConfig, get_config, reset_config
from .const import UNKNOWN
from .light_models import LIGHT_MODELS, LightModel, UnknownLightModel, create_light_model
from .logging_ import enable_logging
from .registry import PairedVariantRegistry, VariantRegistry, resolve
from .sensor_models import SENSOR_MODELS, SensorModel, UnknownSensorModel, create_sensor_model
from .sensor_types import (
    SENSOR_TYPES,
    SensorConfig,
    SensorState,
    UnknownSensorConfig,
    UnknownSensorState,
    create_sensor_config,
    create_sensor_state,
    map_sensor_type,
)

logging.getLogger("huemodels").addHandler(logging.NullHandler())

__all__ = [
    "LIGHT_MODELS",
    "SENSOR_MODELS",
    "SENSOR_TYPES",
    "UNKNOWN",
    "HuemodelsConfig",
    "LightModel",
    "PairedVariantRegistry",
    "SensorConfig",
    "SensorModel",
    "SensorState",
    "UnknownLightModel",
    "UnknownSensorConfig",
    "UnknownSensorModel",
    "UnknownSensorState",
    "VariantRegistry",
    "create_light_model",
    "create_sensor_config",
    "create_sensor_model",
    "create_sensor_state",
    "enable_logging",
    "exceptions",
    "get_config",
    "map_sensor_type",
    "reset_config",
    "resolve",
]
