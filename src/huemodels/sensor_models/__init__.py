from .base import ButtonEvent, SensorModel
from .factory import SENSOR_MODELS, SUPPORTED_SENSOR_MODELS, create_sensor_model
from .models import PHDL00, RWL020, RWL021, SENSOR_MODEL_CLASSES, ZGPSWITCH, DimmerSwitch, UnknownSensorModel

__all__ = [
    "PHDL00",
    "RWL020",
    "RWL021",
    "SENSOR_MODELS",
    "SENSOR_MODEL_CLASSES",
    "SUPPORTED_SENSOR_MODELS",
    "ZGPSWITCH",
    "ButtonEvent",
    "DimmerSwitch",
    "SensorModel",
    "UnknownSensorModel",
    "create_sensor_model",
]
