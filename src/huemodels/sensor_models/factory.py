from typing import Any

from huemodels.registry import VariantRegistry

from .base import SensorModel
from .models import SENSOR_MODEL_CLASSES

SUPPORTED_SENSOR_MODELS: tuple[str, ...] = tuple(cls.model_id for cls in SENSOR_MODEL_CLASSES)
"""Model codes with a dedicated sensor model, including 'Unknown'."""

SENSOR_MODELS: VariantRegistry[SensorModel] = VariantRegistry(
    "sensor models",
    SUPPORTED_SENSOR_MODELS,
    {cls.model_id: cls for cls in SENSOR_MODEL_CLASSES},
)


def create_sensor_model(model_id: Any) -> SensorModel:
    """Create the sensor model for a bridge `modelid`.

    Args:
        model_id: The model code reported by the bridge.

    Returns:
        A new sensor model, or an UnknownSensorModel if the code is not supported.
    """
    return SENSOR_MODELS.create(model_id)
