from typing import Any

from huemodels.registry import VariantRegistry

from .base import LightModel
from .models import LIGHT_MODEL_CLASSES

SUPPORTED_LIGHT_MODELS: tuple[str, ...] = tuple(cls.model_id for cls in LIGHT_MODEL_CLASSES)
"""Model codes with a dedicated light model, including 'Unknown'."""

LIGHT_MODELS: VariantRegistry[LightModel] = VariantRegistry(
    "light models",
    SUPPORTED_LIGHT_MODELS,
    {cls.model_id: cls for cls in LIGHT_MODEL_CLASSES},
)


def create_light_model(model_id: Any) -> LightModel:
    """Create the light model for a bridge `modelid`.

    Args:
        model_id: The model code reported by the bridge.

    Returns:
        A new light model, or an UnknownLightModel if the code is not supported.
    """
    return LIGHT_MODELS.create(model_id)
