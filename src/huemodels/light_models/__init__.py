from .base import GAMUT_A, GAMUT_B, GAMUT_C, ColorGamut, LightModel, XYPoint, rgb_to_xy_point
from .factory import LIGHT_MODELS, SUPPORTED_LIGHT_MODELS, create_light_model
from .models import (
    LCT001,
    LCT002,
    LCT003,
    LCT007,
    LIGHT_MODEL_CLASSES,
    LLC006,
    LLC007,
    LLC010,
    LLC011,
    LLC012,
    LLC013,
    LLC020,
    LLM001,
    LLM010,
    LLM011,
    LLM012,
    LST001,
    LST002,
    LWB004,
    LWB006,
    LWB007,
    UnknownLightModel,
)

__all__ = [
    "GAMUT_A",
    "GAMUT_B",
    "GAMUT_C",
    "LCT001",
    "LCT002",
    "LCT003",
    "LCT007",
    "LIGHT_MODELS",
    "LIGHT_MODEL_CLASSES",
    "LLC006",
    "LLC007",
    "LLC010",
    "LLC011",
    "LLC012",
    "LLC013",
    "LLC020",
    "LLM001",
    "LLM010",
    "LLM011",
    "LLM012",
    "LST001",
    "LST002",
    "LWB004",
    "LWB006",
    "LWB007",
    "SUPPORTED_LIGHT_MODELS",
    "ColorGamut",
    "LightModel",
    "UnknownLightModel",
    "XYPoint",
    "create_light_model",
    "rgb_to_xy_point",
]
