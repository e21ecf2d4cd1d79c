from huemodels.const import UNKNOWN

from .base import (
    COLOR_LIGHT,
    COLOR_TEMPERATURE_LIGHT,
    DIMMABLE_LIGHT,
    EXTENDED_COLOR_LIGHT,
    GAMUT_A,
    GAMUT_B,
    GAMUT_C,
    LightModel,
    rgb_to_xy_point,
)

# ── Hue bulbs ────────────────────────────────────────────────────────


class LCT001(LightModel):
    model_id = "LCT001"
    name = "Hue bulb A19"
    type = EXTENDED_COLOR_LIGHT
    color_gamut = GAMUT_B


class LCT002(LightModel):
    model_id = "LCT002"
    name = "Hue Spot BR30"
    type = EXTENDED_COLOR_LIGHT
    color_gamut = GAMUT_B


class LCT003(LightModel):
    model_id = "LCT003"
    name = "Hue Spot GU10"
    type = EXTENDED_COLOR_LIGHT
    color_gamut = GAMUT_B


class LCT007(LightModel):
    model_id = "LCT007"
    name = "Hue bulb A19"
    type = EXTENDED_COLOR_LIGHT
    color_gamut = GAMUT_B


# ── Living Colors ────────────────────────────────────────────────────


class LLC006(LightModel):
    model_id = "LLC006"
    name = "Living Colors Gen3 Iris"
    type = COLOR_LIGHT
    color_gamut = GAMUT_A


class LLC007(LightModel):
    model_id = "LLC007"
    name = "Living Colors Gen3 Bloom, Aura"
    type = COLOR_LIGHT
    color_gamut = GAMUT_A


class LLC010(LightModel):
    model_id = "LLC010"
    name = "Hue Living Colors Iris"
    type = COLOR_LIGHT
    color_gamut = GAMUT_A


class LLC011(LightModel):
    model_id = "LLC011"
    name = "Hue Living Colors Bloom"
    type = COLOR_LIGHT
    color_gamut = GAMUT_A


class LLC012(LightModel):
    model_id = "LLC012"
    name = "Hue Living Colors Bloom"
    type = COLOR_LIGHT
    color_gamut = GAMUT_A


class LLC013(LightModel):
    model_id = "LLC013"
    name = "Disney Living Colors"
    type = COLOR_LIGHT
    color_gamut = GAMUT_A


class LLC020(LightModel):
    model_id = "LLC020"
    name = "Hue Go"
    type = EXTENDED_COLOR_LIGHT
    color_gamut = GAMUT_C


# ── Modules ──────────────────────────────────────────────────────────


class LLM001(LightModel):
    model_id = "LLM001"
    name = "Color Light Module"
    type = EXTENDED_COLOR_LIGHT
    color_gamut = GAMUT_B


class LLM010(LightModel):
    model_id = "LLM010"
    name = "Color Temperature Module"
    type = COLOR_TEMPERATURE_LIGHT


class LLM011(LightModel):
    model_id = "LLM011"
    name = "Color Temperature Module"
    type = COLOR_TEMPERATURE_LIGHT


class LLM012(LightModel):
    model_id = "LLM012"
    name = "Color Temperature Module"
    type = COLOR_TEMPERATURE_LIGHT


# ── LightStrips ──────────────────────────────────────────────────────


class LST001(LightModel):
    model_id = "LST001"
    name = "Hue LightStrips"
    type = COLOR_LIGHT
    color_gamut = GAMUT_A


class LST002(LightModel):
    model_id = "LST002"
    name = "Hue LightStrips Plus"
    type = EXTENDED_COLOR_LIGHT
    color_gamut = GAMUT_C


# ── White bulbs ──────────────────────────────────────────────────────


class LWB004(LightModel):
    model_id = "LWB004"
    name = "Hue A19 Lux"
    type = DIMMABLE_LIGHT


class LWB006(LightModel):
    model_id = "LWB006"
    name = "Hue A19 Lux"
    type = DIMMABLE_LIGHT


class LWB007(LightModel):
    model_id = "LWB007"
    name = "Hue A19 Lux"
    type = DIMMABLE_LIGHT


class UnknownLightModel(LightModel):
    """Fallback for light models we have no data for.

    `supports_color` is False because the light is not known to show colour. `rgb_to_xy` still
    answers, with the unclamped xy point, so a caller that sends colours to unrecognized bulbs
    anyway gets the colour as requested and the bridge clamps it.
    """

    model_id = UNKNOWN
    manufacturer = UNKNOWN
    name = UNKNOWN
    type = UNKNOWN

    @property
    def supports_color(self) -> bool:
        return False

    @property
    def supports_color_temperature(self) -> bool:
        return False

    def rgb_to_xy(self, red: int, green: int, blue: int) -> tuple[float, float]:
        point = rgb_to_xy_point(red, green, blue)
        return round(point.x, 4), round(point.y, 4)


LIGHT_MODEL_CLASSES: tuple[type[LightModel], ...] = (
    LCT001,
    LCT002,
    LCT003,
    LCT007,
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
