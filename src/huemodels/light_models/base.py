import math
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from huemodels.exceptions import UnsupportedCapabilityError


class XYPoint(BaseModel):
    """A point in the CIE 1931 xy chromaticity space."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(...)
    y: float = Field(...)

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y


def _cross(a: XYPoint, b: XYPoint) -> float:
    return a.x * b.y - a.y * b.x


def _distance(a: XYPoint, b: XYPoint) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def _closest_point_on_segment(start: XYPoint, end: XYPoint, point: XYPoint) -> XYPoint:
    dx, dy = end.x - start.x, end.y - start.y
    length_squared = dx * dx + dy * dy
    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_squared
    t = min(1.0, max(0.0, t))
    return XYPoint(x=start.x + dx * t, y=start.y + dy * t)


class ColorGamut(BaseModel):
    """The triangle of xy colours a light can reproduce."""

    model_config = ConfigDict(frozen=True)

    red: XYPoint
    """Red corner of the triangle."""

    green: XYPoint
    """Green corner of the triangle."""

    blue: XYPoint
    """Blue corner of the triangle."""

    def contains(self, point: XYPoint) -> bool:
        """Whether `point` lies inside the gamut triangle (edges included)."""
        v1 = XYPoint(x=self.green.x - self.red.x, y=self.green.y - self.red.y)
        v2 = XYPoint(x=self.blue.x - self.red.x, y=self.blue.y - self.red.y)
        q = XYPoint(x=point.x - self.red.x, y=point.y - self.red.y)

        denominator = _cross(v1, v2)
        s = _cross(q, v2) / denominator
        t = _cross(v1, q) / denominator

        return s >= 0.0 and t >= 0.0 and s + t <= 1.0

    def closest_point(self, point: XYPoint) -> XYPoint:
        """Return `point` if it is inside the gamut, else the nearest point on the triangle's edges."""
        if self.contains(point):
            return point

        candidates = (
            _closest_point_on_segment(self.red, self.green, point),
            _closest_point_on_segment(self.blue, self.red, point),
            _closest_point_on_segment(self.green, self.blue, point),
        )
        return min(candidates, key=lambda candidate: _distance(candidate, point))


GAMUT_A = ColorGamut(
    red=XYPoint(x=0.704, y=0.296),
    green=XYPoint(x=0.2151, y=0.7106),
    blue=XYPoint(x=0.138, y=0.08),
)
"""Gamut of Living Colors and first generation LightStrips."""

GAMUT_B = ColorGamut(
    red=XYPoint(x=0.675, y=0.322),
    green=XYPoint(x=0.409, y=0.518),
    blue=XYPoint(x=0.167, y=0.04),
)
"""Gamut of first generation Hue bulbs."""

GAMUT_C = ColorGamut(
    red=XYPoint(x=0.692, y=0.308),
    green=XYPoint(x=0.17, y=0.7),
    blue=XYPoint(x=0.153, y=0.048),
)
"""Gamut of Hue Go and LightStrips Plus."""

EXTENDED_COLOR_LIGHT = "Extended color light"
COLOR_LIGHT = "Color light"
COLOR_TEMPERATURE_LIGHT = "Color temperature light"
DIMMABLE_LIGHT = "Dimmable light"


def _gamma_expand(channel: float) -> float:
    # sRGB companding
    if channel > 0.04045:
        return ((channel + 0.055) / 1.055) ** 2.4
    return channel / 12.92


def rgb_to_xy_point(red: int, green: int, blue: int) -> XYPoint:
    """Convert an 8-bit RGB colour to an unclamped CIE xy point.

    Uses the wide gamut D65 conversion published for Hue lights. Black, which has no chromaticity,
    maps to (0, 0).
    """
    for channel in (red, green, blue):
        if not 0 <= channel <= 255:
            raise ValueError(f"RGB channel values must be between 0 and 255, got {channel}")

    r = _gamma_expand(red / 255)
    g = _gamma_expand(green / 255)
    b = _gamma_expand(blue / 255)

    x = r * 0.664511 + g * 0.154324 + b * 0.162028
    y = r * 0.283881 + g * 0.668433 + b * 0.047685
    z = r * 0.000088 + g * 0.072310 + b * 0.986039

    total = x + y + z
    if total == 0:
        return XYPoint(x=0.0, y=0.0)

    return XYPoint(x=x / total, y=y / total)


class LightModel:
    """Base class for a Hue light model.

    Subclasses only declare data; all behaviour lives here.
    """

    model_id: ClassVar[str]
    """The model code reported by the bridge, e.g. 'LCT001'."""

    manufacturer: ClassVar[str] = "Philips"
    """The manufacturer of the light."""

    name: ClassVar[str]
    """The product name of the light."""

    type: ClassVar[str]
    """The light type as reported by the bridge, e.g. 'Extended color light'."""

    color_gamut: ClassVar[ColorGamut | None] = None
    """The xy gamut the light can reproduce, if it supports colour."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model_id={self.model_id!r}, name={self.name!r})"

    @property
    def supports_color(self) -> bool:
        """Whether the light is known to show colours. False for unrecognized models."""
        return self.type in (EXTENDED_COLOR_LIGHT, COLOR_LIGHT)

    @property
    def supports_color_temperature(self) -> bool:
        """Whether the light supports white colour temperatures."""
        return self.type in (EXTENDED_COLOR_LIGHT, COLOR_TEMPERATURE_LIGHT)

    def rgb_to_xy(self, red: int, green: int, blue: int) -> tuple[float, float]:
        """Convert an RGB colour to the closest xy point this light can reproduce.

        Args:
            red: Red channel, 0-255.
            green: Green channel, 0-255.
            blue: Blue channel, 0-255.

        Returns:
            The (x, y) coordinates, rounded to four decimal places.

        Raises:
            UnsupportedCapabilityError: If the light has no colour gamut.
            ValueError: If a channel is out of range.
        """
        if self.color_gamut is None:
            raise UnsupportedCapabilityError(type(self).__name__, "color")

        point = self.color_gamut.closest_point(rgb_to_xy_point(red, green, blue))
        return round(point.x, 4), round(point.y, 4)
