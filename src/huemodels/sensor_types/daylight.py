from typing import Any, ClassVar

from pydantic import Field, field_validator

from .base import SensorConfig, SensorState, none_string_to_none


class DaylightConfig(SensorConfig):
    """Config of the bridge's built-in daylight sensor.

    See: https://developers.meethue.com/develop/hue-api/supported-devices/#daylight-sensor
    """

    sensor_type: ClassVar[str] = "Daylight"

    lat: str | None = Field(default=None)
    """Latitude, e.g. '052.2167N'. Write only on the bridge, reported as 'none'."""

    long: str | None = Field(default=None)
    """Longitude, e.g. '004.9000E'. Write only on the bridge, reported as 'none'."""

    sunriseoffset: int = Field(default=30, ge=-120, le=120)
    """Minutes after sunrise at which daylight is considered to start."""

    sunsetoffset: int = Field(default=-30, ge=-120, le=120)
    """Minutes after sunset at which daylight is considered to end."""

    configured: bool = Field(default=False)
    """Whether a location has been set."""

    @field_validator("lat", "long", mode="before")
    @classmethod
    def _coordinate_none_string(cls, value: Any) -> Any:
        return none_string_to_none(value)


class DaylightState(SensorState):
    sensor_type: ClassVar[str] = "Daylight"

    daylight: bool | None = Field(default=None)
    """Whether it is currently daylight, None until a location is configured."""
