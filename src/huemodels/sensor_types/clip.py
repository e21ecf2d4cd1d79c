"""Config and state models for CLIP sensors.

CLIP sensors are virtual sensors created through the bridge API and updated by other applications.
"""

from typing import ClassVar

from pydantic import Field

from .base import SensorConfig, SensorState, SwitchState


class CLIPGenericFlagConfig(SensorConfig):
    sensor_type: ClassVar[str] = "CLIPGenericFlag"


class CLIPGenericFlagState(SensorState):
    sensor_type: ClassVar[str] = "CLIPGenericFlag"

    flag: bool | None = Field(default=None)
    """The flag value."""


class CLIPGenericStatusConfig(SensorConfig):
    sensor_type: ClassVar[str] = "CLIPGenericStatus"


class CLIPGenericStatusState(SensorState):
    sensor_type: ClassVar[str] = "CLIPGenericStatus"

    status: int | None = Field(default=None)
    """The status value."""


class CLIPHumidityConfig(SensorConfig):
    sensor_type: ClassVar[str] = "CLIPHumidity"


class CLIPHumidityState(SensorState):
    sensor_type: ClassVar[str] = "CLIPHumidity"

    humidity: int | None = Field(default=None, ge=0, le=10000)
    """Relative humidity in 0.01% steps."""

    @property
    def humidity_percent(self) -> float | None:
        """Relative humidity in percent."""
        if self.humidity is None:
            return None
        return self.humidity / 100


class CLIPOpenCloseConfig(SensorConfig):
    sensor_type: ClassVar[str] = "CLIPOpenClose"


class CLIPOpenCloseState(SensorState):
    sensor_type: ClassVar[str] = "CLIPOpenClose"

    open: bool | None = Field(default=None)
    """Whether the contact is open."""


class CLIPPresenceConfig(SensorConfig):
    sensor_type: ClassVar[str] = "CLIPPresence"


class CLIPPresenceState(SensorState):
    sensor_type: ClassVar[str] = "CLIPPresence"

    presence: bool | None = Field(default=None)
    """Whether presence is detected."""


class CLIPSwitchConfig(SensorConfig):
    sensor_type: ClassVar[str] = "CLIPSwitch"


class CLIPSwitchState(SwitchState):
    sensor_type: ClassVar[str] = "CLIPSwitch"


class CLIPTemperatureConfig(SensorConfig):
    sensor_type: ClassVar[str] = "CLIPTemperature"


class CLIPTemperatureState(SensorState):
    sensor_type: ClassVar[str] = "CLIPTemperature"

    temperature: int | None = Field(default=None)
    """Temperature in 0.01 degrees Celsius."""

    @property
    def celsius(self) -> float | None:
        """Temperature in degrees Celsius."""
        if self.temperature is None:
            return None
        return self.temperature / 100
