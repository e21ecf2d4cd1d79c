from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from huemodels.const import UNKNOWN

from .base import SensorConfig, SensorState

# Unknown sensors may report the shared fields with other types or ranges. Each shared field is
# parsed as its declared type when it can be, and kept as reported otherwise.


class UnknownSensorConfig(SensorConfig):
    """Fallback config for sensor types we have no model for. Unrecognized keys are kept as extras."""

    sensor_type: ClassVar[str] = UNKNOWN

    on: bool | Any = Field(default=True, union_mode="left_to_right")
    reachable: bool | None | Any = Field(default=None, union_mode="left_to_right")
    battery: int | None | Any = Field(default=None, union_mode="left_to_right")
    url: str | None | Any = Field(default=None, union_mode="left_to_right")


class UnknownSensorState(SensorState):
    """Fallback state for sensor types we have no model for. Unrecognized keys are kept as extras."""

    sensor_type: ClassVar[str] = UNKNOWN

    lastupdated: datetime | None | Any = Field(default=None, union_mode="left_to_right")
