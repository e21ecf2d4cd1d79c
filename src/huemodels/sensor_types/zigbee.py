from typing import ClassVar

from .base import SensorConfig, SwitchState


class ZGPSwitchConfig(SensorConfig):
    sensor_type: ClassVar[str] = "ZGPSwitch"


class ZGPSwitchState(SwitchState):
    """State of a ZigBee Green Power switch such as the Hue Tap."""

    sensor_type: ClassVar[str] = "ZGPSwitch"


class ZLLSwitchConfig(SensorConfig):
    sensor_type: ClassVar[str] = "ZLLSwitch"


class ZLLSwitchState(SwitchState):
    """State of a ZigBee Light Link switch such as the Hue Dimmer Switch."""

    sensor_type: ClassVar[str] = "ZLLSwitch"
