from typing import ClassVar

from huemodels.const import UNKNOWN

from .base import ButtonAction, ButtonEvent, SensorModel

DIMMER_SWITCH_ACTIONS: dict[int, ButtonAction] = {
    0: "initial_press",
    1: "hold",
    2: "short_release",
    3: "long_release",
}
"""Last digit of a dimmer switch `buttonevent`, e.g. 1002 is button 1, short release."""

TAP_BUTTONS: dict[int, int] = {34: 1, 16: 2, 17: 3, 18: 4}
"""Hue Tap `buttonevent` values keyed to their button number."""


class PHDL00(SensorModel):
    model_id = "PHDL00"
    name = "Daylight"
    type = "Daylight"


class DimmerSwitch(SensorModel):
    """Hue Dimmer Switch, four buttons reporting `button * 1000 + action`."""

    name = "Hue Dimmer Switch"
    type = "ZLLSwitch"
    button_count: ClassVar[int] = 4

    @property
    def is_switch(self) -> bool:
        return True

    def parse_button_event(self, event: int | None) -> ButtonEvent | None:
        if event is None:
            return None

        button, action_code = divmod(event, 1000)
        action = DIMMER_SWITCH_ACTIONS.get(action_code)
        if action is None or not 1 <= button <= self.button_count:
            return None

        return ButtonEvent(button=button, action=action, raw=event)


class RWL020(DimmerSwitch):
    model_id = "RWL020"


class RWL021(DimmerSwitch):
    model_id = "RWL021"


class ZGPSWITCH(SensorModel):
    """Hue Tap, a battery-less switch that only reports presses."""

    model_id = "ZGPSWITCH"
    name = "Hue Tap"
    type = "ZGPSwitch"

    @property
    def is_switch(self) -> bool:
        return True

    def parse_button_event(self, event: int | None) -> ButtonEvent | None:
        button = TAP_BUTTONS.get(event) if event is not None else None
        if button is None:
            return None
        return ButtonEvent(button=button, action="press", raw=event)


class UnknownSensorModel(SensorModel):
    """Fallback for sensor models we have no data for."""

    model_id = UNKNOWN
    manufacturer = UNKNOWN
    name = UNKNOWN
    type = UNKNOWN


SENSOR_MODEL_CLASSES: tuple[type[SensorModel], ...] = (
    PHDL00,
    RWL020,
    RWL021,
    ZGPSWITCH,
    UnknownSensorModel,
)
