from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict

ButtonAction = Literal["initial_press", "hold", "short_release", "long_release", "press"]


class ButtonEvent(BaseModel):
    """A decoded switch `buttonevent` value."""

    model_config = ConfigDict(frozen=True)

    button: int
    """The 1-based number of the button."""

    action: ButtonAction
    """What happened to the button."""

    raw: int
    """The raw `buttonevent` value reported by the bridge."""


class SensorModel:
    """Base class for a Hue sensor model."""

    model_id: ClassVar[str]
    """The model code reported by the bridge, e.g. 'RWL020'."""

    manufacturer: ClassVar[str] = "Philips"
    """The manufacturer of the sensor."""

    name: ClassVar[str]
    """The product name of the sensor."""

    type: ClassVar[str]
    """The sensor type this model reports, e.g. 'ZLLSwitch'."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model_id={self.model_id!r}, name={self.name!r})"

    @property
    def is_switch(self) -> bool:
        return False

    def parse_button_event(self, event: int | None) -> ButtonEvent | None:
        """Decode a raw `buttonevent` value.

        Returns:
            The decoded event, or None if the model has no buttons or the value is not recognized.
        """
        return None
