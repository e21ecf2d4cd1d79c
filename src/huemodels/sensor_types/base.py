from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator


def none_string_to_none(value: Any) -> Any:
    """The bridge reports missing values as the string 'none'."""
    if isinstance(value, str) and value.lower() == "none":
        return None
    return value


class SensorPayloadModel(BaseModel):
    """Base for models parsed from a raw bridge payload."""

    model_config = ConfigDict(extra="allow", frozen=True)

    sensor_type: ClassVar[str]
    """The sensor `type` this model belongs to, e.g. 'ZLLSwitch'."""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None = None) -> Self:
        """Build the model from the raw JSON object reported by the bridge.

        Args:
            payload: The raw object, or None for an empty model.

        Raises:
            ValidationError: If the payload does not match the model.
        """
        return cls.model_validate({} if payload is None else payload)

    def extra(self, key: str, default: Any = None) -> Any:
        """Get a payload value that has no declared field."""
        return (self.model_extra or {}).get(key, default)


class SensorConfig(SensorPayloadModel):
    """Represents the `config` object of a sensor."""

    on: bool = Field(default=True)
    """Whether the sensor is enabled."""

    reachable: bool | None = Field(default=None)
    """Whether the bridge can reach the sensor."""

    battery: int | None = Field(default=None, ge=0, le=100)
    """Battery level in percent, for battery powered sensors."""

    url: str | None = Field(default=None)
    """URL of the CLIP sensor's backing service."""

    @field_validator("battery", "url", mode="before")
    @classmethod
    def _none_string(cls, value: Any) -> Any:
        return none_string_to_none(value)


class SensorState(SensorPayloadModel):
    """Represents the `state` object of a sensor."""

    lastupdated: datetime | None = Field(default=None)
    """When the state last changed, in UTC."""

    @field_validator("lastupdated", mode="before")
    @classmethod
    def _none_string(cls, value: Any) -> Any:
        return none_string_to_none(value)

    @field_validator("lastupdated", mode="after")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # bridge timestamps carry no offset but are UTC
        if isinstance(value, datetime) and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class SwitchState(SensorState):
    """State shared by all switch sensors."""

    buttonevent: int | None = Field(default=None)
    """The last button event, encoded per sensor model."""
