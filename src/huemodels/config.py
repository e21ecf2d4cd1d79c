import logging
from functools import cache
from typing import Annotated

from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from huemodels.const import LOG_LEVELS

LOGGER = logging.getLogger(__name__)


class HuemodelsConfig(BaseSettings):
    """Configuration for huemodels.

    Values come from `HUEMODELS__` environment variables. No `.env` file is read unless the
    application passes one, e.g. `HuemodelsConfig(_env_file=".env")`.
    """

    model_config = SettingsConfigDict(
        env_prefix="huemodels__",
        env_ignore_empty=True,
        extra="ignore",
        validate_by_name=True,
        use_attribute_docstrings=True,
    )

    log_level: Annotated[LOG_LEVELS, BeforeValidator(str.upper)] = Field(default="INFO")
    """Logging level for huemodels."""

    unknown_code_log_level: Annotated[LOG_LEVELS, BeforeValidator(str.upper)] = Field(default="DEBUG")
    """Level at which a fallback to the 'Unknown' variant is logged."""

    @property
    def unknown_code_log_level_int(self) -> int:
        """The `unknown_code_log_level` as a `logging` level number."""
        return logging.getLevelNamesMapping()[self.unknown_code_log_level]


@cache
def get_config() -> HuemodelsConfig:
    """Get the process-wide configuration, loading it on first use.

    Returns:
        The cached HuemodelsConfig instance.
    """
    config = HuemodelsConfig()
    LOGGER.debug("Loaded configuration: %s", config)
    return config


def reset_config() -> None:
    """Drop the cached configuration so the next `get_config` call reloads it."""
    get_config.cache_clear()
