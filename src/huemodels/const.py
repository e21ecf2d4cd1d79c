from typing import Literal

UNKNOWN = "Unknown"
"""Code of the fallback variant every registry must contain."""

PACKAGE_KEY = "huemodels"

LOG_LEVELS = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
