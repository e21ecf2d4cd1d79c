import json
import logging
import os
from pathlib import Path
from typing import Any

import pytest

from huemodels import reset_config

TEST_DATA_PATH = Path(__file__).parent.joinpath("data")
TEST_API_RESPONSES_PATH = TEST_DATA_PATH / "api_responses"

assert TEST_API_RESPONSES_PATH.exists(), f"API responses directory {TEST_API_RESPONSES_PATH} does not exist"


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Drop any HUEMODELS__ environment variables and the cached config around each test."""
    for key in list(os.environ):
        if key.upper().startswith("HUEMODELS__"):
            monkeypatch.delenv(key)

    reset_config()
    yield
    reset_config()


@pytest.fixture
def restore_package_logger():
    """Restore the huemodels logger after a test reconfigures it."""
    logger = logging.getLogger("huemodels")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate

    yield logger

    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    logging.captureWarnings(False)


@pytest.fixture(scope="session")
def test_api_responses_path() -> Path:
    """Provide the path to the recorded bridge API responses."""
    return TEST_API_RESPONSES_PATH


@pytest.fixture(scope="session")
def sensors_response(test_api_responses_path: Path) -> dict[str, dict[str, Any]]:
    """A recorded `GET /api/<user>/sensors` response."""
    return json.loads((test_api_responses_path / "sensors.json").read_text(encoding="utf-8"))


@pytest.fixture(scope="session")
def lights_response(test_api_responses_path: Path) -> dict[str, dict[str, Any]]:
    """A recorded `GET /api/<user>/lights` response."""
    return json.loads((test_api_responses_path / "lights.json").read_text(encoding="utf-8"))
