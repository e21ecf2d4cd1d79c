import logging

import coloredlogs

from huemodels.config import get_config
from huemodels.const import LOG_LEVELS, PACKAGE_KEY

FORMAT_DATE = "%Y-%m-%d"
FORMAT_TIME = "%H:%M:%S"
FORMAT_DATETIME = f"{FORMAT_DATE} {FORMAT_TIME}"
FMT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s.%(funcName)s:%(lineno)d ─ %(message)s"


def enable_logging(log_level: LOG_LEVELS | None = None) -> None:
    """Set up the logging, using the configured `log_level` unless one is given."""
    if log_level is None:
        log_level = get_config().log_level

    logger = logging.getLogger(PACKAGE_KEY)

    logger.setLevel(log_level)

    # don't propagate to root - the bridge client owns the root logger
    logger.propagate = False

    logger.handlers.clear()

    # handler at NOTSET, the logger itself is clamped below
    coloredlogs.install(level=logging.NOTSET, logger=logger, fmt=FMT, datefmt=FORMAT_DATETIME)

    # coloredlogs.install resets the logger level
    logger.setLevel(log_level)

    logging.captureWarnings(True)
