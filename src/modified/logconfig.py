import logging
import os
from typing import Optional

TRACE = 5

logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "modified"
DEFAULT_LEVEL = "WARNING"

DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] - %(message)s"
)

_handler: Optional[logging.Handler] = None


def get_level() -> str:
    """Get the default logging level from ``MODIFIED_LOGGING_LEVEL``.

    Unrecognized level names fall back to ``WARNING``."""
    level = os.getenv("MODIFIED_LOGGING_LEVEL", DEFAULT_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LEVEL
    return level


def use_dev_logger() -> bool:
    return os.getenv("MODIFIED_USE_DEV_LOGGER", "").lower() == "true"


def get_handler(
    level: Optional[str] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Handler:
    """Get the default logging handler.

    Records are only written to stderr if ``MODIFIED_USE_DEV_LOGGER`` is ``true``;
    otherwise a :py:class:`logging.NullHandler` is returned so that importing the
    library never produces output in a host application."""
    handler = logging.StreamHandler() if use_dev_logger() else logging.NullHandler()
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level or get_level())
    return handler


def configure_root_logger(
    level: Optional[str] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Logger:
    """Configure the package root logger and return it.

    Calling this more than once replaces the handler installed by the previous
    call rather than stacking a second one."""
    global _handler

    level = level or get_level()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = get_handler(level=level, fmt=fmt)
    logger.addHandler(_handler)
    return logger
