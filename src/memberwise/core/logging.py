import logging
import os
from typing import IO, Optional, Union

ROOT_LOGGER = "memberwise"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LEVEL_ENV = "MEMBERWISE_LOG_LEVEL"

# Silent by default; applications attach handlers (or call configure_logging).
logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Module logger inside the memberwise hierarchy. Adds no handlers of its own."""
    return logging.getLogger(name)


def _resolve_level(level: Union[int, str, None], default: int) -> int:
    if isinstance(level, int):
        return level
    name = level if level is not None else os.getenv(LEVEL_ENV, "")
    resolved = logging.getLevelName(name.upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(
    level: Union[int, str, None] = None,
    stream: Optional[IO[str]] = None,
    default_level: int = logging.WARNING,
) -> logging.Handler:
    """
    Attach one stream handler to the memberwise logger and set its level.
    Level precedence: the level argument, then MEMBERWISE_LOG_LEVEL, then default_level.
    Calling again replaces the handler installed by the previous call.
    """
    global _handler
    logger = logging.getLogger(ROOT_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(level, default_level))
    _handler = handler
    return handler
