# shoprest/log_config.py
"""Logging configuration for the shoprest library using Loguru.

Every shoprest module logs through the shared Loguru ``logger`` re-exported
here: requests and response statuses at DEBUG, resource operations at INFO,
error responses at ERROR and request bodies at TRACE. Access tokens are never
logged. Applications call :func:`configure_logging` once to choose the level
and sink, optionally keeping only records emitted by shoprest itself.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def _is_shoprest_record(record) -> bool:
    return record["name"].split(".", 1)[0] == "shoprest"


def configure_logging(level: str = "INFO", sink=sys.stderr, *, shoprest_only=False):
    """
    Configures Loguru logger.

    Removes default handlers and adds a new one with the specified level and sink.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "shoprest.log").
        shoprest_only: Drop records that do not come from shoprest modules.
    """
    logger.remove()
    logger.add(
        sink,
        level=level.upper(),
        format=LOG_FORMAT,
        filter=_is_shoprest_record if shoprest_only else None,
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=False,
    )
    logger.enable("shoprest")
    logger.info(f"shoprest logging configured with level={level.upper()}")
