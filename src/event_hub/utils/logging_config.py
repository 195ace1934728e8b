"""
@file_name: logging_config.py
@author: NetMind.AI
@date: 2025-11-28
@description: Process-wide loguru configuration

Replaces loguru's default stderr sink with one whose level and format follow
the application settings. When serialize is enabled every record is emitted as
a JSON line, which carries the request_id bound by the request middleware.

Usage:
    from event_hub.utils.logging_config import setup_logging

    setup_logging(level="INFO", serialize=True)
"""

import sys
from typing import Optional

from loguru import logger


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[request_id]}</cyan> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_handler_id: Optional[int] = None


def setup_logging(level: str = "INFO", serialize: bool = False) -> int:
    """
    Configure the stderr sink

    Safe to call more than once (each app factory call reconfigures logging);
    only the sink installed here is replaced, other sinks are left alone.

    Args:
        level: Minimum log level
        serialize: Emit JSON lines instead of the human-readable format

    Returns:
        loguru handler id of the installed sink
    """
    global _handler_id

    if _handler_id is None:
        # First call: drop loguru's default handler
        logger.remove()
    else:
        logger.remove(_handler_id)

    logger.configure(extra={"request_id": "-"})
    _handler_id = logger.add(
        sys.stderr,
        level=level.upper(),
        format=DEFAULT_FORMAT,
        serialize=serialize,
        backtrace=False,
        diagnose=False,
    )
    logger.debug(f"Logging configured (level={level}, serialize={serialize})")
    return _handler_id
