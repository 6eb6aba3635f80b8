"""Centralized logging configuration using loguru.

Library output is off by default so importing versioninfo never touches the
host program's handlers. Call configure_logging() to turn it on.
"""

import sys

from loguru import logger

from versioninfo.config import settings

logger.disable("versioninfo")


def configure_logging(level: str | None = None, sink=sys.stderr) -> int:
    """Enable versioninfo log output.

    Args:
        level: Minimum level to emit; defaults to VERSIONINFO_LOG_LEVEL.
        sink: Where to send versioninfo records (default stderr).

    Returns:
        The loguru handler id, for passing to logger.remove().
    """
    logger.enable("versioninfo")
    return logger.add(
        sink, level=(level or settings.log_level).upper(), filter="versioninfo"
    )


__all__ = ["configure_logging", "logger"]
