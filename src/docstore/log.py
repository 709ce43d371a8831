"""Loguru setup: the package logs nothing until configure_logging() enables it"""

import sys

from loguru import logger

from docstore.config import Settings


logger.disable("docstore")

_sink_id: int | None = None


def configure_logging(settings: Settings) -> None:
    """Enable or disable docstore records and (re)install the stderr sink."""
    global _sink_id
    if _sink_id is not None:
        logger.remove(_sink_id)
        _sink_id = None
    if not settings.log_enabled:
        logger.disable("docstore")
        return
    logger.enable("docstore")
    _sink_id = logger.add(
        sys.stderr,
        level=settings.log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        filter="docstore",
    )


__all__ = ["logger", "configure_logging"]
