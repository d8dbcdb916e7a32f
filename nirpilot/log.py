"""Logging setup.

The package stays silent until ``setup_logging`` is called. Output goes to
stderr because stdout carries the MCP protocol when running as a server.
"""

import sys

from loguru import logger

LOGGER_NAME = "nirpilot"
_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} [{level}] {name} - {message}"

logger.disable(LOGGER_NAME)


def setup_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=_FORMAT)
    logger.enable(LOGGER_NAME)
