"""Structured logging setup for Teamwork AI.

stdout belongs to the MCP stdio transport, so nothing here ever writes to it.
"""

import logging
import sys

from config import LOG_LEVEL, LOGS_DIR

LOGGER_NAME = "teamwork-mcp"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configure the shared logger once; later calls only adjust the level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if LOGS_DIR is not None:
        LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOGS_DIR / f"{LOGGER_NAME}.log")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # uvicorn installs its own root handlers in HTTP mode
    logger.propagate = False
    return logger


logger = setup_logging()
