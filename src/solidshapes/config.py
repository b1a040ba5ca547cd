"""
Configuration & Global Constants
================================
This module serves as the central registry for the settings shared by the
demos and the command line entry point.

Settings are read from the environment so the demos can be made chatty
without touching the code. Command line flags take precedence.

Exports:
    LOG_LEVEL_ENV (str): Environment variable holding the log level name.
    LOG_FILE_ENV (str): Environment variable holding an optional log file path.
    AREA_REL_TOLERANCE (float): Relative tolerance for comparing areas.
    RULE_WIDTH (int): Width of the banner rules printed by the demos.
"""
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV: str = "SOLIDSHAPES_LOG_LEVEL"
LOG_FILE_ENV: str = "SOLIDSHAPES_LOG_FILE"
DEFAULT_LOG_LEVEL: int = logging.WARNING

AREA_REL_TOLERANCE: float = 1e-9
RULE_WIDTH: int = 57


def parse_log_level(name: Optional[str]) -> int:
    """
    Resolve a level name such as "debug" or "INFO" to a logging level.
    Unknown or empty names fall back to DEFAULT_LOG_LEVEL.
    """
    if not name:
        return DEFAULT_LOG_LEVEL

    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{name}', using {logging.getLevelName(DEFAULT_LOG_LEVEL)}.")
        return DEFAULT_LOG_LEVEL
    return level


def get_log_level() -> int:
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV))


def get_log_file() -> Optional[str]:
    return os.environ.get(LOG_FILE_ENV) or None
