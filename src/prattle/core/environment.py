"""
Environment configuration for prattle.

Two environment variables tune the command line front end:

    PRATTLE_LOG_LEVEL   DEBUG | INFO | WARNING | ERROR | CRITICAL (default WARNING)
    PRATTLE_OUTPUT      tree | json (default tree)

Command line flags take precedence over both.

Usage:
    from prattle.core.environment import get_log_level, get_output_format

    level = get_log_level()          # e.g. logging.WARNING
    fmt = get_output_format("json")  # explicit override wins
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum

logger = logging.getLogger(__name__)

LOG_LEVEL_VAR = "PRATTLE_LOG_LEVEL"
OUTPUT_VAR = "PRATTLE_OUTPUT"

_DEFAULT_LOG_LEVEL = logging.WARNING
_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class OutputFormat(StrEnum):
    """How the CLI prints a parsed expression."""

    TREE = "tree"
    JSON = "json"


_DEFAULT_OUTPUT = OutputFormat.TREE


def get_log_level(override: str | None = None) -> int:
    """Resolve the logging level.

    Resolution order:
    1. ``override`` (from ``--log-level``) if given
    2. PRATTLE_LOG_LEVEL
    3. WARNING

    Unknown names fall back to WARNING with a logged warning.
    """
    value = override if override is not None else os.environ.get(LOG_LEVEL_VAR, "")
    value = value.lower().strip()
    if not value:
        return _DEFAULT_LOG_LEVEL
    level = _LOG_LEVELS.get(value)
    if level is None:
        logger.warning(
            "Unknown log level '%s'. Valid values: %s. Defaulting to WARNING.",
            value,
            ", ".join(sorted(_LOG_LEVELS)),
        )
        return _DEFAULT_LOG_LEVEL
    return level


def get_output_format(override: OutputFormat | str | None = None) -> OutputFormat:
    """Resolve the output format, explicit override first, then PRATTLE_OUTPUT."""
    if override is not None:
        return OutputFormat(override)

    value = os.environ.get(OUTPUT_VAR, "").lower().strip()
    if not value:
        return _DEFAULT_OUTPUT
    try:
        return OutputFormat(value)
    except ValueError:
        logger.warning(
            "Unknown %s value '%s'. Valid values: tree, json. Defaulting to tree.",
            OUTPUT_VAR,
            value,
        )
        return _DEFAULT_OUTPUT
