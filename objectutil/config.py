"""Defaults shared by the library and the command line interface."""

from __future__ import annotations

import logging
import os


DEFAULT_IDENTITY_KEY = "id"
LOG_LEVEL_ENV_VAR = "OBJECTUTIL_LOG_LEVEL"


def get_default_log_level() -> int:
    """Return the console log level named by ``OBJECTUTIL_LOG_LEVEL``.

    Falls back to ``WARNING`` when the variable is unset or names no level.
    """
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        return logging.WARNING
    return level
