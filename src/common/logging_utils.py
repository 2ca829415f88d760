"""Logging helpers shared across modules.

Library modules only create module-level loggers; installing handlers is
left to the command-line entry point that drives ``configure_projects``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from constants import Constants


def configure_logging(level: Optional[str] = None) -> None:
    """Install a stderr handler on the root logger.

    Meant to be called once by the command-line entry point before
    ``configure_projects`` runs. The level comes from ``level``, then
    ``RNTA_LOG_LEVEL``, then the default. Calling this more than once does
    not add duplicate handlers.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or Constants.DEFAULT_LOG_LEVEL).upper()
    root = logging.getLogger()
    if not any(getattr(h, "_rnta_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        handler._rnta_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when ``logger`` would emit DEBUG records."""
    return logger.isEnabledFor(logging.DEBUG)
