"""Console logging setup for the ``objectutil`` command line interface.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached here, and only by the CLI.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


PROJECT_PREFIX = "objectutil"


class ThirdPartyPrefixFilter(logging.Filter):
    """Prefix records from loggers outside this package with their top-level name."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}] "
        return True


def build_console_handler(level: int = logging.WARNING, color: bool = True) -> RichHandler:
    """Return a ``RichHandler`` writing to stderr at ``level``."""
    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(level=level, console=console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter(fmt="%(prefix)s%(message)s"))
    handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def configure_logging(level: int = logging.WARNING, color: bool = True) -> RichHandler:
    """Attach a console handler to the root logger, replacing any previous one from here."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    handler = build_console_handler(level=level, color=color)
    root.addHandler(handler)
    root.setLevel(level)
    return handler
