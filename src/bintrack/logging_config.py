"""Logging setup."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "bintrack"


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Route application logs to stderr at the configured level."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else level.upper())
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
