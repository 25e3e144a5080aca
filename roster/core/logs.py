"""Logging setup shared by the app entry points."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler; unknown level names fall back to INFO."""
    resolved = logging.getLevelName((level or "INFO").upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("roster").setLevel(resolved)
