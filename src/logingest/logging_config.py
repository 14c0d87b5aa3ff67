"""
Logging setup for processes that embed logingest.

Library modules only create loggers; handlers are configured here by the
entry point.
"""

import logging

__all__ = ["LOG_FORMAT", "configure_logging"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Configure root logging with the logingest format."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
