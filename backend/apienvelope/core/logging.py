from __future__ import annotations

import logging
import sys


LOGGER_NAME = "apienvelope"
_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Ensure a console handler exists (uvicorn may preconfigure logging)."""

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.getLogger(LOGGER_NAME).setLevel(level)
