from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .lib.env import PATHS

DEFAULT_LOG_PATH = PATHS.log_default

_FMT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


class ColorFormatter(logging.Formatter):
    """Console formatter: green info, yellow warnings, red errors."""

    COLORS = {
        logging.INFO: "\033[0;32m",
        logging.WARNING: "\033[0;33m",
        logging.ERROR: "\033[0;31m",
        logging.CRITICAL: "\033[0;31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        color = self.COLORS.get(record.levelno)
        return f"{color}{msg}{self.RESET}" if color else msg


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Configure logging.

    Every step and command goes to the log file. Writing to /var/log may be
    refused (non-root dry runs, read-only images); then the log lands next
    to the working directory instead.

    Returns the actual file path being used.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_alpine_wsl_setup_configured", False):
        return getattr(logger, "_alpine_wsl_setup_log_path", log_path)

    handlers: list[logging.Handler] = []
    fmt = logging.Formatter(fmt=_FMT, datefmt=_DATEFMT)

    file_handler: Optional[logging.Handler] = None
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        chosen_path = log_path
    except OSError:
        fallback = str(Path.cwd() / "alpine-wsl-setup.log")
        file_handler = logging.FileHandler(fallback)
        chosen_path = fallback
    file_handler.setFormatter(fmt)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler(sys.stderr)
        if sys.stderr.isatty():
            console.setFormatter(ColorFormatter(fmt=_FMT, datefmt=_DATEFMT))
        else:
            console.setFormatter(fmt)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_alpine_wsl_setup_configured", True)
    setattr(logger, "_alpine_wsl_setup_log_path", chosen_path)

    logging.getLogger(__name__).info(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
