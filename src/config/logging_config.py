# src/config/logging_config.py

"""Per-session logging configuration for storefront.

Every launch (TUI or headless listing) writes to its own file inside
``logs/``, e.g. ``logs/session_20261019_153045.log``.  All
``storefront.*`` loggers (cart, filters, catalog, ui) propagate into it,
so one session's intents and catalog loads read top to bottom in a
single place.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

LOGGER_NAME = "storefront"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(funcName)s:%(lineno)d | %(message)s"
)

_CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    logs_dir: Path | None = None,
    console_level: int = logging.WARNING,
) -> Path:
    """Attach file and console handlers to the ``storefront`` logger.

    Args:
        logs_dir: Directory for the session log. Defaults to
            ``Settings.LOGS_DIR``.
        console_level: Minimum level echoed to stderr.

    Returns:
        The :class:`~pathlib.Path` of this session's log file.
    """
    target_dir = logs_dir if logs_dir is not None else Settings.LOGS_DIR
    target_dir.mkdir(parents=True, exist_ok=True)

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = target_dir / f"session_{stamp}.log"

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Repeated calls (tests, TUI relaunch) keep the first handler set
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info("Session log opened at %s", log_file)
    return log_file
