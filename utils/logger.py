"""File logging for gitgre.

The picker owns the terminal while it runs, so log records never go to the
console by default. ``main`` turns on a per-run log file with ``--verbose``.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .runtime import get_log_dir

_logging_initialized = False
_log_file_path = None


def setup_logger(
    log_dir: Optional[str] = None,
    log_level: Optional[str] = None,
    log_to_console: bool = False,
) -> None:
    """Attach a timestamped log file to the root logger (idempotent).

    Args:
        log_dir: Where gitgre_<timestamp>.log is created (default: ~/.gitgre/logs/)
        log_level: Level name such as "INFO"; Config.LOG_LEVEL when omitted
        log_to_console: Mirror WARNING and above to stderr as well
    """
    global _logging_initialized, _log_file_path

    if _logging_initialized:
        return

    if log_dir is None:
        log_dir = get_log_dir()

    if log_level is None:
        from config import Config

        log_level = Config.LOG_LEVEL

    level = getattr(logging, log_level.upper(), logging.DEBUG)
    logging.root.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    run_dir = Path(log_dir)
    run_dir.mkdir(exist_ok=True, parents=True)

    log_file = run_dir / f"gitgre_{datetime.now():%Y%m%d_%H%M%S}.log"
    _log_file_path = str(log_file)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logging.root.addHandler(file_handler)

    if log_to_console:
        stderr_handler = logging.StreamHandler()
        stderr_handler.setLevel(logging.WARNING)
        stderr_handler.setFormatter(formatter)
        logging.root.addHandler(stderr_handler)

    _logging_initialized = True
    logging.info(f"gitgre logging to {_log_file_path} at {log_level}")


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)


def get_log_file_path() -> Optional[str]:
    """Path of this run's log file, or None when --verbose was not given."""
    return _log_file_path
