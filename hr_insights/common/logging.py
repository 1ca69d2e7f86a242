"""
Logging setup shared by the report runner, the CLI and the API.
Every run writes to stdout, and to a per-run file when one is given.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Union


DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Union[int, str]) -> int:
    # Unknown names fall back to INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    log_format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> None:
    """
    Replace the root handlers with a stdout handler and, optionally, a run file.

    Safe to call more than once; each call discards the previous handlers.

    Args:
        level: Threshold as an int or a name such as "debug" or "WARNING"
        log_file: Where to mirror the console output, if anywhere
        log_format: Record layout shared by both handlers
        date_format: strftime pattern for asctime
    """
    level = _resolve_level(level)
    formatter = logging.Formatter(log_format, date_format)

    stdout_handler = logging.StreamHandler(sys.stdout)
    handlers = [stdout_handler]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)


def get_logger(name: str) -> logging.Logger:
    """Module logger; output goes wherever configure_logging pointed the root."""
    return logging.getLogger(name)


def create_run_log_file(base_dir: str = "logs") -> str:
    """
    Path for this run's log, e.g. logs/insights_run_20240301_093015.log.

    The directory is created; the file itself is opened by configure_logging.
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_dir = Path(base_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    return str(log_dir / f"insights_run_{timestamp}.log")
