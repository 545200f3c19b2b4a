# src/levchange/shared/logging_conf.py
"""
Logging Configuration - Logging Setup and Configuration

Centralized logging setup for the levchange command. The engine modules
only create module-level loggers and log at DEBUG (normalized input,
insufficient payment) or WARNING (amounts outside the money context), so
the default INFO level keeps calculator output on stdout uncluttered.

File logging is opt-in through LOG_FILE or LOG_DIR (see Settings) and
rotates levchange.log by size; LEVCHANGE_LOG_STDOUT=false sends records
only to the file, which suits running the calculator from a till script.

Files that USE this module:
- levchange.app (setup_logging called once with values from Settings)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union
from logging.handlers import RotatingFileHandler


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_to_stdout: Optional[bool] = None,
) -> None:
    """
    Configure root logging for one levchange run.

    Replaces any handlers already on the root logger, so calling it again
    (for example after -v/--verbose) switches level and targets cleanly.

    Args:
        level: Logging level (default: logging.INFO), as int or name
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files (file is levchange.log)
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)
        log_to_stdout: Log to stdout; defaults to LEVCHANGE_LOG_STDOUT (true)
    """
    log_format = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handlers = []

    if log_to_stdout is None:
        log_to_stdout = os.environ.get("LEVCHANGE_LOG_STDOUT", "true").lower() == "true"

    if log_to_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(stdout_handler)

    log_file_path = None
    if log_file or log_dir:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / "levchange.log"
        else:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(file_handler)

    # Nowhere else to go
    if not handlers:
        handlers = [logging.StreamHandler(sys.stdout)]

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    if log_file_path is not None:
        logger.debug("Logging configured: file=%s, level=%s", log_file_path, level)
    else:
        logger.debug("Logging configured: stdout, level=%s", level)
