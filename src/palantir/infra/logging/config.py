from __future__ import annotations

"""
Logging Configuration Model.

Immutable settings consumed by configure_logging(), plus the mapping
from level names to the numeric constants of the logging module.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for the diagnostic logging subsystem.

    Diagnostics go to stderr so they never interleave with rendered
    trees and messages written to stdout.

    Attributes:
        level: Minimum severity name.
        console: Attach a stderr stream handler.
        log_file: Optional path of a rotating log file.
        max_bytes: Rotation threshold in bytes.
        backup_count: Rotated segments to keep.
        console_fmt: Format for stderr records.
        file_fmt: Format for file records.
        datefmt: Timestamp format for file records.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(name)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
