"""
Logging Management Module

Handles centralized logging configuration for the builder. Library calls log
through the shared ``LOGGER_NAME`` logger; the CLI calls :meth:`Logger.setup`
to attach a console handler and, when a log directory is given, a rotating
file handler.

Key Features:
    - Singleton-like Behavior: Prevents duplicate handler registration
    - Dynamic Reconfiguration: Adds file output once a directory is known
    - Rotating File Handler: Automatic log rotation with size limits
    - Timestamp-based Files: Unique log files per CLI session
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from ..constants import LOGGER_NAME


# LOGGER CLASS
class Logger:
    """
    Manages logging configuration with singleton-like behavior.

    Class-level tracking (``_configured_names``) prevents duplicate handlers
    when the same logger is requested repeatedly, while a call that provides
    ``log_dir`` always reconfigures so file output can be switched on late.

    Attributes:
        name (str): Logger identifier (typically LOGGER_NAME constant)
        log_dir (Path | None): Directory for log file storage
        log_to_file (bool): Enable file logging (requires log_dir)
        level (int): Logging level
        max_bytes (int): Maximum log file size before rotation (default: 1MB)
        backup_count (int): Number of rotated log files to retain (default: 3)

    Example:
        >>> logger = Logger.setup(name=LOGGER_NAME, log_dir=Path("./logs"))
        >>> logger.info("Building network")
    """

    _configured_names: Final[dict[str, bool]] = {}
    _active_log_file: Path | None = None

    def __init__(
        self,
        name: str = LOGGER_NAME,
        log_dir: Path | None = None,
        log_to_file: bool = True,
        level: int = logging.INFO,
        max_bytes: int = 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        self.name = name
        self.log_dir = log_dir
        self.log_to_file = log_to_file and (log_dir is not None)
        self.level = level
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self._log = logging.getLogger(name)

        if name not in Logger._configured_names or log_dir is not None:
            self._setup_logger()
            Logger._configured_names[name] = True

    def _setup_logger(self) -> None:
        """
        Configures log handlers: console always, file only if log_dir is provided.

        Existing handlers are closed and removed first so reconfiguration never
        duplicates output.
        """
        formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s", "%Y-%m-%d %H:%M:%S"
        )

        self._log.setLevel(self.level)
        self._log.propagate = False

        for handler in self._log.handlers[:]:
            handler.close()
            self._log.removeHandler(handler)

        console_h = logging.StreamHandler(sys.stdout)
        console_h.setFormatter(formatter)
        self._log.addHandler(console_h)

        if self.log_to_file and self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
            filename = self.log_dir / f"{self.name}_{timestamp}.log"

            file_h = RotatingFileHandler(
                filename, maxBytes=self.max_bytes, backupCount=self.backup_count, encoding="utf-8"
            )
            file_h.setFormatter(formatter)
            self._log.addHandler(file_h)

            Logger._active_log_file = filename

    def get_logger(self) -> logging.Logger:
        """Returns the configured logging.Logger instance."""
        return self._log

    @classmethod
    def get_log_file(cls) -> Path | None:
        """Returns the current active log file path, or None without file logging."""
        return cls._active_log_file

    @classmethod
    def setup(
        cls, name: str = LOGGER_NAME, log_dir: Path | None = None, level: str = "INFO", **kwargs
    ) -> logging.Logger:
        """
        Main entry point for configuring the logger, called by the CLI.

        Args:
            name: Logger identifier
            log_dir: Directory for log file storage (None = console-only mode)
            level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            **kwargs (Any): Additional arguments passed to Logger constructor

        Returns:
            Configured logging.Logger instance

        Environment Variables:
            DEBUG: If set to "1", overrides level to DEBUG
        """
        if os.getenv("DEBUG") == "1":
            numeric_level = logging.DEBUG
        else:
            numeric_level = getattr(logging, level.upper(), logging.INFO)

        return cls(name=name, log_dir=log_dir, level=numeric_level, **kwargs).get_logger()
