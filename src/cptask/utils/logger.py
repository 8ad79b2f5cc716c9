"""
Log Management Module

Provides the CLI logger: console output on stderr, optionally mirrored to a file
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional

from ..errors import WorkspaceError


LOGGER_NAME = "cptask"


class LoggerManager:
    """
    Logger Manager

    Owns the handlers attached to the cptask logger
    """

    def __init__(
        self,
        level: int = logging.WARNING,
        log_file: Optional[str] = None
    ):
        """
        Initialize Logger Manager

        Args:
            level: Console log level
            log_file: Optional path of a log file (always records DEBUG)
        """
        self.level = level
        self.log_file = log_file
        self.logger = logging.getLogger(LOGGER_NAME)
        self._setup_logger()

    def _setup_logger(self):
        """Set up console and file handlers"""
        self.logger.setLevel(logging.DEBUG)

        # Clear existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '[%(asctime)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(self.level)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if self.log_file:
            try:
                file_handler = logging.FileHandler(self.log_file, mode="a", encoding="utf-8")
            except OSError as e:
                self.cleanup()
                raise WorkspaceError(
                    f"failed to open log file {self.log_file}: {e}", Path(self.log_file)
                ) from e
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        self.logger.propagate = False

    def cleanup(self):
        """Close and detach all handlers"""
        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)


# Global Logger Manager instance
_global_logger_manager: Optional[LoggerManager] = None
_logger_lock = threading.Lock()


def initialize_logger_manager(
    debug: bool = False,
    log_file: Optional[str] = None
) -> LoggerManager:
    """
    Initialize global log manager, replacing any previous one

    Args:
        debug: Show debug messages on the console
        log_file: Optional log file path

    Returns:
        LoggerManager: Log manager instance
    """
    global _global_logger_manager

    with _logger_lock:
        if _global_logger_manager is not None:
            _global_logger_manager.cleanup()
        level = logging.DEBUG if debug else logging.WARNING
        _global_logger_manager = LoggerManager(level=level, log_file=log_file)

    return _global_logger_manager


def log_debug(message: str):
    logging.getLogger(LOGGER_NAME).debug(message)


def log_info(message: str):
    logging.getLogger(LOGGER_NAME).info(message)


def cleanup_logger():
    """Clean up global log manager"""
    global _global_logger_manager

    with _logger_lock:
        if _global_logger_manager:
            _global_logger_manager.cleanup()
            _global_logger_manager = None
