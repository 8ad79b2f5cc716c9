"""
Utility module
"""

from .helpers import (
    find_project_root,
    rel_path,
    default_contest,
    package_name,
)

from .logger import (
    LoggerManager,
    initialize_logger_manager,
    log_debug,
    log_info,
    cleanup_logger,
)

__all__ = [
    # Helpers
    "find_project_root",
    "rel_path",
    "default_contest",
    "package_name",
    # Logger
    "LoggerManager",
    "initialize_logger_manager",
    "log_debug",
    "log_info",
    "cleanup_logger",
]
