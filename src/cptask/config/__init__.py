"""
Configuration Module
"""

from .base import (
    HttpConfig,
    WorkspaceConfig,
    CargoConfig,
    Config,
)

__all__ = [
    "HttpConfig",
    "WorkspaceConfig",
    "CargoConfig",
    "Config",
]
