"""
Configuration Management Module - Define all configuration data classes
"""

import os
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional


@dataclass
class HttpConfig:
    """Task page download configuration"""
    base_url: str = "https://atcoder.jp"
    user_agent: str = "cptask"
    timeout: int = 30

    def validate(self) -> List[str]:
        """Validate configuration"""
        errors = []
        if not self.base_url:
            errors.append("HTTP base URL is not set")
        elif not self.base_url.startswith(("http://", "https://")):
            errors.append(f"HTTP base URL must start with http:// or https://: {self.base_url}")
        if self.timeout <= 0:
            errors.append(f"HTTP timeout must be positive, got {self.timeout}")
        return errors


@dataclass
class WorkspaceConfig:
    """Workspace layout configuration"""
    out_dir: str = "tests"
    tests_dir: str = "tests"
    manifest_name: str = "Cargo.toml"
    default_case: str = "001"
    fallback_contest: str = "contest"

    def validate(self) -> List[str]:
        """Validate configuration"""
        errors = []
        if not self.manifest_name:
            errors.append("Manifest name is not set")
        if not self.default_case:
            errors.append("Default case is not set")
        return errors


@dataclass
class CargoConfig:
    """Build tool configuration"""
    cargo: str = "cargo"

    def validate(self) -> List[str]:
        errors = []
        if not self.cargo:
            errors.append("Cargo executable is not set")
        return errors


@dataclass
class Config:
    """
    Full Configuration

    Aggregates all sub-configurations, provides unified configuration access interface
    """
    http: HttpConfig = field(default_factory=HttpConfig)
    workspace: WorkspaceConfig = field(default_factory=WorkspaceConfig)
    cargo: CargoConfig = field(default_factory=CargoConfig)

    def validate(self) -> List[str]:
        """Validate configuration"""
        errors = []
        errors.extend(self.http.validate())
        errors.extend(self.workspace.validate())
        errors.extend(self.cargo.validate())
        return errors

    def is_valid(self) -> bool:
        """Check if configuration is valid"""
        return len(self.validate()) == 0

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Config":
        """Create configuration from dictionary"""
        config = cls()

        for section_name in ("http", "workspace", "cargo"):
            section_dict = config_dict.get(f"{section_name}_config", config_dict.get(section_name, {}))
            section = getattr(config, section_name)
            for key, value in section_dict.items():
                if hasattr(section, key):
                    setattr(section, key, value)

        return config

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Config":
        """
        Create configuration with environment variable overrides

        Recognized variables: CPTASK_BASE_URL, CPTASK_USER_AGENT,
        CPTASK_TIMEOUT, CPTASK_CARGO.

        Raises:
            ValueError: If CPTASK_TIMEOUT is not an integer
        """
        environ = os.environ if environ is None else environ
        config = cls()

        if environ.get("CPTASK_BASE_URL"):
            config.http.base_url = environ["CPTASK_BASE_URL"].rstrip("/")
        if environ.get("CPTASK_USER_AGENT"):
            config.http.user_agent = environ["CPTASK_USER_AGENT"]
        if environ.get("CPTASK_TIMEOUT"):
            try:
                config.http.timeout = int(environ["CPTASK_TIMEOUT"])
            except ValueError as e:
                raise ValueError(f"CPTASK_TIMEOUT must be an integer: {environ['CPTASK_TIMEOUT']!r}") from e
        if environ.get("CPTASK_CARGO"):
            config.cargo.cargo = environ["CPTASK_CARGO"]

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "http": {
                "base_url": self.http.base_url,
                "user_agent": self.http.user_agent,
                "timeout": self.http.timeout,
            },
            "workspace": {
                "out_dir": self.workspace.out_dir,
                "tests_dir": self.workspace.tests_dir,
                "manifest_name": self.workspace.manifest_name,
                "default_case": self.workspace.default_case,
                "fallback_contest": self.workspace.fallback_contest,
            },
            "cargo": {
                "cargo": self.cargo.cargo,
            },
        }
