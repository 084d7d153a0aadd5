"""
labmock Configuration.

Centralized configuration for the mocking framework.

Usage:
    from labmock.config import LabMockConfig, set_config

    # For testing (quiet, all base-object methods mocked)
    set_config(LabMockConfig.for_testing())

    # From environment (.env files are honoured)
    config = LabMockConfig.from_env()

    # Per mock
    m = mock(service, config=LabMockConfig(warn_on_unmatched=True))
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


PACKAGE_LOGGER = "labmock"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


@dataclass
class LabMockConfig:
    """
    labmock configuration.

    Attributes:
        log_level: Level of the ``labmock`` package logger
        include_base_methods: Also mock ``__eq__``, ``__str__`` and the other
            base-object methods on object mocks
        warn_on_unmatched: Log calls that match no binding at WARNING
            instead of DEBUG
    """

    # Logging
    log_level: str = "WARNING"

    # Object mocks
    include_base_methods: bool = True

    # Call resolution
    warn_on_unmatched: bool = False

    def __post_init__(self):
        """Normalize the log level name."""
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> "LabMockConfig":
        """
        Create config from environment variables.

        Environment Variables:
            LABMOCK_LOG_LEVEL: Package logging level (default: "WARNING")
            LABMOCK_INCLUDE_BASE_METHODS: Mock base-object methods (default: "true")
            LABMOCK_WARN_UNMATCHED: Warn on unmatched calls (default: "false")

        Returns:
            LabMockConfig instance
        """
        load_dotenv()

        return cls(
            log_level=os.getenv("LABMOCK_LOG_LEVEL", "WARNING"),
            include_base_methods=_env_flag("LABMOCK_INCLUDE_BASE_METHODS", "true"),
            warn_on_unmatched=_env_flag("LABMOCK_WARN_UNMATCHED", "false"),
        )

    @classmethod
    def for_testing(cls) -> "LabMockConfig":
        """
        Create config for the package's own unit tests.

        Returns:
            LabMockConfig with debug logging and default mocking behavior
        """
        return cls(
            log_level="DEBUG",
            include_base_methods=True,
            warn_on_unmatched=False,
        )

    def apply_logging(self) -> None:
        """Set the level of the package logger."""
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: '{self.log_level}'")
        logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    def to_dict(self) -> dict:
        """Serialize config to dictionary."""
        return {
            "log_level": self.log_level,
            "include_base_methods": self.include_base_methods,
            "warn_on_unmatched": self.warn_on_unmatched,
        }


# Global config instance (lazily initialized)
_global_config: Optional[LabMockConfig] = None


def get_config() -> LabMockConfig:
    """
    Get global labmock configuration.

    Initializes from environment on first call.

    Returns:
        LabMockConfig instance
    """
    global _global_config
    if _global_config is None:
        _global_config = LabMockConfig.from_env()
        _global_config.apply_logging()
    return _global_config


def set_config(config: LabMockConfig) -> None:
    """
    Set global labmock configuration.

    Useful for tests to override configuration.

    Args:
        config: Configuration to use globally
    """
    global _global_config
    _global_config = config
    config.apply_logging()


def reset_config() -> None:
    """
    Reset global configuration to None.

    Next call to get_config() will reinitialize from environment.
    """
    global _global_config
    _global_config = None
