"""
Core module for mufetch.

This module provides the foundational components used throughout the application:
    - exceptions: Custom exception classes for error handling
    - config: Configuration loading, validation and credential storage
    - logger: Logging system with console and file outputs

Usage:
    from mufetch.core import (
        Config, load_config, load_credentials,
        setup_logging, get_logger,
        MufetchError, ConfigError, SpotifyError
    )
"""

from mufetch.core.config import (
    Config,
    DisplayConfig,
    SpotifyConfig,
    get_config_dir,
    get_config_path,
    has_credentials,
    init_config,
    load_config,
    load_credentials,
    save_credentials,
)
from mufetch.core.exceptions import (
    ConfigError,
    ImageError,
    MufetchError,
    SpotifyError,
)
from mufetch.core.logger import (
    get_logger,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    # Config
    "Config",
    "SpotifyConfig",
    "DisplayConfig",
    "get_config_dir",
    "get_config_path",
    "has_credentials",
    "init_config",
    "load_config",
    "load_credentials",
    "save_credentials",
    # Exceptions
    "MufetchError",
    "ConfigError",
    "SpotifyError",
    "ImageError",
    # Logger
    "setup_logging",
    "get_logger",
    "shutdown_logging",
]
