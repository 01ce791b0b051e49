"""
Configuration management for mufetch.

This module handles loading, validating and persisting the application
configuration stored in config.yaml.

The configuration file contains:
    - Spotify API credentials (client_id, client_secret)
    - Spotify market used for artist top tracks and releases
    - Default cover image size

Configuration File Location:
    ~/.config/mufetch/config.yaml
    The directory can be moved with the MUFETCH_CONFIG_DIR environment variable.

Environment Overrides:
    MUFETCH_SPOTIFY_CLIENT_ID and MUFETCH_SPOTIFY_CLIENT_SECRET take
    precedence over the values stored in the file. A .env file in the
    current directory is loaded first if present.

Example config.yaml:
    spotify:
      client_id: "your_client_id_here"
      client_secret: "your_client_secret_here"
      market: "US"

    display:
      image_size: 20
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from mufetch.core.exceptions import ConfigError


# Load environment variables from .env file if present
load_dotenv()


CONFIG_FILENAME = "config.yaml"
CONFIG_DIR_ENV = "MUFETCH_CONFIG_DIR"
CLIENT_ID_ENV = "MUFETCH_SPOTIFY_CLIENT_ID"
CLIENT_SECRET_ENV = "MUFETCH_SPOTIFY_CLIENT_SECRET"

DEFAULT_MARKET = "US"
DEFAULT_IMAGE_SIZE = 20


@dataclass(frozen=True)
class SpotifyConfig:
    """
    Spotify API credentials configuration.

    These credentials are obtained from the Spotify Developer Dashboard:
    https://developer.spotify.com/dashboard

    Attributes:
        client_id: The Spotify application client ID.
        client_secret: The Spotify application client secret.
        market: ISO 3166-1 country code for market-scoped endpoints.
    """
    client_id: str
    client_secret: str
    market: str = DEFAULT_MARKET


@dataclass(frozen=True)
class DisplayConfig:
    """
    Display configuration.

    Attributes:
        image_size: Default cover grid size used when --size is not given.
                    Clamped to the supported range at render time.
    """
    image_size: int = DEFAULT_IMAGE_SIZE


@dataclass(frozen=True)
class Config:
    """
    Complete application configuration.

    Attributes:
        spotify: Spotify API credentials.
        display: Rendering defaults.
    """
    spotify: SpotifyConfig
    display: DisplayConfig


def get_config_dir() -> Path:
    """Return the configuration directory (not created)."""
    override = os.getenv(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "mufetch"


def get_config_path() -> Path:
    """Return the path of config.yaml inside the configuration directory."""
    return get_config_dir() / CONFIG_FILENAME


def init_config(config_path: Path | None = None) -> Path:
    """
    Make sure the configuration directory and file exist.

    Creates the directory and writes a config.yaml with empty credentials
    if none exists yet. An existing file is never touched.

    Args:
        config_path: Optional explicit path to the config file.

    Returns:
        The path of the configuration file.

    Raises:
        ConfigError: If the directory or file cannot be created.
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        return config_path

    _write_yaml(config_path, _default_document())
    return config_path


def load_config(config_path: Path | None = None) -> Config:
    """
    Load and validate configuration from config.yaml.

    A missing file is not an error here: credentials may come entirely
    from the environment. Missing credentials are reported by
    load_credentials().

    Args:
        config_path: Optional explicit path to config file.
                     If None, uses get_config_path().

    Returns:
        Config: A frozen dataclass containing all configuration values.

    Raises:
        ConfigError: If the file has invalid YAML syntax, is not a mapping,
                     or contains invalid values.
    """
    if config_path is None:
        config_path = get_config_path()

    raw_config = _read_yaml(config_path) if config_path.exists() else {}

    spotify_config = _parse_spotify_config(_section(raw_config, "spotify"))
    display_config = _parse_display_config(_section(raw_config, "display"))

    return Config(spotify=spotify_config, display=display_config)


def has_credentials(config_path: Path | None = None) -> bool:
    """
    Check whether both Spotify credentials are available.

    Returns:
        True if client_id and client_secret are non-empty after
        applying environment overrides, False otherwise (including
        when the config file is unreadable).
    """
    try:
        config = load_config(config_path)
    except ConfigError:
        return False
    return bool(config.spotify.client_id and config.spotify.client_secret)


def load_credentials(config_path: Path | None = None) -> SpotifyConfig:
    """
    Load the Spotify credentials, environment taking precedence.

    Returns:
        SpotifyConfig with non-empty client_id and client_secret.

    Raises:
        ConfigError: If the config cannot be read or a credential is missing.
    """
    spotify = load_config(config_path).spotify

    if not spotify.client_id:
        raise ConfigError(
            "'spotify.client_id' must be a non-empty string",
            details={"field": "spotify.client_id"}
        )
    if not spotify.client_secret:
        raise ConfigError(
            "'spotify.client_secret' must be a non-empty string",
            details={"field": "spotify.client_secret"}
        )
    return spotify


def save_credentials(
    client_id: str,
    client_secret: str,
    config_path: Path | None = None
) -> Path:
    """
    Persist Spotify credentials to config.yaml.

    Other sections of an existing file are preserved.

    Args:
        client_id: Spotify application client ID.
        client_secret: Spotify application client secret.
        config_path: Optional explicit path to config file.

    Returns:
        The path the credentials were written to.

    Raises:
        ConfigError: If either value is empty or the file cannot be written.
    """
    if config_path is None:
        config_path = get_config_path()

    client_id = client_id.strip()
    client_secret = client_secret.strip()
    if not client_id or not client_secret:
        raise ConfigError(
            "Both Client ID and Client Secret are required",
            details={"file_path": str(config_path)}
        )

    document = _read_yaml(config_path) if config_path.exists() else _default_document()
    spotify_section = document.get("spotify")
    if not isinstance(spotify_section, dict):
        spotify_section = {}
    spotify_section["client_id"] = client_id
    spotify_section["client_secret"] = client_secret
    document["spotify"] = spotify_section

    _write_yaml(config_path, document)
    return config_path


def _default_document() -> dict[str, Any]:
    return {
        "spotify": {
            "client_id": "",
            "client_secret": "",
            "market": DEFAULT_MARKET,
        },
        "display": {
            "image_size": DEFAULT_IMAGE_SIZE,
        },
    }


def _read_yaml(config_path: Path) -> dict[str, Any]:
    """
    Read and parse a YAML mapping.

    Raises:
        ConfigError: On I/O errors, invalid syntax or a non-mapping document.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(
            f"Failed to read configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    try:
        raw_config = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML syntax in configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    # An empty file parses to None
    if raw_config is None:
        return {}

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a YAML dictionary",
            details={"file_path": str(config_path)}
        )
    return raw_config


def _write_yaml(config_path: Path, document: dict[str, Any]) -> None:
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(document, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigError(
            f"Failed to write configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e


def _section(raw_config: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw_config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"Section '{name}' must be a dictionary",
            details={"section": name}
        )
    return section


def _parse_spotify_config(spotify_section: dict[str, Any]) -> SpotifyConfig:
    """
    Parse the Spotify section and apply environment overrides.

    Empty credentials are allowed here; they are rejected by
    load_credentials().

    Raises:
        ConfigError: If a field has the wrong type.
    """
    values = {}
    for field_name, env_var in (
        ("client_id", CLIENT_ID_ENV),
        ("client_secret", CLIENT_SECRET_ENV),
    ):
        raw = spotify_section.get(field_name) or ""
        if not isinstance(raw, str):
            raise ConfigError(
                f"'spotify.{field_name}' must be a string",
                details={"field": f"spotify.{field_name}"}
            )
        # Environment variables take precedence over the file
        values[field_name] = (os.getenv(env_var) or raw).strip()

    market = spotify_section.get("market") or DEFAULT_MARKET
    if not isinstance(market, str) or len(market.strip()) != 2:
        raise ConfigError(
            "'spotify.market' must be a two-letter country code",
            details={"field": "spotify.market", "value": market}
        )

    return SpotifyConfig(
        client_id=values["client_id"],
        client_secret=values["client_secret"],
        market=market.strip().upper()
    )


def _parse_display_config(display_section: dict[str, Any]) -> DisplayConfig:
    image_size = display_section.get("image_size", DEFAULT_IMAGE_SIZE)
    if isinstance(image_size, bool) or not isinstance(image_size, int) or image_size < 1:
        raise ConfigError(
            "'display.image_size' must be a positive integer",
            details={"field": "display.image_size", "value": image_size}
        )
    return DisplayConfig(image_size=image_size)
