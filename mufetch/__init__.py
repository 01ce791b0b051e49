"""
mufetch: neofetch-like music metadata in the terminal.

Looks up a track, album or artist in the Spotify catalog and prints its
metadata next to a block-art rendition of the cover image, with
clickable terminal hyperlinks.

Architecture:
    A lookup runs in three steps:

    RESOLVE (spotify/): Turn the query into one catalog record
        - Search tracks, then albums, then artists (or one forced kind)
        - Upgrade album and artist hits with a detail fetch

    ENRICH (spotify/fetcher.py): Optional supplemental lookups
        - Genre fallback from the primary artist
        - Artist album/single counts and top tracks
        - Failures only drop the corresponding panel line

    RENDER (display/): Print the display block
        - Download the cover and render it as truecolor cells
        - Format the info panel and the link row
        - Compose image and panel side by side

Modules:
    core/       - Configuration, logging, exceptions
    spotify/    - Spotify API client, models and query resolution
    display/    - Block-art renderer, formatting and layout
    cli.py      - Command-line interface

Usage:
    Command Line:
        mufetch auth
        mufetch search "bohemian rhapsody"
        mufetch search radiohead --type artist --size 30

    Python API:
        from mufetch.core import load_credentials
        from mufetch.spotify import SpotifyClient, resolve_record
        from mufetch.display import display_record

        credentials = load_credentials()
        client = SpotifyClient(credentials.client_id, credentials.client_secret)

        record = resolve_record(client, "ok computer")
        if record is not None:
            display_record(record, client, image_size=25)

Dependencies:
    - spotipy: Spotify API client
    - requests: Cover image download
    - Pillow: Image decoding and resizing
    - click: CLI framework
    - rich-click: CLI colors
    - colorama: ANSI support on Windows consoles
    - pyyaml: Configuration file parsing
    - python-dotenv: .env support for credentials
"""

__version__ = "0.1.0"
__author__ = "mufetch"
__license__ = "MIT"

# Convenience imports for common usage
from mufetch.core import (
    Config,
    ConfigError,
    ImageError,
    MufetchError,
    SpotifyError,
    get_logger,
    load_config,
    load_credentials,
    setup_logging,
)
from mufetch.spotify import Album, Artist, SpotifyClient, Track, resolve_record

__all__ = [
    # Version
    "__version__",
    # Core
    "Config",
    "load_config",
    "load_credentials",
    "setup_logging",
    "get_logger",
    # Exceptions
    "MufetchError",
    "ConfigError",
    "SpotifyError",
    "ImageError",
    # Spotify
    "SpotifyClient",
    "resolve_record",
    "Track",
    "Album",
    "Artist",
]
