"""
Spotify catalog access for mufetch.

Modules:
    models  - Immutable Track / Album / Artist records
    client  - spotipy-backed client (client-credentials flow)
    fetcher - Query resolution and fetch-or-default helpers
"""

from mufetch.spotify.client import Relation, SpotifyClient
from mufetch.spotify.fetcher import (
    AUTO,
    fallback_genres,
    fetch_artist_genres,
    fetch_or_default,
    fetch_release_total,
    fetch_top_tracks,
    resolve_record,
)
from mufetch.spotify.models import (
    Album,
    Artist,
    CatalogRecord,
    Image,
    RecordKind,
    Track,
)

__all__ = [
    "SpotifyClient",
    "Relation",
    "resolve_record",
    "fetch_or_default",
    "fetch_artist_genres",
    "fetch_release_total",
    "fetch_top_tracks",
    "fallback_genres",
    "AUTO",
    "Album",
    "Artist",
    "CatalogRecord",
    "Image",
    "RecordKind",
    "Track",
]
