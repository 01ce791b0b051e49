"""
Spotify API client for mufetch.

This module wraps the spotipy library behind the narrow interface the
display layer needs: a best-match search, a detail fetch per record kind,
and the supplemental artist lookups (release counts, top tracks).

Authentication:
    Client Credentials only. The client holds a spotipy
    SpotifyClientCredentials auth manager backed by an in-memory token
    cache: the bearer token is requested on the first API call, reused
    while valid and silently re-issued once it expires. Nothing is
    written to disk.

Usage:
    from mufetch.spotify.client import SpotifyClient
    from mufetch.spotify.models import RecordKind

    client = SpotifyClient(client_id, client_secret)
    hit = client.search("bohemian rhapsody", RecordKind.TRACK)
    album = client.get_detail(RecordKind.ALBUM, "6i6folBtxKV28WX3msQ4FE")

Error Handling:
    Every method raises SpotifyError on failure and never returns a
    partially populated record. There is no retry policy: spotipy's own
    retries are disabled.
"""

from enum import Enum
from typing import Any, Callable

import requests
import spotipy
from spotipy.cache_handler import MemoryCacheHandler
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from mufetch.core.exceptions import SpotifyError
from mufetch.core.logger import get_logger
from mufetch.spotify.models import (
    Album,
    Artist,
    RECORD_TYPES,
    CatalogRecord,
    RecordKind,
    Track,
)

logger = get_logger(__name__)


# Network timeout for API calls, in seconds
REQUEST_TIMEOUT = 10

# Spotify's maximum page size for artist albums
ARTIST_ALBUMS_LIMIT = 50


class Relation(str, Enum):
    """Supplemental artist relations."""
    ALBUMS = "album"
    SINGLES = "single"
    TOP_TRACKS = "top-tracks"


class SpotifyClient:
    """
    Spotify Web API client using the client-credentials flow.

    Attributes:
        market: Country code used for top tracks and artist releases.
        _spotify: The underlying spotipy.Spotify instance.

    Example:
        client = SpotifyClient(config.spotify.client_id, config.spotify.client_secret)
        artist = client.artist("1dfeR4HaWDbWqFHLkxsg1d")
        albums, total = client.get_supplemental(artist.spotify_id, Relation.ALBUMS)
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        market: str = "US",
        spotify_instance: spotipy.Spotify | None = None
    ) -> None:
        """
        Create the client. No network traffic happens until the first call.

        Args:
            client_id: Spotify application client ID.
            client_secret: Spotify application client secret.
            market: ISO 3166-1 alpha-2 country code.
            spotify_instance: Pre-built spotipy instance (tests only).
        """
        self.market = market

        if spotify_instance is None:
            auth_manager = SpotifyClientCredentials(
                client_id=client_id,
                client_secret=client_secret,
                cache_handler=MemoryCacheHandler(),
                requests_timeout=REQUEST_TIMEOUT
            )
            spotify_instance = spotipy.Spotify(
                auth_manager=auth_manager,
                requests_timeout=REQUEST_TIMEOUT,
                retries=0,
                status_retries=0
            )
        self._spotify = spotify_instance

    # =========================================================================
    # Catalog boundary
    # =========================================================================

    def search(self, query: str, kind: RecordKind) -> CatalogRecord | None:
        """
        Search the catalog and return the best match of one kind.

        Args:
            query: Free-text search query.
            kind: Which kind of record to search for.

        Returns:
            The first search hit as a Track, Album or Artist, or None if
            Spotify returned no results. Album and artist hits are the
            simplified objects embedded in search results; use
            get_detail() for the full record.

        Raises:
            SpotifyError: On authentication, HTTP or decoding failure.
        """
        kind = RecordKind(kind)
        logger.debug(f"Searching Spotify for {kind.value}: {query!r}")

        response = self._call(
            f"search {kind.value}",
            lambda: self._spotify.search(q=query, type=kind.value, limit=1),
            {"query": query, "type": kind.value}
        )

        items = (response.get(f"{kind.value}s") or {}).get("items") or []
        # Spotify occasionally pads search pages with null entries
        items = [item for item in items if item]
        if not items:
            logger.debug(f"No {kind.value} results for {query!r}")
            return None

        return _build_record(kind, items[0], f"search {kind.value}")

    def get_detail(self, kind: RecordKind, spotify_id: str) -> CatalogRecord:
        """
        Fetch the full record for an ID.

        Args:
            kind: Kind of record the ID refers to.
            spotify_id: Spotify ID of the track, album or artist.

        Returns:
            The fully populated record.

        Raises:
            SpotifyError: If the record cannot be fetched or decoded.
        """
        kind = RecordKind(kind)
        fetchers: dict[RecordKind, Callable[[str], dict[str, Any] | None]] = {
            RecordKind.TRACK: self._spotify.track,
            RecordKind.ALBUM: self._spotify.album,
            RecordKind.ARTIST: self._spotify.artist,
        }
        fetch = fetchers[kind]

        result = self._call(
            f"fetch {kind.value}",
            lambda: fetch(spotify_id),
            {f"{kind.value}_id": spotify_id}
        )
        return _build_record(kind, result, f"fetch {kind.value}")

    def get_supplemental(
        self,
        artist_id: str,
        relation: Relation
    ) -> tuple[list[CatalogRecord], int]:
        """
        Fetch records related to an artist.

        Args:
            artist_id: Spotify artist ID.
            relation: ALBUMS or SINGLES for the artist's releases (first
                      page of up to 50, plus the overall total), or
                      TOP_TRACKS for the artist's most popular tracks in
                      the configured market.

        Returns:
            Tuple (items, total). For TOP_TRACKS, total == len(items).

        Raises:
            SpotifyError: On any API or decoding failure.
        """
        relation = Relation(relation)
        details = {"artist_id": artist_id, "relation": relation.value}

        if relation is Relation.TOP_TRACKS:
            response = self._call(
                "fetch artist top tracks",
                lambda: self._spotify.artist_top_tracks(artist_id, country=self.market),
                details
            )
            tracks = [
                _build_record(RecordKind.TRACK, t, "fetch artist top tracks")
                for t in response.get("tracks") or [] if t
            ]
            return tracks, len(tracks)

        response = self._call(
            f"fetch artist {relation.value}s",
            lambda: self._spotify.artist_albums(
                artist_id,
                include_groups=relation.value,
                country=self.market,
                limit=ARTIST_ALBUMS_LIMIT
            ),
            details
        )
        albums = [
            _build_record(RecordKind.ALBUM, a, f"fetch artist {relation.value}s")
            for a in response.get("items") or [] if a
        ]
        return albums, response.get("total") or len(albums)

    # =========================================================================
    # Convenience wrappers
    # =========================================================================

    def track(self, track_id: str) -> Track:
        return self.get_detail(RecordKind.TRACK, track_id)

    def album(self, album_id: str) -> Album:
        return self.get_detail(RecordKind.ALBUM, album_id)

    def artist(self, artist_id: str) -> Artist:
        """
        Get artist metadata from Spotify.

        Primary use is the genre fallback: Spotify only provides genres
        at the artist level.
        """
        return self.get_detail(RecordKind.ARTIST, artist_id)

    # =========================================================================
    # Internals
    # =========================================================================

    def _call(
        self,
        action: str,
        request: Callable[[], dict[str, Any] | None],
        details: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Run one spotipy request, translating every failure to SpotifyError.

        Args:
            action: Short description used in error messages.
            request: Zero-argument callable performing the request.
            details: Context attached to the raised error.

        Raises:
            SpotifyError: With is_auth_error set for credential failures
                          and is_rate_limit set for HTTP 429.
        """
        try:
            result = request()
        except SpotifyOauthError as e:
            raise SpotifyError(
                f"Spotify authentication failed: {e}",
                details={**details, "original_error": str(e)},
                is_auth_error=True
            ) from e
        except spotipy.SpotifyException as e:
            status = e.http_status
            if status == 429:
                raise SpotifyError(
                    f"Rate limited while trying to {action}",
                    details={**details, "http_status": 429},
                    is_rate_limit=True
                ) from e
            if status == 401:
                raise SpotifyError(
                    "Spotify rejected the access token",
                    details={**details, "http_status": 401},
                    is_auth_error=True
                ) from e
            if status == 404:
                raise SpotifyError(
                    f"Not found while trying to {action}",
                    details={**details, "http_status": 404}
                ) from e
            raise SpotifyError(
                f"Failed to {action}: {e.msg}",
                details={**details, "http_status": status, "original_error": str(e)}
            ) from e
        except requests.exceptions.RequestException as e:
            raise SpotifyError(
                f"Network error while trying to {action}: {e}",
                details={**details, "original_error": str(e)}
            ) from e

        if not isinstance(result, dict):
            raise SpotifyError(
                f"Unexpected response while trying to {action}",
                details=details
            )
        return result


def _build_record(kind: RecordKind, data: dict[str, Any], action: str) -> CatalogRecord:
    """
    Decode a Spotify JSON object into a record.

    Raises:
        SpotifyError: If the payload does not have the expected shape.
    """
    try:
        return RECORD_TYPES[kind].from_spotify_api(data)
    except (AttributeError, TypeError, KeyError) as e:
        raise SpotifyError(
            f"Malformed response while trying to {action}: {e}",
            details={"original_error": str(e)}
        ) from e
