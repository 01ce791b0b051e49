"""
Query resolution and supplemental lookups.

This module turns a free-text query into a single catalog record and
provides the fetch-or-default helpers used by the info panels. Each
helper returns None instead of raising, so a failed supplemental lookup
only drops its panel line.

Resolution Order (auto mode):
    1. Track search (the search hit is already a full track)
    2. Album search, upgraded with a detail fetch
    3. Artist search, upgraded with a detail fetch

Usage:
    from mufetch.spotify.fetcher import resolve_record

    record = resolve_record(client, "ok computer", "auto")
    if record is None:
        print("No results found")
"""

from typing import Callable, TypeVar

from mufetch.core.exceptions import SpotifyError
from mufetch.core.logger import get_logger
from mufetch.spotify.client import Relation, SpotifyClient
from mufetch.spotify.models import Artist, CatalogRecord, RecordKind, Track

logger = get_logger(__name__)

T = TypeVar("T")

AUTO = "auto"

# Order in which auto mode tries each kind
AUTO_ORDER = (RecordKind.TRACK, RecordKind.ALBUM, RecordKind.ARTIST)


def resolve_record(
    client: SpotifyClient,
    query: str,
    kind: str = AUTO
) -> CatalogRecord | None:
    """
    Resolve a query to the best matching record.

    Args:
        client: Spotify client.
        query: Free-text search query.
        kind: "auto", "track", "album" or "artist".

    Returns:
        The resolved record, or None if nothing matched.

    Raises:
        SpotifyError: For a forced kind, any lookup failure. In auto mode,
                      authentication failures, or the last failure when
                      every kind failed.
    """
    if kind != AUTO:
        return _resolve_kind(client, query, RecordKind(kind))

    last_error: SpotifyError | None = None
    searched_cleanly = False
    for candidate in AUTO_ORDER:
        try:
            record = _resolve_kind(client, query, candidate)
        except SpotifyError as e:
            if e.is_auth_error:
                raise
            logger.info(f"{candidate.value.capitalize()} lookup failed: {e.message}")
            last_error = e
            continue

        searched_cleanly = True
        if record is not None:
            return record

    # "Not found" is only accurate if at least one search went through
    if not searched_cleanly and last_error is not None:
        raise last_error
    return None


def _resolve_kind(
    client: SpotifyClient,
    query: str,
    kind: RecordKind
) -> CatalogRecord | None:
    hit = client.search(query, kind)
    if hit is None:
        return None
    if kind is RecordKind.TRACK:
        return hit
    logger.debug(f"Fetching full {kind.value} record for {hit.spotify_id}")
    return client.get_detail(kind, hit.spotify_id)


def fetch_or_default(fetch: Callable[[], T], what: str) -> T | None:
    """
    Run a supplemental lookup, returning None if it fails.

    Args:
        fetch: Zero-argument callable performing the lookup.
        what: Description for the debug log.
    """
    try:
        return fetch()
    except SpotifyError as e:
        logger.debug(f"Skipping {what}: {e.message}")
        return None


def fetch_artist_genres(
    client: SpotifyClient | None,
    artist_id: str
) -> tuple[str, ...] | None:
    """Genres of an artist, or None if unavailable."""
    if client is None or not artist_id:
        return None
    artist = fetch_or_default(lambda: client.artist(artist_id), "artist genres")
    return artist.genres if artist is not None else None


def fetch_release_total(
    client: SpotifyClient | None,
    artist_id: str,
    relation: Relation
) -> int | None:
    """Number of albums or singles an artist has released, or None."""
    if client is None:
        return None
    result = fetch_or_default(
        lambda: client.get_supplemental(artist_id, relation),
        f"artist {Relation(relation).value} count"
    )
    return result[1] if result is not None else None


def fetch_top_tracks(
    client: SpotifyClient | None,
    artist_id: str
) -> list[Track] | None:
    """An artist's top tracks in the client's market, or None."""
    if client is None:
        return None
    result = fetch_or_default(
        lambda: client.get_supplemental(artist_id, Relation.TOP_TRACKS),
        "artist top tracks"
    )
    return result[0] if result is not None else None


def fallback_genres(
    client: SpotifyClient | None,
    genres: tuple[str, ...],
    artists: tuple[Artist, ...],
) -> tuple[str, ...]:
    """
    Return the record's own genres, else the primary artist's genres.

    Returns an empty tuple when neither is available.
    """
    if genres:
        return genres
    if not artists:
        return ()
    return fetch_artist_genres(client, artists[0].spotify_id) or ()

