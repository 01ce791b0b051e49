"""
Info panels per record kind and the display entry point.

Each kind has a panel builder (label/value lines) and a link builder
(link row). display_record() dispatches on the record's kind tag,
renders the primary image and prints the composed block.

Supplemental data (genre fallback, release counts, top tracks) is
fetched through the fetch-or-default helpers: when a lookup fails the
corresponding line is left out. A client of None skips every
supplemental lookup.
"""

from typing import Callable

from mufetch.core.logger import Colors, get_logger
from mufetch.display.formatter import (
    format_bool,
    format_duration,
    format_genres,
    format_number,
    format_ordinal_date,
    format_percent,
    format_string,
    info_line,
    section_header,
)
from mufetch.display.layout import Link, print_side_by_side
from mufetch.display.renderer import DEFAULT_IMAGE_SIZE, ImageRenderer
from mufetch.display.terminal import colorize, hyperlink
from mufetch.spotify.client import Relation, SpotifyClient
from mufetch.spotify.fetcher import (
    fallback_genres,
    fetch_release_total,
    fetch_top_tracks,
)
from mufetch.spotify.models import (
    Album,
    Artist,
    CatalogRecord,
    RecordKind,
    Track,
)

logger = get_logger(__name__)


MAX_TOP_TRACKS = 5


def _artist_links(artists: tuple[Artist, ...]) -> str:
    return ", ".join(hyperlink(artist.spotify_url, artist.name) for artist in artists)


def _artist_label(artists: tuple[Artist, ...]) -> str:
    return "Artists" if len(artists) > 1 else "Artist"


def _genre_lines(genres: tuple[str, ...]) -> list[str]:
    if not genres:
        return []
    return [info_line("Genres", format_genres(genres), Colors.RED)]


def _top_track_lines(tracks: list[Track] | tuple[Track, ...] | None) -> list[str]:
    if not tracks:
        return []
    lines = ["", section_header("Top Tracks")]
    for track in tracks[:MAX_TOP_TRACKS]:
        lines.append(colorize(hyperlink(track.spotify_url, track.name), Colors.GREEN))
    return lines


# =============================================================================
# Panels
# =============================================================================

def build_track_panel(track: Track, client: SpotifyClient | None = None) -> list[str]:
    """
    Info lines for a track.

    Genres come from the track's album, else from the primary artist
    (one supplemental lookup).
    """
    album = track.album
    album_name = hyperlink(album.spotify_url, album.name) if album else "N/A"
    album_genres = album.genres if album else ()

    lines = [
        info_line("Name", track.name, Colors.GREEN),
        info_line(_artist_label(track.artists), _artist_links(track.artists), Colors.YELLOW),
        info_line("Album", album_name, Colors.BLUE),
        info_line("Duration", format_duration(track.duration_ms), Colors.WHITE),
        info_line("Track", str(track.track_number), Colors.CYAN),
        info_line("Explicit", format_bool(track.explicit), Colors.RED),
        info_line("Released", format_ordinal_date(album.release_date if album else ""), Colors.CYAN),
        info_line("Popularity", format_percent(track.popularity), Colors.PURPLE),
    ]
    lines += _genre_lines(fallback_genres(client, album_genres, track.artists))
    return lines


def build_album_panel(album: Album, client: SpotifyClient | None = None) -> list[str]:
    """Info lines for an album, including up to five of its tracks."""
    lines = [
        info_line("Name", album.name, Colors.GREEN),
        info_line(_artist_label(album.artists), _artist_links(album.artists), Colors.YELLOW),
        info_line("Type", format_string(album.album_type), Colors.BLUE),
        info_line("Released", format_ordinal_date(album.release_date), Colors.CYAN),
        info_line("Tracks", str(album.total_tracks), Colors.PURPLE),
        info_line("Duration", format_duration(album.duration_ms), Colors.WHITE),
        info_line("Popularity", format_percent(album.popularity), Colors.PURPLE),
    ]
    lines += _genre_lines(fallback_genres(client, album.genres, album.artists))
    if album.label:
        lines.append(info_line("Label", format_string(album.label), Colors.WHITE))
    lines += _top_track_lines(album.tracks)
    return lines


def build_artist_panel(artist: Artist, client: SpotifyClient | None = None) -> list[str]:
    """
    Info lines for an artist.

    Album count, single count and top tracks are three supplemental
    lookups; each line is omitted independently if its lookup fails.
    """
    lines = [
        info_line("Name", artist.name, Colors.GREEN),
        info_line("Followers", format_number(artist.followers), Colors.YELLOW),
        info_line("Popularity", format_percent(artist.popularity), Colors.PURPLE),
    ]
    lines += _genre_lines(artist.genres)

    album_count = fetch_release_total(client, artist.spotify_id, Relation.ALBUMS)
    if album_count is not None:
        lines.append(info_line("Albums", str(album_count), Colors.GREEN))

    single_count = fetch_release_total(client, artist.spotify_id, Relation.SINGLES)
    if single_count is not None:
        lines.append(info_line("Singles", str(single_count), Colors.YELLOW))

    lines += _top_track_lines(fetch_top_tracks(client, artist.spotify_id))
    return lines


# =============================================================================
# Links
# =============================================================================

def _spotify_link(url: str) -> list[Link]:
    return [Link(url, "Spotify", Colors.GREEN, primary=True)] if url else []


def track_links(track: Track) -> list[Link]:
    links = _spotify_link(track.spotify_url)
    image = track.primary_image
    if image:
        links.append(Link(image.url, "Album Cover", Colors.BLUE))
    return links


def album_links(album: Album) -> list[Link]:
    links = _spotify_link(album.spotify_url)
    image = album.primary_image
    if image:
        links.append(Link(image.url, "Album Cover", Colors.BLUE))
    return links


def artist_links(artist: Artist) -> list[Link]:
    links = _spotify_link(artist.spotify_url)
    image = artist.primary_image
    if image:
        links.append(Link(image.url, "Artist Photo", Colors.BLUE))
    return links


PanelBuilder = Callable[[CatalogRecord, SpotifyClient | None], list[str]]
LinkBuilder = Callable[[CatalogRecord], list[Link]]

_BUILDERS: dict[RecordKind, tuple[PanelBuilder, LinkBuilder]] = {
    RecordKind.TRACK: (build_track_panel, track_links),
    RecordKind.ALBUM: (build_album_panel, album_links),
    RecordKind.ARTIST: (build_artist_panel, artist_links),
}


def build_display(
    record: CatalogRecord,
    client: SpotifyClient | None = None,
    image_size: int = DEFAULT_IMAGE_SIZE,
    renderer: ImageRenderer | None = None
) -> tuple[list[str], list[str], list[Link]]:
    """
    Build the three parts of the display for any record kind.

    Returns:
        Tuple (image_lines, info_lines, links).
    """
    build_panel, build_links = _BUILDERS[record.kind]
    renderer = renderer or ImageRenderer(image_size)

    info_lines = build_panel(record, client)
    image = record.primary_image
    image_lines = renderer.render_lines(image.url if image else None)

    logger.debug(
        f"Built {record.kind.value} display for {record.spotify_id}: "
        f"{len(image_lines)} image lines, {len(info_lines)} info lines"
    )
    return image_lines, info_lines, build_links(record)


def display_record(
    record: CatalogRecord,
    client: SpotifyClient | None = None,
    image_size: int = DEFAULT_IMAGE_SIZE,
    renderer: ImageRenderer | None = None
) -> None:
    """Render and print a record next to its cover image."""
    image_lines, info_lines, links = build_display(record, client, image_size, renderer)
    print_side_by_side(image_lines, info_lines, links)
