"""
Data models for Spotify catalog entities.

This module defines immutable dataclasses representing the three kinds
of record mufetch can display: tracks, albums and artists.

Design Decisions:
    - All dataclasses are frozen (immutable); a record is built once
      per lookup and discarded after rendering
    - Each record class carries a class-level ``kind`` tag so the
      display layer can dispatch on it without probing fields
    - Nested objects (a track's album, an album's tracks) use the same
      classes, populated with whatever the simplified API object provides

Usage:
    from mufetch.spotify.models import Track, RecordKind

    track = Track.from_spotify_api(response["tracks"]["items"][0])
    if track.kind is RecordKind.TRACK:
        ...
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union


class RecordKind(str, Enum):
    """Kinds of catalog record, valued as Spotify's search types."""
    TRACK = "track"
    ALBUM = "album"
    ARTIST = "artist"


@dataclass(frozen=True)
class Image:
    """
    Cover art or artist photo.

    Attributes:
        url: Direct image URL on Spotify's CDN.
        width: Pixel width (0 when Spotify omits it).
        height: Pixel height (0 when Spotify omits it).
    """
    url: str
    width: int = 0
    height: int = 0

    @classmethod
    def from_spotify_api(cls, data: dict[str, Any]) -> "Image":
        return cls(
            url=data.get("url") or "",
            width=data.get("width") or 0,
            height=data.get("height") or 0,
        )


def _images(data: dict[str, Any]) -> tuple[Image, ...]:
    return tuple(
        Image.from_spotify_api(img) for img in data.get("images") or [] if img.get("url")
    )


def _spotify_url(data: dict[str, Any]) -> str:
    return (data.get("external_urls") or {}).get("spotify", "")


@dataclass(frozen=True)
class Artist:
    """
    Immutable representation of a Spotify artist.

    Simplified artist objects (inside tracks and albums) only carry
    spotify_id, name and spotify_url; the remaining fields keep their
    defaults.

    Attributes:
        spotify_id: Spotify artist ID.
        name: Artist name.
        spotify_url: Link to the artist page on open.spotify.com.
        images: Artist photos, largest first as returned by Spotify.
        genres: Genre tags from the artist profile.
        popularity: Spotify popularity score (0-100).
        followers: Follower count.
    """
    kind: ClassVar[RecordKind] = RecordKind.ARTIST

    spotify_id: str
    name: str
    spotify_url: str = ""
    images: tuple[Image, ...] = field(default_factory=tuple)
    genres: tuple[str, ...] = field(default_factory=tuple)
    popularity: int = 0
    followers: int = 0

    @classmethod
    def from_spotify_api(cls, data: dict[str, Any]) -> "Artist":
        """
        Create an Artist from a full or simplified Spotify artist object.

        Args:
            data: Response from spotify.artist(artist_id) or an entry of
                  a track's/album's 'artists' list.
        """
        return cls(
            spotify_id=data.get("id") or "",
            name=data.get("name") or "Unknown Artist",
            spotify_url=_spotify_url(data),
            images=_images(data),
            genres=tuple(data.get("genres") or ()),
            popularity=data.get("popularity") or 0,
            followers=(data.get("followers") or {}).get("total") or 0,
        )

    @property
    def primary_image(self) -> Image | None:
        """First (largest) image, or None if the artist has no photo."""
        return self.images[0] if self.images else None


@dataclass(frozen=True)
class Album:
    """
    Immutable representation of a Spotify album.

    Attributes:
        spotify_id: Spotify album ID.
        name: Album title.
        spotify_url: Link to the album on open.spotify.com.
        artists: Album artists.
        images: Cover images, largest first.
        album_type: "album", "single" or "compilation".
        release_date: Release date string, precision varies:
                      "1975-11-21", "1975-11" or "1975".
        total_tracks: Number of tracks on the album.
        genres: Album genres (usually empty, Spotify rarely fills it).
        popularity: Spotify popularity score (0-100).
        label: Record label.
        tracks: First page of the album's tracks (full album objects only).
    """
    kind: ClassVar[RecordKind] = RecordKind.ALBUM

    spotify_id: str
    name: str
    spotify_url: str = ""
    artists: tuple[Artist, ...] = field(default_factory=tuple)
    images: tuple[Image, ...] = field(default_factory=tuple)
    album_type: str = ""
    release_date: str = ""
    total_tracks: int = 0
    genres: tuple[str, ...] = field(default_factory=tuple)
    popularity: int = 0
    label: str = ""
    tracks: tuple["Track", ...] = field(default_factory=tuple)

    @classmethod
    def from_spotify_api(cls, data: dict[str, Any]) -> "Album":
        """
        Create an Album from a full or simplified Spotify album object.

        Args:
            data: Response from spotify.album(album_id), a search hit,
                  or the 'album' field of a track object.
        """
        track_items = (data.get("tracks") or {}).get("items") or []
        return cls(
            spotify_id=data.get("id") or "",
            name=data.get("name") or "Unknown Album",
            spotify_url=_spotify_url(data),
            artists=tuple(Artist.from_spotify_api(a) for a in data.get("artists") or []),
            images=_images(data),
            album_type=data.get("album_type") or "",
            release_date=data.get("release_date") or "",
            total_tracks=data.get("total_tracks") or 0,
            genres=tuple(data.get("genres") or ()),
            popularity=data.get("popularity") or 0,
            label=data.get("label") or "",
            tracks=tuple(Track.from_spotify_api(t) for t in track_items if t),
        )

    @property
    def primary_image(self) -> Image | None:
        """First (largest) cover image, or None."""
        return self.images[0] if self.images else None

    @property
    def duration_ms(self) -> int:
        """Sum of the durations of the tracks carried by this album object."""
        return sum(track.duration_ms for track in self.tracks)


@dataclass(frozen=True)
class Track:
    """
    Immutable representation of a Spotify track.

    Attributes:
        spotify_id: Spotify track ID.
        name: Track title.
        spotify_url: Link to the track on open.spotify.com.
        artists: Performing artists, primary first.
        album: The album the track belongs to. None for the simplified
               tracks nested inside an album object.
        duration_ms: Duration in milliseconds.
        track_number: Position on its disc.
        disc_number: Disc number for multi-disc albums.
        explicit: Whether the track is marked explicit.
        popularity: Spotify popularity score (0-100).
        preview_url: 30 second preview clip, if Spotify provides one.
    """
    kind: ClassVar[RecordKind] = RecordKind.TRACK

    spotify_id: str
    name: str
    spotify_url: str = ""
    artists: tuple[Artist, ...] = field(default_factory=tuple)
    album: Album | None = None
    duration_ms: int = 0
    track_number: int = 1
    disc_number: int = 1
    explicit: bool = False
    popularity: int = 0
    preview_url: str | None = None

    @classmethod
    def from_spotify_api(cls, data: dict[str, Any]) -> "Track":
        """
        Create a Track from a full or simplified Spotify track object.

        Args:
            data: A search hit, an entry of artist_top_tracks()['tracks'],
                  or an item of an album's 'tracks' page.
        """
        album_data = data.get("album")
        return cls(
            spotify_id=data.get("id") or "",
            name=data.get("name") or "Unknown Track",
            spotify_url=_spotify_url(data),
            artists=tuple(Artist.from_spotify_api(a) for a in data.get("artists") or []),
            album=Album.from_spotify_api(album_data) if album_data else None,
            duration_ms=data.get("duration_ms") or 0,
            track_number=data.get("track_number") or 1,
            disc_number=data.get("disc_number") or 1,
            explicit=bool(data.get("explicit", False)),
            popularity=data.get("popularity") or 0,
            preview_url=data.get("preview_url"),
        )

    @property
    def primary_image(self) -> Image | None:
        """The album's cover, which is what Spotify shows for a track."""
        return self.album.primary_image if self.album else None


CatalogRecord = Union[Track, Album, Artist]

RECORD_TYPES: dict[RecordKind, type] = {
    RecordKind.TRACK: Track,
    RecordKind.ALBUM: Album,
    RecordKind.ARTIST: Artist,
}
