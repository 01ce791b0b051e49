"""
Terminal display for mufetch.

Modules:
    terminal  - Escape sequences (colors, hyperlinks, cursor)
    renderer  - Block-art image renderer
    formatter - Value formatting for info panels
    layout    - Side-by-side composition and the link row
    panels    - Per-kind panels and display_record()
"""

from mufetch.display.layout import Link, compose_side_by_side, print_side_by_side
from mufetch.display.panels import (
    build_album_panel,
    build_artist_panel,
    build_display,
    build_track_panel,
    display_record,
)
from mufetch.display.renderer import (
    DEFAULT_IMAGE_SIZE,
    MAX_IMAGE_SIZE,
    MIN_IMAGE_SIZE,
    ImageRenderer,
    clamp_image_size,
)

__all__ = [
    "Link",
    "compose_side_by_side",
    "print_side_by_side",
    "build_track_panel",
    "build_album_panel",
    "build_artist_panel",
    "build_display",
    "display_record",
    "ImageRenderer",
    "clamp_image_size",
    "DEFAULT_IMAGE_SIZE",
    "MIN_IMAGE_SIZE",
    "MAX_IMAGE_SIZE",
]
