"""
Block-art image renderer.

Downloads a cover image, resizes it to a square grid and turns every
pixel into a two-character truecolor terminal cell.

Rendering:
    - Image is fetched with an unauthenticated GET (no caching)
    - Decoded with Pillow and converted to RGB
    - Resized to exactly size x size with LANCZOS, ignoring aspect ratio
    - Each row: one padding space + size cells

    A rendered image therefore has `size` lines, each 1 + 2 * size
    columns wide.

Fallback:
    Missing URL, network/HTTP errors and undecodable payloads all produce
    the placeholder box, built with the same geometry as a real render.
    render_lines() never raises.
"""

from io import BytesIO

import requests
from PIL import Image, UnidentifiedImageError

from mufetch.core.exceptions import ImageError
from mufetch.core.logger import Colors, get_logger
from mufetch.display.terminal import background_cell

logger = get_logger(__name__)


MIN_IMAGE_SIZE = 15
MAX_IMAGE_SIZE = 35
DEFAULT_IMAGE_SIZE = 20

# Network timeout for image downloads, in seconds
IMAGE_TIMEOUT = 10

PLACEHOLDER_TEXT = ("NO IMAGE", "AVAILABLE")
PLACEHOLDER_BOX_HEIGHT = 8


def clamp_image_size(size: int) -> int:
    """Clamp a requested grid size into [MIN_IMAGE_SIZE, MAX_IMAGE_SIZE]."""
    return max(MIN_IMAGE_SIZE, min(MAX_IMAGE_SIZE, size))


class ImageRenderer:
    """
    Renders images as block art for a fixed grid size.

    Attributes:
        size: Grid width and height in cells.
        session: requests session used for downloads.

    Example:
        renderer = ImageRenderer(20)
        for line in renderer.render_lines(album.primary_image.url):
            print(line)
    """

    def __init__(self, size: int = DEFAULT_IMAGE_SIZE, session: requests.Session | None = None) -> None:
        self.size = size
        self.session = session or requests.Session()

    @property
    def line_width(self) -> int:
        """Visible columns of every rendered line."""
        return 1 + 2 * self.size

    def render_lines(self, image_url: str | None) -> list[str]:
        """
        Convert an image URL to terminal lines.

        Args:
            image_url: Direct image URL. Empty or None yields the placeholder.

        Returns:
            `size` lines of block art, or the placeholder on any failure.
        """
        if not image_url:
            return self.placeholder_lines()

        try:
            image = self._download_image(image_url)
        except ImageError as e:
            logger.info(f"Cover image unavailable, using placeholder: {e.message}")
            return self.placeholder_lines()

        return self.block_art_lines(image)

    def block_art_lines(self, image: Image.Image) -> list[str]:
        """
        Convert a decoded image to colored terminal blocks.

        Args:
            image: Any Pillow image; it is converted to RGB and resized.
        """
        resized = image.convert("RGB").resize(
            (self.size, self.size), Image.Resampling.LANCZOS
        )
        pixels = resized.load()

        lines = []
        for y in range(self.size):
            cells = "".join(background_cell(*pixels[x, y]) for x in range(self.size))
            lines.append(" " + cells)
        return lines

    def placeholder_lines(self) -> list[str]:
        """
        Bordered "NO IMAGE AVAILABLE" box padded to the grid height.

        The box spans the full render width and the output has exactly
        `size` lines, so the layout is identical with or without a cover.
        """
        inner = self.line_width - 3  # padding space + two border columns
        blank_row = f"│{' ' * inner}│"

        box = [f"┌{'─' * inner}┐", blank_row, blank_row]
        box += [f"│{text.center(inner)}│" for text in PLACEHOLDER_TEXT]
        while len(box) < PLACEHOLDER_BOX_HEIGHT - 1:
            box.append(blank_row)
        box.append(f"└{'─' * inner}┘")

        lines = [f" {Colors.WHITE}{row}{Colors.RESET}" for row in box]
        while len(lines) < self.size:
            lines.append(" " * self.line_width)
        return lines

    def _download_image(self, url: str) -> Image.Image:
        """
        Fetch and decode an image.

        Raises:
            ImageError: On network errors, non-2xx status or undecodable data.
        """
        try:
            response = self.session.get(url, timeout=IMAGE_TIMEOUT)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise ImageError(
                f"Failed to download image: {e}",
                details={"url": url, "original_error": str(e)}
            ) from e

        try:
            image = Image.open(BytesIO(response.content))
            image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise ImageError(
                f"Failed to decode image: {e}",
                details={"url": url, "original_error": str(e)}
            ) from e

        return image
