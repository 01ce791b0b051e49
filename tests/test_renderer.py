"""Test block-art rendering and the placeholder"""

from unittest.mock import Mock

import pytest
import requests
from PIL import Image

from mufetch.display.renderer import (
    IMAGE_TIMEOUT,
    MAX_IMAGE_SIZE,
    MIN_IMAGE_SIZE,
    ImageRenderer,
    clamp_image_size,
)
from mufetch.display.terminal import visible_width


RED_CELL = "\033[48;2;255;0;0m  "


def make_session(content=b"", error=None):
    """Mock requests session whose get() returns the given payload"""
    response = Mock()
    response.content = content
    response.raise_for_status = Mock(side_effect=error)
    session = Mock()
    session.get.return_value = response
    return session


def is_placeholder(lines):
    return any("NO IMAGE" in line for line in lines)


class TestBlockArt:
    """Test rendering of downloaded images"""

    @pytest.mark.parametrize("size", [MIN_IMAGE_SIZE, 20, MAX_IMAGE_SIZE])
    def test_grid_geometry(self, png_bytes, size):
        renderer = ImageRenderer(size, session=make_session(png_bytes))

        lines = renderer.render_lines("https://i.scdn.co/image/cover")

        assert len(lines) == size
        assert all(visible_width(line) == 1 + 2 * size for line in lines)

    def test_pixels_become_truecolor_cells(self, png_bytes):
        renderer = ImageRenderer(15, session=make_session(png_bytes))

        lines = renderer.render_lines("https://i.scdn.co/image/cover")

        assert lines[0].startswith(" " + RED_CELL)
        assert all(line.count(RED_CELL) == 15 for line in lines)
        assert not is_placeholder(lines)

    def test_download_uses_timeout(self, png_bytes):
        session = make_session(png_bytes)
        ImageRenderer(15, session=session).render_lines("https://i.scdn.co/image/cover")

        session.get.assert_called_once_with("https://i.scdn.co/image/cover", timeout=IMAGE_TIMEOUT)

    def test_non_rgb_image_converted(self):
        renderer = ImageRenderer(15)
        image = Image.new("L", (3, 3), 255)

        lines = renderer.block_art_lines(image)

        assert "\033[48;2;255;255;255m" in lines[0]


class TestPlaceholder:
    """Test the fallback box"""

    def test_missing_url_skips_download(self):
        session = make_session()
        renderer = ImageRenderer(20, session=session)

        lines = renderer.render_lines(None)

        assert is_placeholder(lines)
        session.get.assert_not_called()

    def test_empty_url(self):
        assert is_placeholder(ImageRenderer(20, session=make_session()).render_lines(""))

    def test_http_error(self):
        session = make_session(error=requests.HTTPError("404 Client Error"))

        lines = ImageRenderer(20, session=session).render_lines("https://i.scdn.co/image/gone")

        assert is_placeholder(lines)

    def test_network_error(self):
        session = Mock()
        session.get.side_effect = requests.ConnectionError("unreachable")

        lines = ImageRenderer(20, session=session).render_lines("https://i.scdn.co/image/cover")

        assert is_placeholder(lines)

    def test_undecodable_payload(self):
        session = make_session(b"definitely not an image")

        lines = ImageRenderer(20, session=session).render_lines("https://i.scdn.co/image/cover")

        assert is_placeholder(lines)

    @pytest.mark.parametrize("size", [MIN_IMAGE_SIZE, 20, MAX_IMAGE_SIZE])
    def test_same_geometry_as_render(self, size):
        renderer = ImageRenderer(size)

        lines = renderer.placeholder_lines()

        assert len(lines) == size
        assert all(visible_width(line) == renderer.line_width for line in lines)
        assert "AVAILABLE" in "".join(lines)


class TestClamp:
    """Test grid size clamping"""

    def test_in_range_unchanged(self):
        assert clamp_image_size(25) == 25

    def test_below_minimum(self):
        assert clamp_image_size(1) == MIN_IMAGE_SIZE
        assert clamp_image_size(-5) == MIN_IMAGE_SIZE

    def test_above_maximum(self):
        assert clamp_image_size(100) == MAX_IMAGE_SIZE
