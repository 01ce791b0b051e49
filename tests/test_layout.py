"""Test side-by-side composition, links and escape helpers"""

from mufetch.core.logger import Colors
from mufetch.display.layout import GAP, Link, compose_side_by_side, format_link_row
from mufetch.display.terminal import (
    background_cell,
    hyperlink,
    strip_ansi,
    visible_width,
)


def image(height, width=41):
    return [f"{i:#<{width}}" for i in range(height)]


SPOTIFY = Link("https://open.spotify.com/track/x", "Spotify", Colors.GREEN, primary=True)
COVER = Link("https://i.scdn.co/image/x", "Album Cover", Colors.BLUE)


class TestEscapes:
    """Test terminal escape helpers"""

    def test_hyperlink_is_osc8(self):
        link = hyperlink("https://example.com", "Example")
        assert link == "\033]8;;https://example.com\033\\Example\033]8;;\033\\"

    def test_visible_width_ignores_escapes(self):
        text = Colors.GREEN + hyperlink("https://example.com", "Example") + Colors.RESET
        assert visible_width(text) == len("Example")
        assert strip_ansi(text) == "Example"

    def test_background_cell(self):
        cell = background_cell(1, 2, 3)
        assert cell == "\033[48;2;1;2;3m  \033[0m"
        assert visible_width(cell) == 2


class TestLinkRow:
    """Test link ordering"""

    def test_primary_first(self):
        row = format_link_row([COVER, SPOTIFY])
        assert strip_ansi(row) == "Spotify   Album Cover"

    def test_link_render_colored(self):
        rendered = SPOTIFY.render()
        assert rendered.startswith(Colors.GREEN)
        assert "\033]8;;https://open.spotify.com/track/x" in rendered


class TestCompose:
    """Test interleaving image, info and links"""

    def test_link_row_two_lines_from_bottom(self):
        lines = compose_side_by_side(image(20), ["a", "b", "c"], [SPOTIFY, COVER])

        assert len(lines) == 20
        assert strip_ansi(lines[18]).endswith(GAP + "Spotify   Album Cover")
        assert lines[19] == image(20)[19] + GAP

    def test_info_padded_with_blank_lines(self):
        lines = compose_side_by_side(image(20), ["a", "b"], [SPOTIFY])

        assert lines[0] == image(20)[0] + GAP + "a"
        assert lines[1] == image(20)[1] + GAP + "b"
        assert all(lines[i] == image(20)[i] + GAP for i in range(2, 18))

    def test_tall_panel_not_truncated(self):
        info = [f"line {i}" for i in range(6)]

        lines = compose_side_by_side(image(4), info, [SPOTIFY])

        assert len(lines) == 7
        assert [strip_ansi(line)[41 + len(GAP):] for line in lines[:6]] == info
        # Missing image rows are blank but keep the column width
        assert lines[4] == " " * 41 + GAP + "line 4"
        assert strip_ansi(lines[6]) == " " * 41 + GAP + "Spotify"

    def test_without_links(self):
        lines = compose_side_by_side(image(20), ["a"], [])

        assert len(lines) == 20
        assert all("Spotify" not in line for line in lines)
        assert lines[18] == image(20)[18] + GAP

    def test_columns_aligned(self):
        lines = compose_side_by_side(image(15), ["a", "b"], [SPOTIFY])

        assert all(strip_ansi(line).index(GAP) == 41 for line in lines)
