"""
Side-by-side composition of the image, the info panel and the link row.

Layout (H = number of image lines, G = gap):

    image[0]      G info[0]
    ...
    image[n-1]    G info[n-1]          n = max(H - 2, len(info))
    image[n]      G primary link   secondary link
    image[n+1]    G
    ...

The info panel is padded with blank lines so the link row lands two
lines from the bottom of the image. A panel taller than the image is
never cut: blank image columns stand in for the missing image lines.
"""

from dataclasses import dataclass

import click

from mufetch.core.logger import Colors
from mufetch.display.terminal import colorize, hyperlink, visible_width


GAP = "   "
LINK_SEPARATOR = "   "


@dataclass(frozen=True)
class Link:
    """
    A clickable entry of the link row.

    Attributes:
        url: Link target.
        label: Visible text.
        color: ANSI color applied outside the hyperlink.
        primary: True for the catalog page link, which is always shown
                 first; False for secondary links (cover art, photo).
    """
    url: str
    label: str
    color: str = Colors.GREEN
    primary: bool = False

    def render(self) -> str:
        return colorize(hyperlink(self.url, self.label), self.color)


def format_link_row(links: list[Link]) -> str:
    """Primary links first, then secondary links, each group in input order."""
    ordered = [link for link in links if link.primary] + [link for link in links if not link.primary]
    return LINK_SEPARATOR.join(link.render() for link in ordered)


def compose_side_by_side(
    image_lines: list[str],
    info_lines: list[str],
    links: list[Link] | None = None
) -> list[str]:
    """
    Interleave image lines, info lines and the link row.

    Args:
        image_lines: Rendered block art (or placeholder).
        info_lines: Formatted panel lines.
        links: Link row entries. Empty or None means no link row.

    Returns:
        The composed output lines.
    """
    image_height = len(image_lines)
    blank_image = " " * (visible_width(image_lines[0]) if image_lines else 0)

    def image_at(index: int) -> str:
        return image_lines[index] if index < image_height else blank_image

    content_rows = max(image_height - 2, len(info_lines), 0)
    padded_info = list(info_lines) + [""] * (content_rows - len(info_lines))

    output = [f"{image_at(i)}{GAP}{padded_info[i]}" for i in range(content_rows)]

    next_row = content_rows
    if links:
        output.append(f"{image_at(next_row)}{GAP}{format_link_row(links)}")
        next_row += 1

    for i in range(next_row, image_height):
        output.append(f"{image_lines[i]}{GAP}")

    return output


def print_side_by_side(
    image_lines: list[str],
    info_lines: list[str],
    links: list[Link] | None = None
) -> None:
    for line in compose_side_by_side(image_lines, info_lines, links):
        click.echo(line, color=True)
