"""
Terminal escape sequences used by the display layer.

Covers truecolor background cells, OSC 8 hyperlinks, cursor control and
measuring the visible width of a string that contains escape sequences.
"""

import re

from mufetch.core.logger import Colors


HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

# Move to the start of the previous line and clear it
CURSOR_UP_CLEAR = "\033[F\033[K"

# CSI sequences (colors, cursor) and OSC 8 hyperlink wrappers
_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]|\x1b\]8;;.*?\x1b\\")


def background_cell(red: int, green: int, blue: int) -> str:
    """Two-character block with a 24-bit background color, then reset."""
    return f"\033[48;2;{red};{green};{blue}m  {Colors.RESET}"


def hyperlink(url: str, text: str) -> str:
    """
    Wrap text in an OSC 8 terminal hyperlink.

    Terminals without hyperlink support show the plain text.
    """
    return f"\033]8;;{url}\033\\{text}\033]8;;\033\\"


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{Colors.RESET}"


def strip_ansi(text: str) -> str:
    return _ANSI_PATTERN.sub("", text)


def visible_width(text: str) -> int:
    """Number of printed columns, ignoring escape sequences."""
    return len(strip_ansi(text))
