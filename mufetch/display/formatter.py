"""
Value formatting for the info panel.

All functions are pure and return plain strings (info_line() adds
color codes).
"""

from datetime import datetime

from mufetch.core.logger import Colors


# Labels are padded to this width plus MIN_LABEL_PADDING so values align
LABEL_WIDTH = 12
MIN_LABEL_PADDING = 2

MAX_GENRES_LENGTH = 50
ELLIPSIS = "..."

NOT_AVAILABLE = "N/A"


def info_line(label: str, value: str, color: str) -> str:
    """
    Format a bold label and a colored value in aligned columns.

    Example:
        info_line("Name", "Bohemian Rhapsody", Colors.GREEN)
        # "\\033[1mName\\033[0m          \\033[32mBohemian Rhapsody\\033[0m"
    """
    padding = max(LABEL_WIDTH - len(label) + MIN_LABEL_PADDING, MIN_LABEL_PADDING)
    return f"{Colors.BOLD}{label}{Colors.RESET}{' ' * padding}{color}{value}{Colors.RESET}"


def section_header(title: str) -> str:
    return f"{Colors.BOLD}{title}{Colors.RESET}"


def format_ordinal_date(date_str: str) -> str:
    """
    Convert a Spotify release date to ordinal form.

    Examples:
        "2020-01-03" -> "3rd Jan 2020"
        "2020"       -> "2020"
        "2020-01"    -> "2020-01" (unparseable strings are returned as-is)
        ""           -> "N/A"
    """
    if not date_str:
        return NOT_AVAILABLE

    try:
        date = datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError:
        try:
            return datetime.strptime(date_str, "%Y").strftime("%Y")
        except ValueError:
            return date_str

    return f"{date.day}{ordinal_suffix(date.day)} {date.strftime('%b')} {date.year}"


def ordinal_suffix(day: int) -> str:
    """English ordinal suffix: 1st, 2nd, 3rd, 4th ... 11th, 12th, 13th ... 21st."""
    if 11 <= day <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_duration(duration_ms: int) -> str:
    """
    Convert milliseconds to M:SS.

    Minutes are not wrapped into hours, so long albums read e.g. "74:12".
    """
    total_seconds = max(duration_ms, 0) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


def format_number(n: int) -> str:
    """Abbreviate large counts: 1500 -> "1.5K", 2500000 -> "2.5M", 500 -> "500"."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1000:
        return f"{n / 1000:.1f}K"
    return str(n)


def format_bool(value: bool) -> str:
    return "Yes" if value else "No"


def format_string(value: str) -> str:
    return value if value else NOT_AVAILABLE


def format_percent(value: int) -> str:
    return f"{value}%"


def format_genres(genres: tuple[str, ...] | list[str]) -> str:
    """
    Comma-join genres, truncated to MAX_GENRES_LENGTH characters.

    Overlong strings keep their first 47 characters followed by "...".
    """
    genre_string = ", ".join(genres)
    if len(genre_string) > MAX_GENRES_LENGTH:
        genre_string = genre_string[:MAX_GENRES_LENGTH - len(ELLIPSIS)] + ELLIPSIS
    return genre_string
