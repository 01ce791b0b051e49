"""
Command-line interface for mufetch.

This module implements the CLI using Click, with rich-click for the
help output colors.

Commands:
    mufetch search <query>              Look up a track, album or artist
    mufetch search <query> -t album     Force the record kind
    mufetch search <query> -s 30        Cover art grid size (15-35)
    mufetch auth                        Store Spotify API credentials

Options:
    --verbose                           Show debug logging on stderr
    --version                           Show version and exit

Usage:
    # First-time setup
    mufetch auth

    # Auto-detect: tries track, then album, then artist
    mufetch search "bohemian rhapsody"

    # Artist with a large cover
    mufetch search radiohead --type artist --size 35

Configuration:
    Credentials live in ~/.config/mufetch/config.yaml, or come from the
    MUFETCH_SPOTIFY_CLIENT_ID / MUFETCH_SPOTIFY_CLIENT_SECRET environment
    variables, which take precedence.

Exit Codes:
    0   Success, including "no results found"
    1   Configuration error or unexpected error
    3   Spotify error (authentication or lookup failure)
    4   Other mufetch error
    130 Interrupted by user
"""

import sys

import colorama
import rich_click as click

# Configure rich-click for better help formatting
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = ""
click.rich_click.MAX_WIDTH = 100

from mufetch import __version__
from mufetch.core import (
    ConfigError,
    MufetchError,
    SpotifyError,
    get_config_dir,
    get_logger,
    has_credentials,
    init_config,
    load_config,
    load_credentials,
    save_credentials,
    setup_logging,
    shutdown_logging,
)
from mufetch.display import clamp_image_size, display_record
from mufetch.display.terminal import CURSOR_UP_CLEAR, HIDE_CURSOR, SHOW_CURSOR
from mufetch.spotify import AUTO, SpotifyClient, resolve_record

logger = get_logger(__name__)


SEARCH_TYPES = [AUTO, "track", "album", "artist"]

# Credentials shorter than this trigger a warning in `mufetch auth`
MIN_CREDENTIAL_LENGTH = 10

DASHBOARD_URL = "https://developer.spotify.com/dashboard"


@click.group()
@click.version_option(__version__, prog_name="mufetch")
@click.option(
    "--verbose",
    is_flag=True,
    help="Show debug logging on stderr"
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """
    mufetch: neofetch-like music lookups in your terminal.

    Shows track, album and artist metadata from Spotify next to a
    block-art rendition of the cover.

    \b
    BASIC USAGE:
        mufetch auth                                  # Store API credentials
        mufetch search "bohemian rhapsody"            # Auto-detect kind
        mufetch search radiohead -t artist -s 30      # Artist, bigger cover
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("query", nargs=-1, required=True)
@click.option(
    "--type", "-t", "search_type",
    type=click.Choice(SEARCH_TYPES, case_sensitive=False),
    default=AUTO,
    show_default=True,
    help="Record kind to search for"
)
@click.option(
    "--size", "-s",
    type=int,
    default=None,
    metavar="<15-35>",
    help="Cover grid size; out-of-range values are clamped (default from config, else 20)"
)
@click.pass_context
def search(ctx: click.Context, query: tuple[str, ...], search_type: str, size: int | None) -> None:
    """
    Search for a track, album or artist and display its metadata.

    With the default auto type, tracks are tried first, then albums,
    then artists.
    """
    query_text = " ".join(query)
    search_type = search_type.lower()

    try:
        setup_logging(get_config_dir() / "logs", verbose=ctx.obj.get("verbose", False))
        logger.info(f"mufetch {__version__} search: {query_text!r} ({search_type})")

        config = load_config()
        if not has_credentials():
            click.echo("No Spotify credentials found!", err=True)
            click.echo("Run 'mufetch auth' to set up your API credentials.", err=True)
            sys.exit(1)

        credentials = load_credentials()
        image_size = clamp_image_size(size if size is not None else config.display.image_size)

        client = SpotifyClient(
            client_id=credentials.client_id,
            client_secret=credentials.client_secret,
            market=credentials.market
        )

        _run_search(client, query_text, search_type, image_size)

    except ConfigError as e:
        click.echo(f"Configuration error: {e.message}", err=True)
        logger.error(f"Configuration error: {e.message}")
        sys.exit(1)

    except SpotifyError as e:
        click.echo(f"Spotify error: {e.message}", err=True)
        if e.is_auth_error:
            click.echo("Check your credentials with 'mufetch auth'", err=True)
        logger.error(f"Spotify error: {e.message}", exc_info=True)
        sys.exit(3)

    except MufetchError as e:
        click.echo(f"Error: {e.message}", err=True)
        logger.error(f"Error: {e.message}", exc_info=True)
        sys.exit(4)

    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        logger.info("Interrupted by user")
        sys.exit(130)

    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        logger.exception("Unexpected error")
        sys.exit(1)

    finally:
        shutdown_logging()


def _run_search(client: SpotifyClient, query: str, search_type: str, image_size: int) -> None:
    """
    Resolve the query and print the display block.

    The cursor is hidden while rendering and restored on every path.
    """
    click.echo(HIDE_CURSOR, nl=False, color=True)
    try:
        click.echo()

        record = resolve_record(client, query, search_type)
        if record is None:
            noun = "results" if search_type == AUTO else f"{search_type}s"
            click.echo(f"No {noun} found for: {query}")
            logger.info(f"No {noun} found for {query!r}")
            return

        logger.info(f"Resolved {record.kind.value}: {record.name} ({record.spotify_id})")
        display_record(record, client, image_size)

        click.echo(CURSOR_UP_CLEAR, color=True)
    finally:
        click.echo(SHOW_CURSOR, nl=False, color=True)


@cli.command()
def auth() -> None:
    """
    Store your Spotify API credentials.

    \b
    You need to:
    1. Go to https://developer.spotify.com/dashboard
    2. Create a new app
    3. Copy your Client ID and Client Secret
    """
    click.echo("Spotify API Authentication Setup")
    click.echo()
    click.echo("To get your Spotify API credentials:")
    click.echo(f"1. Go to: {DASHBOARD_URL}")
    click.echo("2. Log in with your Spotify account")
    click.echo("3. Click 'Create an App'")
    click.echo("4. Fill in app name and description")
    click.echo("5. Copy your Client ID and Client Secret")
    click.echo()

    client_id = click.prompt(
        "Enter your Spotify Client ID", default="", show_default=False
    ).strip()
    client_secret = click.prompt(
        "Enter your Spotify Client Secret", default="", show_default=False, hide_input=True
    ).strip()

    if not client_id or not client_secret:
        click.echo("Error: Both Client ID and Client Secret are required!", err=True)
        sys.exit(1)

    if len(client_id) < MIN_CREDENTIAL_LENGTH or len(client_secret) < MIN_CREDENTIAL_LENGTH:
        click.echo("Warning: Credentials seem too short. Please verify they are correct.")

    try:
        init_config()
        path = save_credentials(client_id, client_secret)
    except ConfigError as e:
        click.echo(f"Failed to save credentials: {e.message}", err=True)
        sys.exit(1)

    click.echo(f"Credentials saved to {path}")
    click.echo("You can now use 'mufetch search <query>' to search for music.")


def main() -> None:
    """
    Entry point for the CLI.

    This function is called when running `mufetch` from the command line.
    """
    # ANSI sequences need enabling on legacy Windows consoles
    colorama.just_fix_windows_console()
    cli()


if __name__ == "__main__":
    main()
