"""Test the command-line interface"""

from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from mufetch import __version__
from mufetch.cli import cli
from mufetch.core.exceptions import ImageError, SpotifyError
from mufetch.display.terminal import HIDE_CURSOR, SHOW_CURSOR
from mufetch.spotify.models import Track


TRACK = Track(spotify_id='t1', name='Song')


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def search_mocks():
    """Patch the client, resolution and display used by `mufetch search`"""
    with patch("mufetch.cli.SpotifyClient") as client_cls, \
            patch("mufetch.cli.resolve_record") as resolve, \
            patch("mufetch.cli.display_record") as display:
        resolve.return_value = TRACK
        yield client_cls, resolve, display


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_commands(runner):
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "search" in result.output
    assert "auth" in result.output


class TestAuth:
    """Test `mufetch auth`"""

    def test_saves_credentials(self, runner, config_dir):
        result = runner.invoke(cli, ["auth"], input="abcdefghij123\nsecretsecret456\n")

        assert result.exit_code == 0, result.output
        assert "Credentials saved" in result.output
        assert "Warning" not in result.output
        document = yaml.safe_load((config_dir / "config.yaml").read_text(encoding="utf-8"))
        assert document["spotify"]["client_id"] == "abcdefghij123"
        assert document["spotify"]["client_secret"] == "secretsecret456"

    def test_empty_values_rejected(self, runner, config_dir):
        result = runner.invoke(cli, ["auth"], input="\n\n")

        assert result.exit_code == 1
        assert "required" in result.output
        assert not (config_dir / "config.yaml").exists()

    def test_short_values_warn_but_save(self, runner, config_dir):
        result = runner.invoke(cli, ["auth"], input="short\ntiny\n")

        assert result.exit_code == 0, result.output
        assert "too short" in result.output
        assert (config_dir / "config.yaml").exists()

    def test_shows_dashboard_url(self, runner, config_dir):
        result = runner.invoke(cli, ["auth"], input="\n\n")
        assert "https://developer.spotify.com/dashboard" in result.output


class TestSearch:
    """Test `mufetch search`"""

    def test_missing_credentials(self, runner, config_dir, search_mocks):
        result = runner.invoke(cli, ["search", "bohemian", "rhapsody"])

        assert result.exit_code == 1
        assert "No Spotify credentials found!" in result.output
        assert "mufetch auth" in result.output

    def test_query_required(self, runner, env_credentials):
        result = runner.invoke(cli, ["search"])
        assert result.exit_code == 2

    def test_invalid_type(self, runner, env_credentials):
        result = runner.invoke(cli, ["search", "x", "--type", "playlist"])
        assert result.exit_code == 2

    def test_displays_record(self, runner, env_credentials, search_mocks):
        client_cls, resolve, display = search_mocks

        result = runner.invoke(cli, ["search", "bohemian", "rhapsody"])

        assert result.exit_code == 0, result.output
        client_cls.assert_called_once_with(
            client_id="env_client_id_123",
            client_secret="env_client_secret_456",
            market="US"
        )
        resolve.assert_called_once_with(client_cls.return_value, "bohemian rhapsody", "auto")
        display.assert_called_once_with(TRACK, client_cls.return_value, 20)

    def test_cursor_hidden_then_restored(self, runner, env_credentials, search_mocks):
        result = runner.invoke(cli, ["search", "song"])

        assert result.output.index(HIDE_CURSOR) < result.output.index(SHOW_CURSOR)

    @pytest.mark.parametrize("size, expected", [("1", 15), ("99", 35), ("27", 27)])
    def test_size_clamped(self, runner, env_credentials, search_mocks, size, expected):
        _, _, display = search_mocks

        result = runner.invoke(cli, ["search", "song", "-s", size])

        assert result.exit_code == 0, result.output
        assert display.call_args.args[2] == expected

    def test_size_default_from_config(self, runner, env_credentials, search_mocks):
        env_credentials.mkdir(parents=True)
        (env_credentials / "config.yaml").write_text("display:\n  image_size: 25\n", encoding="utf-8")
        _, _, display = search_mocks

        runner.invoke(cli, ["search", "song"])

        assert display.call_args.args[2] == 25

    def test_type_passed_through(self, runner, env_credentials, search_mocks):
        _, resolve, _ = search_mocks

        runner.invoke(cli, ["search", "radiohead", "-t", "ARTIST"])

        assert resolve.call_args.args[2] == "artist"

    def test_no_results(self, runner, env_credentials, search_mocks):
        _, resolve, display = search_mocks
        resolve.return_value = None

        result = runner.invoke(cli, ["search", "zzzz", "qqqq"])

        assert result.exit_code == 0
        assert "No results found for: zzzz qqqq" in result.output
        display.assert_not_called()

    def test_no_results_forced_kind(self, runner, env_credentials, search_mocks):
        _, resolve, _ = search_mocks
        resolve.return_value = None

        result = runner.invoke(cli, ["search", "zzzz", "-t", "track"])

        assert result.exit_code == 0
        assert "No tracks found for: zzzz" in result.output

    def test_auth_failure(self, runner, env_credentials, search_mocks):
        _, resolve, _ = search_mocks
        resolve.side_effect = SpotifyError("Spotify authentication failed", is_auth_error=True)

        result = runner.invoke(cli, ["search", "song"])

        assert result.exit_code == 3
        assert "Spotify authentication failed" in result.output
        assert "mufetch auth" in result.output
        assert SHOW_CURSOR in result.output

    def test_lookup_failure(self, runner, env_credentials, search_mocks):
        _, resolve, _ = search_mocks
        resolve.side_effect = SpotifyError("Rate limited while trying to search track", is_rate_limit=True)

        result = runner.invoke(cli, ["search", "song"])

        assert result.exit_code == 3
        assert "mufetch auth" not in result.output

    def test_other_mufetch_error(self, runner, env_credentials, search_mocks):
        _, _, display = search_mocks
        display.side_effect = ImageError("decoder exploded")

        result = runner.invoke(cli, ["search", "song"])

        assert result.exit_code == 4

    def test_invalid_config(self, runner, env_credentials, search_mocks):
        env_credentials.mkdir(parents=True)
        (env_credentials / "config.yaml").write_text("spotify: [unclosed\n", encoding="utf-8")

        result = runner.invoke(cli, ["search", "song"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_unexpected_error(self, runner, env_credentials, search_mocks):
        _, resolve, _ = search_mocks
        resolve.side_effect = RuntimeError("bug")

        result = runner.invoke(cli, ["search", "song"])

        assert result.exit_code == 1
        assert "Unexpected error: bug" in result.output

    def test_interrupted(self, runner, env_credentials, search_mocks):
        _, resolve, _ = search_mocks
        resolve.side_effect = KeyboardInterrupt

        result = runner.invoke(cli, ["search", "song"])

        assert result.exit_code == 130

    def test_log_files_written(self, runner, env_credentials, search_mocks):
        runner.invoke(cli, ["search", "song"])

        assert (env_credentials / "logs" / "log_full.log").exists()
