"""Test configuration and fixtures"""

from io import BytesIO

import pytest
from PIL import Image

from mufetch.core.config import CLIENT_ID_ENV, CLIENT_SECRET_ENV, CONFIG_DIR_ENV


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the configuration directory at a temp dir with no env credentials"""
    directory = tmp_path / "mufetch"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(directory))
    monkeypatch.delenv(CLIENT_ID_ENV, raising=False)
    monkeypatch.delenv(CLIENT_SECRET_ENV, raising=False)
    return directory


@pytest.fixture
def env_credentials(config_dir, monkeypatch):
    """Valid credentials supplied through the environment"""
    monkeypatch.setenv(CLIENT_ID_ENV, "env_client_id_123")
    monkeypatch.setenv(CLIENT_SECRET_ENV, "env_client_secret_456")
    return config_dir


@pytest.fixture
def artist_data():
    """Full artist object as returned by spotify.artist()"""
    return {
        'id': 'artist_123',
        'name': 'Test Artist',
        'external_urls': {'spotify': 'https://open.spotify.com/artist/artist_123'},
        'images': [
            {'url': 'https://i.scdn.co/image/artist_large', 'width': 640, 'height': 640},
            {'url': 'https://i.scdn.co/image/artist_small', 'width': 160, 'height': 160},
        ],
        'genres': ['art rock', 'alternative rock'],
        'popularity': 81,
        'followers': {'href': None, 'total': 2500000},
    }


@pytest.fixture
def simple_artist_data():
    """Simplified artist object embedded in tracks and albums"""
    return {
        'id': 'artist_123',
        'name': 'Test Artist',
        'external_urls': {'spotify': 'https://open.spotify.com/artist/artist_123'},
    }


@pytest.fixture
def album_data(simple_artist_data):
    """Full album object as returned by spotify.album()"""
    return {
        'id': 'album_123',
        'name': 'Test Album',
        'external_urls': {'spotify': 'https://open.spotify.com/album/album_123'},
        'artists': [simple_artist_data],
        'images': [{'url': 'https://i.scdn.co/image/album_cover', 'width': 640, 'height': 640}],
        'album_type': 'album',
        'release_date': '2023-01-03',
        'release_date_precision': 'day',
        'total_tracks': 2,
        'genres': [],
        'popularity': 64,
        'label': 'Test Records',
        'tracks': {
            'items': [
                {
                    'id': 'track_1',
                    'name': 'Opening',
                    'external_urls': {'spotify': 'https://open.spotify.com/track/track_1'},
                    'artists': [simple_artist_data],
                    'duration_ms': 180000,  # 3:00
                    'track_number': 1,
                    'disc_number': 1,
                    'explicit': False,
                },
                {
                    'id': 'track_2',
                    'name': 'Closing',
                    'external_urls': {'spotify': 'https://open.spotify.com/track/track_2'},
                    'artists': [simple_artist_data],
                    'duration_ms': 210000,  # 3:30
                    'track_number': 2,
                    'disc_number': 1,
                    'explicit': True,
                },
            ],
            'total': 2,
        },
    }


@pytest.fixture
def track_data(simple_artist_data):
    """Full track object as returned by search and spotify.track()"""
    return {
        'id': 'track_123',
        'name': 'Test Song',
        'external_urls': {'spotify': 'https://open.spotify.com/track/track_123'},
        'artists': [simple_artist_data],
        'album': {
            'id': 'album_123',
            'name': 'Test Album',
            'external_urls': {'spotify': 'https://open.spotify.com/album/album_123'},
            'artists': [simple_artist_data],
            'images': [{'url': 'https://i.scdn.co/image/album_cover', 'width': 640, 'height': 640}],
            'album_type': 'album',
            'release_date': '2023-01-03',
            'total_tracks': 12,
        },
        'duration_ms': 210000,  # 3:30
        'track_number': 3,
        'disc_number': 1,
        'explicit': True,
        'popularity': 75,
        'preview_url': None,
    }


@pytest.fixture
def png_bytes():
    """A small solid red PNG"""
    buffer = BytesIO()
    Image.new("RGB", (8, 6), (255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()
