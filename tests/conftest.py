import json

import pytest

from tracker.data import MusicData
from tracker.models import ListenEvent, Song


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings from the developer environment out of the tests."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("MUSIC_DATA_DIR", raising=False)
    monkeypatch.delenv("LISTENING_TZ", raising=False)


@pytest.fixture
def catalog():
    return {
        "A": Song(id="A", title="T1", artist="X", duration_seconds=200),
        "B": Song(id="B", title="T2", artist="Y", duration_seconds=100),
        "C": Song(id="C", title="Long Song", artist="Z", duration_seconds=300),
        "D": Song(id="D", title="Short Song", artist="W", duration_seconds=50),
    }


@pytest.fixture
def get_song(catalog):
    return catalog.get


@pytest.fixture
def sample_events():
    # 2024-01-05 is a Friday, 2024-01-03 a Wednesday
    return [
        ListenEvent(song_id="A", timestamp="2024-01-05T20:00:00"),
        ListenEvent(song_id="A", timestamp="2024-01-05T21:00:00"),
        ListenEvent(song_id="B", timestamp="2024-01-03T10:00:00"),
    ]


@pytest.fixture
def data_dir(tmp_path):
    """Write a small dataset directory and return its path."""
    songs = [
        {"id": "A", "artist": "X", "title": "T1", "duration_seconds": 200},
        {"id": "B", "artist": "Y", "title": "T2", "duration_seconds": 100},
        {"id": "C", "artist": "Z", "title": "T3"},
    ]
    events_1 = [
        {"user_id": "1", "song_id": "A", "timestamp": "2024-01-05T20:00:00", "seconds_since_start": 0},
        {"user_id": "1", "song_id": "A", "timestamp": "2024-01-05T21:00:00", "seconds_since_start": 200},
        {"user_id": "1", "song_id": "B", "timestamp": "2024-01-03T10:00:00", "seconds_since_start": 0},
    ]
    events_2 = [
        {"user_id": 2, "song_id": "B", "timestamp": "2024-01-04T10:00:00"},
        {"user_id": 10, "song_id": "missing", "timestamp": "2024-01-04T11:00:00"},
    ]

    (tmp_path / "songs.json").write_text(json.dumps(songs), encoding="utf-8")
    (tmp_path / "users.json").write_text(json.dumps(["1", "2", "4"]), encoding="utf-8")
    events_dir = tmp_path / "listen_events"
    events_dir.mkdir()
    (events_dir / "a_user_1.json").write_text(json.dumps(events_1), encoding="utf-8")
    (events_dir / "b_others.json").write_text(json.dumps(events_2), encoding="utf-8")
    return tmp_path


@pytest.fixture
def music_data(data_dir):
    return MusicData.from_directory(data_dir)
