"""Read-only access to users, listen events and the song catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from tracker.io import load_listen_history, load_song_catalog, load_user_ids
from tracker.models import ListenEvent, Song

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

SONGS_FILE = "songs.json"
USERS_FILE = "users.json"
EVENTS_DIR = "listen_events"
EVENTS_FILE = "listen_events.json"


def _user_sort_key(user_id: str) -> tuple[int, int | str]:
    # Numeric ids first in numeric order, then the rest alphabetically
    if user_id.isdigit():
        return (0, int(user_id))
    return (1, user_id)


def _optional(value):
    return None if pd.isna(value) else value


@dataclass
class MusicData:
    """Container for the listening dataset.

    Attributes:
        songs: Song catalog with 'id', 'artist', 'title', 'duration_seconds'.
        events: Listen events with 'user_id', 'song_id', 'timestamp',
            'seconds_since_start'.
        users: Extra user ids known to the dataset, including users that have
            no listen events.
    """

    songs: pd.DataFrame
    events: pd.DataFrame
    users: list[str] = field(default_factory=list)
    _song_index: dict[str, Song] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._song_index = {
            str(row.id): Song(
                id=str(row.id),
                title=_optional(row.title),
                artist=_optional(row.artist),
                duration_seconds=_optional(row.duration_seconds),
            )
            for row in self.songs.itertuples(index=False)
        }

    @classmethod
    def from_directory(cls, data_dir: str | Path) -> MusicData:
        """Load a dataset directory.

        The directory holds 'songs.json', listen events in either a
        'listen_events/' directory or a 'listen_events.json' file, and an
        optional 'users.json' list of user ids.

        Raises:
            FileNotFoundError: If the catalog or the listen events are missing.
            ValueError: If any file is malformed.
        """
        root = Path(data_dir)
        songs = load_song_catalog(root / SONGS_FILE)
        events_path = root / EVENTS_DIR
        if not events_path.is_dir():
            events_path = root / EVENTS_FILE
        events = load_listen_history(events_path)
        users_path = root / USERS_FILE
        users = load_user_ids(users_path) if users_path.is_file() else []
        return cls(songs=songs, events=events, users=users)

    def get_user_ids(self) -> list[str]:
        """All user ids, from the user list and from the listen events."""
        ids = set(self.users) | set(self.events["user_id"].astype(str))
        return sorted(ids, key=_user_sort_key)

    def get_listen_events(self, user_id: str | int) -> list[ListenEvent]:
        """Listen events for one user in recorded order.

        Returns an empty list for unknown users.
        """
        user_df = self.events[self.events["user_id"] == str(user_id)]
        events = []
        for row in user_df.itertuples(index=False):
            since_start = _optional(row.seconds_since_start)
            events.append(
                ListenEvent(
                    song_id=str(row.song_id),
                    timestamp=str(row.timestamp),
                    user_id=str(row.user_id),
                    seconds_since_start=int(since_start) if since_start is not None else None,
                )
            )
        logger.debug("Found %d listen events for user %s", len(events), user_id)
        return events

    def get_song(self, song_id: str) -> Song | None:
        """Catalog entry for a song, or None if it is not in the catalog."""
        return self._song_index.get(str(song_id))
