from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListenEvent:
    """One recorded playback of a song by a user.

    Attributes:
        song_id: Identifier of the song that was played.
        timestamp: ISO-8601 datetime string of the playback.
        user_id: Identifier of the listening user, if known.
        seconds_since_start: Offset into the song at which playback began.
    """

    song_id: str
    timestamp: str
    user_id: str | None = None
    seconds_since_start: int | None = None


@dataclass(frozen=True)
class Song:
    """Catalog entry for a song.

    Attributes:
        id: Song identifier.
        title: Song title.
        artist: Artist name.
        duration_seconds: Length of the song in seconds.
    """

    id: str
    title: str
    artist: str
    duration_seconds: float | None = None
