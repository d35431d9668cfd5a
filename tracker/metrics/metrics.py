import datetime as dt
import logging
from collections.abc import Callable, Sequence

from tracker.metrics.utils import SongLookup, resolve_song_label, top_key
from tracker.models import ListenEvent
from tracker.preprocessing import filter_friday_night

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def most_listened_song_by_count(
    events: Sequence[ListenEvent] | None,
    get_song: SongLookup,
) -> str | None:
    """Most played song by number of plays.

    Args:
        events: Listen events for one user.
        get_song: Catalog lookup returning a Song or None.

    Returns:
        str | None: "<artist> - <title>" of the winning song, or None when
            there are no events or the winner is missing from the catalog.
    """
    song_id = top_key(events, key=lambda event: event.song_id)
    return resolve_song_label(song_id, get_song)


def most_listened_song_by_duration(
    events: Sequence[ListenEvent] | None,
    get_song: SongLookup,
) -> str | None:
    """Most played song by total time played.

    Each play contributes the song's full duration. Plays of songs that are
    missing from the catalog, or have no duration, are ignored.
    """

    def duration(event: ListenEvent) -> float | None:
        song = get_song(event.song_id)
        if song is None or not song.duration_seconds:
            return None
        return song.duration_seconds

    song_id = top_key(events, key=lambda event: event.song_id, value=duration)
    return resolve_song_label(song_id, get_song)


def most_listened_artist_by_count(
    events: Sequence[ListenEvent] | None,
    get_song: SongLookup,
) -> str | None:
    """Most played artist by number of plays.

    Plays whose song cannot be resolved, or has no artist, are ignored.

    Returns:
        str | None: Artist name, or None if no play could be attributed.
    """

    def artist(event: ListenEvent) -> str | None:
        song = get_song(event.song_id)
        if song is None or not song.artist:
            return None
        return song.artist

    return top_key(events, key=artist)


def most_listened_friday_night_song_by_count(
    events: Sequence[ListenEvent] | None,
    get_song: SongLookup,
    tz: str | dt.tzinfo | None = None,
) -> str | None:
    """Most played song by number of plays between Friday 19:00 and Saturday 04:00."""
    return most_listened_song_by_count(filter_friday_night(events, tz=tz), get_song)


def most_listened_friday_night_song_by_duration(
    events: Sequence[ListenEvent] | None,
    get_song: SongLookup,
    tz: str | dt.tzinfo | None = None,
) -> str | None:
    """Most played song by total time played between Friday 19:00 and Saturday 04:00."""
    return most_listened_song_by_duration(filter_friday_night(events, tz=tz), get_song)


SUMMARY_QUESTIONS: list[tuple[str, Callable[..., str | None], bool]] = [
    ("Most listened song (count)", most_listened_song_by_count, False),
    ("Most listened song (time)", most_listened_song_by_duration, False),
    ("Most listened artist (count)", most_listened_artist_by_count, False),
    ("Friday night song (count)", most_listened_friday_night_song_by_count, True),
    ("Friday night song (time)", most_listened_friday_night_song_by_duration, True),
]


def get_listening_summary(
    events: Sequence[ListenEvent] | None,
    get_song: SongLookup,
    tz: str | dt.tzinfo | None = None,
) -> list[tuple[str, str | None]]:
    """Compute every listening statistic for one user.

    Each statistic is computed on its own: an error raised while computing one
    is logged and reported as None for that row, and the rest still run.

    Returns:
        list[tuple[str, str | None]]: (question, answer) rows in display order.
    """
    rows: list[tuple[str, str | None]] = []
    for question, func, windowed in SUMMARY_QUESTIONS:
        try:
            answer = func(events, get_song, tz=tz) if windowed else func(events, get_song)
        except Exception:
            logger.exception("Failed to compute %r", question)
            answer = None
        rows.append((question, answer))
    return rows
