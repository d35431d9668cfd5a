from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from tracker.models import Song

SongLookup = Callable[[str], Song | None]


def top_key(
    items: Iterable[Any] | None,
    key: Callable[[Any], Hashable | None],
    value: Callable[[Any], float | None] | None = None,
) -> Hashable | None:
    """Tally items by key and return the key with the greatest total.

    Args:
        items (Iterable | None): Items to tally. None is treated as empty.
        key (Callable): Extracts the tally key from an item. Items whose key
            is None are skipped.
        value (Callable | None): Contribution of an item to its key. Defaults
            to 1 per item. Items whose contribution is None are skipped.

    Returns:
        Hashable | None: The winning key, or None when nothing accumulated a
            positive total. On ties the key that reached the maximum first
            in tally order wins.
    """
    if not items:
        return None

    tally: defaultdict[Hashable, float] = defaultdict(int)
    for item in items:
        k = key(item)
        if k is None:
            continue
        amount = 1 if value is None else value(item)
        if amount is None:
            continue
        tally[k] += amount

    # A later key must strictly exceed the running maximum to replace it
    best_key = None
    best_total = 0
    for k, total in tally.items():
        if total > best_total:
            best_key = k
            best_total = total
    return best_key


def format_song_label(song: Song) -> str:
    """Format a song as "<artist> - <title>"."""
    return f"{song.artist} - {song.title}"


def resolve_song_label(song_id: str | None, get_song: SongLookup) -> str | None:
    """Look up a song and format its label.

    Returns:
        str | None: The formatted label, or None if there is no song id or the
            song is missing from the catalog.
    """
    if song_id is None:
        return None
    song = get_song(song_id)
    if song is None:
        return None
    return format_song_label(song)
