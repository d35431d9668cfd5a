"""Command line interface for the music listening tracker.

Provides `users` to list the users in a dataset and `stats` to print the
listening summary for one of them.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .config import configure_logging, get_data_dir, get_window_timezone
from .data import MusicData
from .metrics.metrics import get_listening_summary

logger = logging.getLogger(__name__)

NO_MUSIC_MESSAGE = "No music for this user"

data_dir_option = click.option(
    "--data-dir",
    "data_dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Dataset directory (defaults to MUSIC_DATA_DIR or ./data).",
)


def _load_data(data_dir: Path | None) -> MusicData:
    try:
        return MusicData.from_directory(get_data_dir(data_dir))
    except (OSError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--log-level", default=None, help="Logging level (defaults to LOG_LEVEL or INFO).")
def main(log_level: str | None) -> None:
    """Music Listening Tracker CLI."""
    configure_logging(log_level)


@main.command("users")
@data_dir_option
def list_users(data_dir: Path | None) -> None:
    """List the user ids in the dataset."""
    music = _load_data(data_dir)
    for user_id in music.get_user_ids():
        click.echo(user_id)


@main.command("stats")
@data_dir_option
@click.option("--user-id", type=str, required=True, help="User id to summarize.")
@click.option(
    "--tz",
    "tz_name",
    type=str,
    default=None,
    help="Time zone for the Friday night window (defaults to LISTENING_TZ).",
)
def stats(data_dir: Path | None, user_id: str, tz_name: str | None) -> None:
    """Print the listening summary for one user.

    Example:
      mlt stats --user-id 1 --data-dir data
    """
    try:
        tz = get_window_timezone(tz_name)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    music = _load_data(data_dir)
    events = music.get_listen_events(user_id)
    logger.debug("Summarizing %d listen events for user %s", len(events), user_id)
    if not events:
        click.echo(NO_MUSIC_MESSAGE)
        return

    rows = [(q, a) for q, a in get_listening_summary(events, music.get_song, tz=tz) if a is not None]
    width = max((len(q) for q, _ in rows), default=0)
    click.echo(f"{'Question'.ljust(width)} | Answer")
    click.echo(f"{'-' * width}-+-{'-' * 6}")
    for question, answer in rows:
        click.echo(f"{question.ljust(width)} | {answer}")


if __name__ == "__main__":
    main()
