import datetime as dt
import logging

from dash import Dash, Input, Output

from dashboard.components.stats import (
    NO_MUSIC_MESSAGE,
    SELECT_USER_MESSAGE,
    create_message,
    create_stats_table,
)
from tracker.data import MusicData
from tracker.metrics.metrics import get_listening_summary

logger = logging.getLogger(__name__)


def render_user_summary(music: MusicData, user_id: str | None, tz: dt.tzinfo | None = None):
    """Build the contents of the statistics section for a user selection."""
    if not user_id:
        return create_message(SELECT_USER_MESSAGE)

    events = music.get_listen_events(user_id)
    if not events:
        logger.info("No listen events for user %s", user_id)
        return create_message(NO_MUSIC_MESSAGE)

    rows = get_listening_summary(events, music.get_song, tz=tz)
    return create_stats_table(rows)


def register_callbacks(app: Dash, music: MusicData, tz: dt.tzinfo | None = None) -> None:
    @app.callback(
        Output("user-data-display", "children"),
        Input("user-select", "value"),
    )
    def update_user_data(selected_user):
        logger.info("User selected: %s", selected_user)
        return render_user_summary(music, selected_user, tz=tz)
