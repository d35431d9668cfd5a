"""
Module to create and run the Music Listening Tracker Dash application.
"""

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
import dash_mantine_components as dmc  # type: ignore
from dash import Dash

from dashboard.callbacks.callbacks import register_callbacks
from dashboard.conn import get_music_data
from dashboard.layouts.layouts import create_layout
from tracker.config import configure_logging, get_window_timezone

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)


def create_app(data_dir: str | None = None) -> Dash:
    """Create and configure the Dash application.

    Loads the listening dataset, sets up the app layout and callbacks, and
    returns the Dash app instance.

    Args:
        data_dir (str | None): Dataset directory. Defaults to MUSIC_DATA_DIR.

    Returns:
        Dash: Configured Dash application.

    Raises:
        OSError: If the data directory or its files are missing.
        ValueError: If the dataset or LISTENING_TZ is malformed.
    """
    # Path to dashboard assets directory
    assets_path = Path(__file__).parent / "assets"
    # Initialize Dash app with external Bootstrap stylesheet
    app = Dash(
        __name__,
        assets_folder=str(assets_path),
        external_stylesheets=[dbc.themes.BOOTSTRAP],
    )

    try:
        music = get_music_data(data_dir)
        tz = get_window_timezone()
    except Exception:
        logger.exception("Error loading listening data:")
        raise

    # Initialize app layout and register callbacks
    logger.info("Initializing layout and callbacks...")
    app.layout = dmc.MantineProvider(
        id="mantine-provider",
        defaultColorScheme="light",
        withCssVariables=True,
        theme={
            "primaryColor": "green",
        },
        children=create_layout(music.get_user_ids()),
    )
    register_callbacks(app, music, tz=tz)
    logger.info("App initialization complete.")

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
