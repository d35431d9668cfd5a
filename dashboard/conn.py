import logging

from tracker.config import get_data_dir
from tracker.data import MusicData

# Configure logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def get_music_data(data_dir: str | None = None) -> MusicData:
    """Load the listening dataset used by the dashboard.

    Args:
        data_dir (str | None): Dataset directory. Defaults to MUSIC_DATA_DIR.

    Returns:
        MusicData: Loaded dataset.
    """
    path = get_data_dir(data_dir)
    try:
        music = MusicData.from_directory(path)
        logger.info(
            "Loaded dataset at %s (%d users, %d songs)",
            path,
            len(music.get_user_ids()),
            len(music.songs),
        )
        return music
    except Exception as e:
        logger.error("Failed to load dataset: %s", e)
        raise
