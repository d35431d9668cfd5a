import logging
import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

# Only override environment variables in explicit local/test scenarios to prevent overwriting deploy-time env vars
should_override = os.environ.get("ENVIRONMENT", "") in ["local", "dev", "development", "test"]
load_dotenv(override=should_override)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for an entry point.

    Args:
        level (str | None): Level name. Defaults to LOG_LEVEL or INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def get_data_dir(data_dir: str | Path | None = None) -> Path:
    """Get the dataset directory from the argument, environment or default.

    Returns:
        Path: Resolved path to the data directory.

    Raises:
        OSError: If the directory does not exist.
    """
    raw = str(data_dir) if data_dir is not None else os.getenv("MUSIC_DATA_DIR", "data")

    # Expand environment variables and user home before checking
    expanded = Path(os.path.expanduser(os.path.expandvars(raw)))
    if not expanded.is_dir():
        logger.error("Data directory not found at resolved path '%s'", expanded)
        raise OSError(f"Data directory not found at resolved path '{expanded}'")
    return expanded


def get_window_timezone(name: str | None = None) -> ZoneInfo | None:
    """Get the zone used to read the wall clock of listen timestamps.

    Args:
        name (str | None): IANA zone name. Defaults to LISTENING_TZ. When
            neither is set, timestamps are read exactly as written.

    Raises:
        ValueError: If the zone name is unknown.
    """
    zone = name if name is not None else os.getenv("LISTENING_TZ")
    if not zone:
        return None
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ValueError(f"Unknown time zone: {zone!r}") from exc
