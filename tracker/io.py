import json
import logging
from pathlib import Path
from typing import List

import pandas as pd

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

SONG_COLUMNS = ["id", "artist", "title", "duration_seconds"]
EVENT_COLUMNS = ["user_id", "song_id", "timestamp", "seconds_since_start"]


def _read_records(file_path: Path) -> List[dict]:
    with file_path.open("r", encoding="utf-8") as fp:
        records = json.load(fp)
    if not isinstance(records, list):
        raise ValueError(f"Expected a list of records in {file_path}")
    return records


def _require_columns(df: pd.DataFrame, required: list[str], source: Path) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{source} is missing required fields: {', '.join(missing)}")


def load_song_catalog(path: str | Path) -> pd.DataFrame:
    """Load the song catalog JSON file into a DataFrame.

    Args:
        path (str | Path): Path to a JSON file holding a list of songs with
            'id', 'artist', 'title' and 'duration_seconds' fields.

    Returns:
        pd.DataFrame: One row per song. Ids are strings; durations are
            numeric with missing values as NaN.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a list of song records.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Song catalog not found at '{file_path}'")

    df = pd.DataFrame(_read_records(file_path))
    if df.empty:
        return pd.DataFrame(columns=SONG_COLUMNS)
    _require_columns(df, ["id", "artist", "title"], file_path)
    if "duration_seconds" not in df.columns:
        df["duration_seconds"] = pd.NA

    df["id"] = df["id"].astype(str)
    df["duration_seconds"] = pd.to_numeric(df["duration_seconds"], errors="coerce")
    logger.info("Loaded %d songs from %s", len(df), file_path)
    return df[SONG_COLUMNS]


def load_listen_history(path: str | Path) -> pd.DataFrame:
    """Load listen events from a JSON file or a directory of JSON files.

    Reads every .json file in the directory in sorted name order, each holding
    a list of listen events. Event order inside each file is kept.

    Args:
        path (str | Path): A JSON file, or a directory of JSON files, with
            records containing 'user_id', 'song_id' and 'timestamp'.

    Returns:
        pd.DataFrame: Combined listen events. 'timestamp' is left as the
            original ISO-8601 string.

    Raises:
        FileNotFoundError: If the path does not exist.
        ValueError: If a file is not a list of event records.
    """
    source = Path(path)
    if source.is_dir():
        files = sorted(source.glob("*.json"))
    elif source.is_file():
        files = [source]
    else:
        raise FileNotFoundError(f"Listen history not found at '{source}'")

    all_records: List[dict] = []
    for file_path in files:
        all_records.extend(_read_records(file_path))

    df = pd.DataFrame(all_records)
    if df.empty:
        return pd.DataFrame(columns=EVENT_COLUMNS)
    _require_columns(df, ["user_id", "song_id", "timestamp"], source)
    if "seconds_since_start" not in df.columns:
        df["seconds_since_start"] = pd.NA

    df["user_id"] = df["user_id"].astype(str)
    df["song_id"] = df["song_id"].astype(str)
    logger.info("Loaded %d listen events from %d file(s) in %s", len(df), len(files), source)
    return df[EVENT_COLUMNS]


def load_user_ids(path: str | Path) -> list[str]:
    """Load the list of known user ids from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a JSON list.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"User list not found at '{file_path}'")
    return [str(user_id) for user_id in _read_records(file_path)]
