import os
from pathlib import Path
from typing import Literal


__all__ = ["get_data_dir", "get_dataset_path"]


DATA_DIR_ENV = "NLAVIZ_DATA_DIR"

_DATASET_MAP: dict[str, str] = {
    "nla": "nla2007_sites.csv",
    "bloom_model": "bloom_model.pickle",
    "us_states": "us_states.geojson",
}


def get_data_dir() -> Path:
    """Get the path to the data directory.

    ``$NLAVIZ_DATA_DIR`` takes precedence over the ``_data`` directory at the project root.

    Raises:
        FileNotFoundError: If the directory does not exist.
    """
    override = os.environ.get(DATA_DIR_ENV)
    data_dir = Path(override) if override else Path(__file__).parents[2] / "_data"
    data_dir = data_dir.resolve()
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found at {data_dir}")
    return data_dir


def get_dataset_path(
    filename: Literal["nla", "bloom_model", "us_states"] | str,  # noqa: PYI051
    *,
    must_exist: bool = True,
) -> Path:
    """Get the full path to a file in the data directory.

    Args:
        filename: Key to a known file or a custom filename
        must_exist: Raise if the file is missing (disable for output paths and optional files)

    Supported keys: nla (nla2007_sites.csv), bloom_model (bloom_model.pickle), us_states (us_states.geojson)
    """
    ds_path = get_data_dir() / _DATASET_MAP.get(filename, filename)
    if must_exist and not ds_path.exists():
        raise FileNotFoundError(f"Dataset file '{filename}' not found at {ds_path}")
    return ds_path
