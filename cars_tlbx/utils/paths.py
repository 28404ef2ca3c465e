from pathlib import Path
from typing import Literal


__all__ = ["get_data_dir", "get_dataset_path"]


_DATASET_MAP: dict[str, str] = {
    "cars": "cars.json",
}


def get_data_dir() -> Path:
    """Get the path to the data directory.

    Returns:
        Path to the ``_data`` directory next to the package
    """
    return (Path(__file__).parents[2] / "_data").resolve()


def get_dataset_path(filename: Literal["cars"] | str) -> Path:  # noqa: PYI051
    """Get the full path to a dataset file in the data directory.

    Args:
        filename: Key to known dataset or custom filename

    Returns:
        Full path to the dataset file relative to the data directory of the project

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    ds_path = get_data_dir() / _DATASET_MAP.get(filename, filename)
    if not ds_path.exists():
        raise FileNotFoundError(f"Dataset file '{filename}' not found at {ds_path}")

    return ds_path
