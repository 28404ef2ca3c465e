"""Tests for data path helpers."""

import json
from pathlib import Path

import pytest

from cars_tlbx.data import CarsDataset
from cars_tlbx.utils import paths
from cars_tlbx.utils.paths import get_data_dir, get_dataset_path


def test_data_dir_is_next_to_package() -> None:
    """Test the data directory sits at the project root."""
    assert get_data_dir().name == "_data"
    assert (get_data_dir().parent / "cars_tlbx").is_dir()


def test_missing_dataset(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Test a missing dataset file raises FileNotFoundError."""
    monkeypatch.setattr(paths, "get_data_dir", lambda: tmp_path)
    with pytest.raises(FileNotFoundError, match="Dataset file 'cars' not found"):
        get_dataset_path("cars")


def test_default_dataset_location(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    sample_records: list[dict],
) -> None:
    """Test from_json() falls back to cars.json in the data directory."""
    (tmp_path / "cars.json").write_text(json.dumps(sample_records), encoding="utf-8")
    monkeypatch.setattr(paths, "get_data_dir", lambda: tmp_path)

    assert get_dataset_path("cars") == tmp_path / "cars.json"
    assert get_dataset_path("cars.json") == tmp_path / "cars.json"
    assert len(CarsDataset.from_json()) == 8
