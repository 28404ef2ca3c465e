"""Tests for dataset views."""

import dataclasses

import pandas as pd
import pytest

from cars_tlbx.data import CarsDataset, DatasetView


class TestDatasetView:
    """Test DatasetView."""

    def test_view_is_frozen(self, sample_dataset: CarsDataset) -> None:
        """Test that views are immutable."""
        view = sample_dataset.view()
        with pytest.raises(dataclasses.FrozenInstanceError):
            view.df = pd.DataFrame()  # type: ignore[misc]

    def test_features_are_nullable_floats(self, make_car) -> None:
        """Test typed features with missing values."""
        ds = CarsDataset.from_records([make_car(horsepower="n/a"), make_car(horsepower=150)])
        features = ds.view(columns=["id", "horsepower", "torque"]).features

        assert list(features.columns) == ["horsepower", "torque"]
        assert all(str(dtype) == "Float64" for dtype in features.dtypes)
        assert features["horsepower"].isna().tolist() == [True, False]

    def test_len(self, sample_dataset: CarsDataset) -> None:
        """Test view length equals record count."""
        assert len(sample_dataset.view()) == 8
