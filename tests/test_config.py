"""Tests for AnalysisConfig."""

import dataclasses

import pytest

from cars_tlbx.config import DEFAULT_ANALYSIS_CFG, AnalysisConfig
from cars_tlbx.data.accessors import OUTLIER_FIELDS
from cars_tlbx.exceptions import ConfigurationError


class TestAnalysisConfig:
    """Test defaults, validation and overrides."""

    def test_defaults(self) -> None:
        """Test default settings."""
        cfg = DEFAULT_ANALYSIS_CFG
        assert cfg.iqr_multiplier == 1.5
        assert cfg.outlier_fields == OUTLIER_FIELDS
        assert cfg.rank_metric == "city_mpg"
        assert cfg.rank_limit == 10
        assert (cfg.fuel_metric, cfg.engine_metric) == ("city_mpg", "torque")
        assert cfg.correlation_precision == 2

    def test_frozen(self) -> None:
        """Test the config is immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_ANALYSIS_CFG.rank_limit = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"iqr_multiplier": 0}, "iqr_multiplier"),
            ({"iqr_multiplier": -1.0}, "iqr_multiplier"),
            ({"rank_limit": 0}, "rank_limit"),
            ({"correlation_precision": -1}, "correlation_precision"),
        ],
    )
    def test_invalid_values(self, kwargs: dict, match: str) -> None:
        """Test out-of-range values are rejected."""
        with pytest.raises(ValueError, match=match):
            AnalysisConfig(**kwargs)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"rank_metric": "weight"},
            {"rank_metric": "driveline"},
            {"fuel_metric": "make"},
            {"outlier_fields": ("height", "wheelbase")},
        ],
    )
    def test_invalid_fields(self, kwargs: dict) -> None:
        """Test unknown or categorical fields fail when the config is created."""
        with pytest.raises(ConfigurationError):
            AnalysisConfig(**kwargs)

    def test_with_overrides(self) -> None:
        """Test overrides replace settings and ignore None."""
        cfg = DEFAULT_ANALYSIS_CFG.with_overrides(rank_metric="horsepower", rank_limit=None, iqr_multiplier=1.0)

        assert cfg.rank_metric == "horsepower"
        assert cfg.rank_limit == 10
        assert cfg.iqr_multiplier == 1.0
        assert DEFAULT_ANALYSIS_CFG.rank_metric == "city_mpg"

    def test_with_overrides_validates(self) -> None:
        """Test overrides are validated like a fresh config."""
        with pytest.raises(ConfigurationError):
            DEFAULT_ANALYSIS_CFG.with_overrides(engine_metric="colour")
