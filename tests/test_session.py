"""Tests for AnalysisSession."""

import logging

import pytest

from cars_tlbx import AnalysisConfig, AnalysisSession
from cars_tlbx.analysis import aggregate_by_year, correlate, rank_groups, remove_outliers
from cars_tlbx.data import CarsDataset
from cars_tlbx.exceptions import ConfigurationError


@pytest.fixture
def session(sample_dataset: CarsDataset) -> AnalysisSession:
    return AnalysisSession(sample_dataset)


class TestAnalysisSession:
    """Test cached analyses on the cleaned records."""

    def test_cleaned_matches_outlier_filter(self, session: AnalysisSession, sample_dataset: CarsDataset) -> None:
        """Test the session cleans with the configured multiplier."""
        assert len(session.cleaned) == 7
        assert session.cleaned.df.equals(remove_outliers(sample_dataset.df, multiplier=1.5))
        assert session.outliers.n_removed == 1

    def test_raw_dataset_untouched(self, session: AnalysisSession) -> None:
        """Test cleaning does not modify the raw dataset."""
        _ = session.cleaned
        assert len(session.dataset) == 8

    def test_cleaned_is_cached(self, session: AnalysisSession, caplog: pytest.LogCaptureFixture) -> None:
        """Test the cleaned dataset is built once and logged at debug level only."""
        caplog.set_level(logging.DEBUG, logger="cars_tlbx.session")
        assert session.cleaned is session.cleaned

        messages = [r for r in caplog.records if "cleaned data length: 7" in r.getMessage()]
        assert len(messages) == 1
        assert messages[0].levelno == logging.DEBUG

    def test_correlation_defaults(self, session: AnalysisSession) -> None:
        """Test default fields are city mpg and torque."""
        result = session.correlation()
        assert (result.field_a, result.field_b) == ("city_mpg", "torque")
        assert result.coefficient == pytest.approx(correlate(session.cleaned.df, "city_mpg", "torque"))

    def test_correlation_cache_uses_resolved_names(self, session: AnalysisSession) -> None:
        """Test aliases of the same pair share one cached result."""
        first = session.correlation("highway_mpg", "horsepower")
        assert session.correlation("highwayMpg", "horsepower") is first
        assert session.correlation("horsepower", "highway_mpg") is not first

    def test_trend(self, session: AnalysisSession) -> None:
        """Test the trend equals direct aggregation of the cleaned records."""
        trend = session.trend()
        assert list(trend.points) == aggregate_by_year(session.cleaned.df)
        assert session.trend() is trend

    def test_ranking_defaults(self, session: AnalysisSession) -> None:
        """Test default metric and limit."""
        result = session.ranking()
        assert result.metric == "city_mpg"
        assert [g.value for g in result.groups] == [g.value for g in rank_groups(session.cleaned.df, "city_mpg")]

    def test_ranking_cache_ignores_unconstrained_predicates(self, session: AnalysisSession) -> None:
        """Test empty predicates hit the same cache entry as no predicates."""
        first = session.ranking("horsepower")
        assert session.ranking("horsepower", {"driveline": "", "transmission": None}) is first
        assert session.ranking("horsepower", {"driveline": "All-wheel drive"}) is not first
        assert session.ranking("horsepower", limit=2) is not first

    def test_ranking_cache_uses_resolved_metric(self, session: AnalysisSession) -> None:
        """Test metric aliases share one cached ranking."""
        first = session.ranking("city_mpg")
        assert session.ranking("cityMpg") is first
        assert session.ranking() is first

    def test_ranking_unhashable_predicate(self, session: AnalysisSession) -> None:
        """Test a list predicate value is a configuration error, not a cache failure."""
        with pytest.raises(ConfigurationError, match="single value"):
            session.ranking("horsepower", {"driveline": ["All-wheel drive", "Front-wheel drive"]})

    def test_ranking_invalid_limit(self, session: AnalysisSession) -> None:
        """Test an explicit zero limit is rejected rather than replaced by the default."""
        with pytest.raises(ValueError, match="limit must be at least 1"):
            session.ranking(limit=0)

    def test_custom_config(self, sample_dataset: CarsDataset) -> None:
        """Test settings flow from the config."""
        config = AnalysisConfig(rank_metric="torque", rank_limit=3, engine_metric="horsepower")
        session = AnalysisSession(sample_dataset, config=config)

        assert session.ranking().metric == "torque"
        assert len(session.ranking().groups) == 3
        assert session.correlation().field_b == "horsepower"

    def test_unknown_field(self, session: AnalysisSession) -> None:
        """Test configuration errors propagate."""
        with pytest.raises(ConfigurationError):
            session.correlation("city_mpg", "weight")

    def test_clear(self, session: AnalysisSession) -> None:
        """Test clear() drops cached results."""
        first = session.correlation()
        cleaned = session.cleaned
        session.clear()

        assert session.correlation() is not first
        assert session.cleaned is not cleaned
