"""Analysis session caching derived results per selector."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from cars_tlbx.analysis.correlation_engine import CorrelationEngine, CorrelationResult
from cars_tlbx.analysis.outlier_filter import IQROutlierFilter, OutlierFilterResult
from cars_tlbx.analysis.rank_grouper import RankGrouper, RankResult
from cars_tlbx.analysis.temporal_aggregator import TemporalAggregationResult, TemporalAggregator
from cars_tlbx.config import DEFAULT_ANALYSIS_CFG, AnalysisConfig
from cars_tlbx.data.accessors import resolve_field
from cars_tlbx.data.base_dataset import BaseDataset


logger = logging.getLogger(__name__)


@dataclass
class AnalysisSession:
    """Cleaned dataset plus memoized analyses for one analysis session.

    The raw dataset is cleaned once with ``config.iqr_multiplier``; correlation, trend and
    ranking results are computed on the cleaned records and cached by their selector, so asking
    twice for the same field pair or filter set reuses the first result. Results are identical
    to calling the analyzers directly.

    Example:
        >>> from cars_tlbx.data import CarsDataset
        >>> session = AnalysisSession(CarsDataset.from_json())
        >>> session.correlation("highway_mpg", "horsepower").formatted()
        >>> session.ranking("torque", {"driveline": "Rear-wheel drive"}).to_frame()
    """

    dataset: BaseDataset
    config: AnalysisConfig = DEFAULT_ANALYSIS_CFG
    _outliers: OutlierFilterResult | None = field(default=None, init=False, repr=False)
    _cleaned: BaseDataset | None = field(default=None, init=False, repr=False)
    _trend: TemporalAggregationResult | None = field(default=None, init=False, repr=False)
    _correlations: dict[tuple[str, str], CorrelationResult] = field(default_factory=dict, init=False, repr=False)
    _rankings: dict[tuple[Any, ...], RankResult] = field(default_factory=dict, init=False, repr=False)

    @property
    def outliers(self) -> OutlierFilterResult:
        """Outlier filter result on the raw dataset."""
        if self._outliers is None:
            self._outliers = (
                IQROutlierFilter(
                    self.dataset.view(),
                    multiplier=self.config.iqr_multiplier,
                    fields=self.config.outlier_fields,
                )
                .fit()
                .result()
            )
        return self._outliers

    @property
    def cleaned(self) -> BaseDataset:
        """The dataset without outlier records."""
        if self._cleaned is None:
            self._cleaned = self.dataset.with_df(self.outliers.cleaned)
            logger.debug("Session cleaned data length: %d", len(self._cleaned))
        return self._cleaned

    def correlation(self, field_a: str | None = None, field_b: str | None = None) -> CorrelationResult:
        """Correlation between two numeric fields (defaults to the configured fuel and engine metrics)."""
        key = (
            resolve_field(field_a or self.config.fuel_metric, kind="numeric").name,
            resolve_field(field_b or self.config.engine_metric, kind="numeric").name,
        )
        if key in self._correlations:
            logger.debug("Correlation cache hit for %s", key)
        else:
            self._correlations[key] = CorrelationEngine(self.cleaned.view(), *key).fit().result()
        return self._correlations[key]

    def trend(self) -> TemporalAggregationResult:
        """Per-year mpg averages of the cleaned records."""
        if self._trend is None:
            self._trend = TemporalAggregator(self.cleaned.view()).fit().result()
        return self._trend

    def ranking(
        self,
        metric: str | None = None,
        predicates: Mapping[str, Any] | None = None,
        limit: int | None = None,
    ) -> RankResult:
        """Top value groups of ``metric`` (defaults to the configured rank metric and limit)."""
        grouper = RankGrouper(
            self.cleaned.view(),
            metric=metric or self.config.rank_metric,
            predicates=predicates,
            limit=self.config.rank_limit if limit is None else limit,
        )
        key = (
            grouper.metric,
            tuple(sorted(grouper.predicates.items(), key=lambda item: item[0])),
            grouper.limit,
        )
        if key in self._rankings:
            logger.debug("Ranking cache hit for %s", key)
        else:
            self._rankings[key] = grouper.fit().result()
        return self._rankings[key]

    def clear(self) -> None:
        """Drop all cached results."""
        self._outliers = None
        self._cleaned = None
        self._trend = None
        self._correlations.clear()
        self._rankings.clear()
