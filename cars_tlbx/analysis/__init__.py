"""Analysis modules for outlier filtering, correlation, temporal trends and rankings."""

from .correlation_engine import CorrelationEngine, CorrelationResult, correlate, correlation_grid
from .outlier_filter import FieldBounds, IQROutlierFilter, OutlierFilterResult, compute_iqr_bounds, remove_outliers
from .rank_grouper import RankGroup, RankGrouper, RankResult, rank_groups
from .temporal_aggregator import (
    AggregatePoint,
    TemporalAggregationResult,
    TemporalAggregator,
    aggregate_by_year,
    combined_mpg,
)


__all__ = [
    "AggregatePoint",
    "CorrelationEngine",
    "CorrelationResult",
    "FieldBounds",
    "IQROutlierFilter",
    "OutlierFilterResult",
    "RankGroup",
    "RankGrouper",
    "RankResult",
    "TemporalAggregationResult",
    "TemporalAggregator",
    "aggregate_by_year",
    "combined_mpg",
    "compute_iqr_bounds",
    "correlate",
    "correlation_grid",
    "rank_groups",
    "remove_outliers",
]
