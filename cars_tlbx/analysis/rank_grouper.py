"""Top-N ranking of records grouped by exact metric value."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pandas as pd

from cars_tlbx.data.accessors import resolve_field
from cars_tlbx.data.car_columns import CarColumn
from cars_tlbx.data.views import DatasetView
from cars_tlbx.exceptions import ConfigurationError

from .base_analyser import BaseAnalyser


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankGroup:
    """Records sharing exactly the same metric value.

    Attributes:
        rank: 1-based dense rank, 1 for the largest value.
        value: The metric value shared by every member.
        members: Member records in input order.
    """

    rank: int
    value: float
    members: pd.DataFrame

    def __len__(self) -> int:
        return len(self.members)

    @property
    def ids(self) -> list[Any]:
        """Vehicle identifiers of the members (``None`` where missing)."""
        return resolve_field(CarColumn.ID).series(self.members).tolist()


@dataclass(frozen=True)
class RankResult:
    """Ranked value groups for one metric under a set of filters.

    Attributes:
        groups: At most ``limit`` groups, strictly descending by value.
        metric: Ranked field name.
        pretty_metric: Display name of the ranked field.
        predicates: Active equality filters (unconstrained entries removed).
        n_candidates: Records that passed the filters and have a metric value.
    """

    groups: tuple[RankGroup, ...]
    metric: str
    pretty_metric: str
    predicates: dict[str, Any] = field(default_factory=dict)
    n_candidates: int = 0

    def to_frame(self) -> pd.DataFrame:
        """One row per group with columns ``rank``, ``value`` and ``n_members``."""
        return pd.DataFrame(
            [(g.rank, g.value, len(g)) for g in self.groups],
            columns=["rank", "value", "n_members"],
        )


def _is_unconstrained(value: object) -> bool:
    return value is None or (isinstance(value, str) and value == "")


class RankGrouper(BaseAnalyser):
    """Rank records by a numeric metric, collapsing ties into groups.

    1. Keep records matching every categorical equality predicate. A predicate of ``None``
       or ``""`` means "no constraint" for that field.
    2. Drop records without a numeric metric value.
    3. Group by exact equality of the metric value. Two records with equal values always end
       up in the same group.
    4. Sort the distinct values descending, keep the first ``limit`` and rank them 1, 2, ...

    Note:
        Grouping uses exact float equality. Values that differ only by representation noise
        (e.g. ``0.1 + 0.2`` and ``0.3``) form separate groups.

    Example:
        >>> grouper = RankGrouper(view, metric="horsepower", predicates={"transmission": "6 Speed Automatic"})
        >>> [(g.rank, g.value, g.ids) for g in grouper.fit().result().groups]
    """

    def __init__(
        self,
        view: DatasetView,
        metric: str,
        predicates: Mapping[str, Any] | None = None,
        limit: int = 10,
    ) -> None:
        """Initialize the rank grouper.

        Args:
            view: Immutable dataset view to rank
            metric: Numeric field to rank by
            predicates: Mapping of categorical field to required value
            limit: Maximum number of groups to keep (default: 10)

        Raises:
            ValueError: If ``limit`` is smaller than 1.
            ConfigurationError: If the metric is not a numeric field, a predicate field is not categorical
                or a predicate value is not hashable.
        """
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self._view = view
        self._metric = resolve_field(metric, kind="numeric")
        self.limit = limit
        resolved = {resolve_field(name, kind="categorical").name: value for name, value in (predicates or {}).items()}
        self.predicates = {name: value for name, value in resolved.items() if not _is_unconstrained(value)}
        for name, value in self.predicates.items():
            try:
                hash(value)
            except TypeError:
                raise ConfigurationError(
                    f"Predicate for '{name}' must be a single value, got {type(value).__name__}."
                ) from None
        self._groups: tuple[RankGroup, ...] | None = None
        self._n_candidates = 0

    @property
    def metric(self) -> str:
        """Resolved name of the ranked field."""
        return self._metric.name

    def filter_records(self) -> pd.DataFrame:
        """Records matching every active predicate."""
        df = self._view.df
        mask = np.ones(len(df), dtype=bool)
        for name, expected in self.predicates.items():
            mask &= resolve_field(name).series(df).eq(expected).to_numpy(dtype=bool)
        return df.loc[mask]

    def fit(self) -> "RankGrouper":
        """Filter, group and rank the records.

        Returns:
            Self for method chaining.
        """
        filtered = self.filter_records()
        values = self._metric.series(filtered)
        has_value = values.notna().to_numpy(dtype=bool)
        candidates = filtered.loc[has_value]
        values = values.loc[has_value].astype(float)

        distinct = values.drop_duplicates().sort_values(ascending=False)
        logger.debug(
            "Ranking %d records by %s: %d distinct values, keeping %d",
            len(candidates),
            self._metric.name,
            len(distinct),
            min(len(distinct), self.limit),
        )

        self._groups = tuple(
            RankGroup(rank=rank, value=float(value), members=candidates.loc[values.eq(value).to_numpy(dtype=bool)])
            for rank, value in enumerate(distinct.head(self.limit), start=1)
        )
        self._n_candidates = len(candidates)
        return self

    def result(self) -> RankResult:
        """Return the ranked groups.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._groups is None:
            raise ValueError("Must call fit() before result()")

        return RankResult(
            groups=self._groups,
            metric=self._metric.name,
            pretty_metric=self._metric.pretty_name,
            predicates=dict(self.predicates),
            n_candidates=self._n_candidates,
        )


def rank_groups(
    df: pd.DataFrame,
    metric: str,
    predicates: Mapping[str, Any] | None = None,
    limit: int = 10,
) -> list[RankGroup]:
    """Top ``limit`` value groups of ``metric`` among the records of ``df`` matching ``predicates``."""
    view = DatasetView(df=df, pretty_by_col={}, numeric_cols=[])
    return list(RankGrouper(view, metric=metric, predicates=predicates, limit=limit).fit().result().groups)
