"""Per-year fuel economy averages."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd

from cars_tlbx.data.accessors import resolve_field
from cars_tlbx.data.car_columns import CarColumn
from cars_tlbx.data.views import DatasetView

from .base_analyser import BaseAnalyser


_MAX_YEAR = 2**53


@dataclass(frozen=True)
class AggregatePoint:
    """Average fuel economy of one model year.

    Attributes:
        year: Year of release.
        city: Mean city mpg (``nan`` if no record of that year has one).
        highway: Mean highway mpg (``nan`` if no record of that year has one).
        combined: Mean of the positional city/highway pair averages, see :func:`combined_mpg`.
    """

    year: int
    city: float
    highway: float
    combined: float


def _mean(values: Sequence[float]) -> float:
    return float(np.mean(values)) if len(values) else math.nan


def combined_mpg(city: Sequence[float], highway: Sequence[float]) -> float:
    """Combined mpg of one year from its city and highway value lists.

    Values are paired by position in the two lists, not by record, since a record can be
    missing either value. Pairs whose highway value is 0 are skipped, as are pair averages
    equal to 0. Returns 0.0 when either list is empty or nothing is left to average.

    Note:
        A highway value of 0 is skipped here but still counts towards the highway average.
        This matches the numbers the dashboard has always shown and is kept on purpose.

    Example:
        >>> combined_mpg([20, 24], [30, 0])
        25.0
    """
    if not len(city) or not len(highway):
        return 0.0
    averages = [(c + h) / 2 for c, h in zip(city, highway) if h]
    averages = [v for v in averages if v]
    return float(np.mean(averages)) if averages else 0.0


@dataclass(frozen=True)
class TemporalAggregationResult:
    """Per-year averages in ascending year order."""

    points: tuple[AggregatePoint, ...]

    @property
    def years(self) -> list[int]:
        return [p.year for p in self.points]

    def to_frame(self) -> pd.DataFrame:
        """Averages as a table with columns ``year``, ``city``, ``highway`` and ``combined``."""
        return pd.DataFrame(
            [(p.year, p.city, p.highway, p.combined) for p in self.points],
            columns=["year", "city", "highway", "combined"],
        )


class TemporalAggregator(BaseAnalyser):
    """Group records by year and average their city, highway and combined mpg.

    City and highway values are collected independently, so a record missing one still
    contributes the other. Records without a finite year are skipped, and a year is reported only if
    at least one of its records has a city or highway value.
    """

    def __init__(self, view: DatasetView) -> None:
        self._view = view
        self._year = resolve_field(CarColumn.YEAR, kind="numeric")
        self._city = resolve_field(CarColumn.CITY_MPG, kind="numeric")
        self._highway = resolve_field(CarColumn.HIGHWAY_MPG, kind="numeric")
        self._points: tuple[AggregatePoint, ...] | None = None

    def fit(self) -> "TemporalAggregator":
        """Compute the per-year averages.

        Returns:
            Self for method chaining.
        """
        df = self._view.df
        frame = pd.DataFrame(
            {"year": self._year.series(df), "city": self._city.series(df), "highway": self._highway.series(df)},
            index=df.index,
        )
        frame = frame.dropna(subset=["year"])
        years = frame["year"].astype(float)
        # infinite or out-of-range years are skipped like missing ones
        frame = frame.loc[np.isfinite(years) & years.abs().lt(_MAX_YEAR)]
        frame = frame.assign(year=lambda d: np.floor(d["year"].astype(float)).astype(int))

        points = []
        for year, bucket in frame.groupby("year", sort=True):
            city = bucket["city"].dropna().to_numpy(dtype=float)
            highway = bucket["highway"].dropna().to_numpy(dtype=float)
            if not len(city) and not len(highway):
                continue
            points.append(
                AggregatePoint(
                    year=int(year),
                    city=_mean(city),
                    highway=_mean(highway),
                    combined=combined_mpg(city, highway),
                ),
            )

        self._points = tuple(points)
        return self

    def result(self) -> TemporalAggregationResult:
        """Return the per-year averages.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._points is None:
            raise ValueError("Must call fit() before result()")
        return TemporalAggregationResult(points=self._points)


def aggregate_by_year(df: pd.DataFrame) -> list[AggregatePoint]:
    """Per-year city, highway and combined mpg for the records in ``df``, ascending by year."""
    view = DatasetView(df=df, pretty_by_col={}, numeric_cols=[])
    return list(TemporalAggregator(view).fit().result().points)
