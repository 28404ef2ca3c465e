"""Pairwise correlation between a fuel metric and an engine metric."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

import pandas as pd

from cars_tlbx.data.accessors import ENGINE_METRICS, FUEL_METRICS, resolve_field, resolve_fields
from cars_tlbx.data.views import DatasetView

from .base_analyser import BaseAnalyser


@dataclass(frozen=True)
class CorrelationResult:
    """Correlation between two numeric fields.

    Attributes:
        field_a: First field name.
        field_b: Second field name.
        coefficient: Pearson correlation at full precision; ``nan`` when undefined
            (fewer than two pairs, or a constant series).
        n_pairs: Number of records where both fields are numeric.
        pretty_a: Display name of ``field_a``.
        pretty_b: Display name of ``field_b``.
    """

    field_a: str
    field_b: str
    coefficient: float
    n_pairs: int
    pretty_a: str
    pretty_b: str

    @property
    def is_defined(self) -> bool:
        return not math.isnan(self.coefficient)

    def formatted(self, precision: int = 2) -> str:
        """Render the coefficient for display, e.g. ``"-0.71"`` or ``"NaN"``."""
        return f"{self.coefficient:.{precision}f}" if self.is_defined else "NaN"


def paired_values(df: pd.DataFrame, field_a: str, field_b: str) -> pd.DataFrame:
    """Return both fields side by side, keeping only records where both are numeric."""
    acc_a = resolve_field(field_a, kind="numeric")
    acc_b = resolve_field(field_b, kind="numeric")
    pairs = pd.DataFrame({"a": acc_a.series(df), "b": acc_b.series(df)}, index=df.index)
    return pairs.dropna(how="any").astype(float)


def pearson(a: pd.Series, b: pd.Series) -> float:
    """Pearson sample correlation of two aligned series, ``nan`` if undefined."""
    if len(a) < 2 or a.nunique() < 2 or b.nunique() < 2:
        return math.nan
    return float(a.corr(b, method="pearson"))


class CorrelationEngine(BaseAnalyser):
    """Analyzer for the Pearson correlation between two numeric fields.

    Records contribute only when both fields hold numeric values; missing values are skipped,
    never filled. The coefficient is symmetric in the two fields.

    Example:
        >>> from cars_tlbx.data import CarsDataset
        >>> ds = CarsDataset.from_json()
        >>> res = ds.make_correlation_engine("city_mpg", "horsepower").fit().result()
        >>> res.formatted()
    """

    def __init__(self, view: DatasetView, field_a: str, field_b: str) -> None:
        """Initialize the engine for a pair of numeric fields.

        Raises:
            ConfigurationError: If a field is unknown or not numeric.
        """
        self._view = view
        self._acc_a = resolve_field(field_a, kind="numeric")
        self._acc_b = resolve_field(field_b, kind="numeric")
        self._pairs: pd.DataFrame | None = None
        self._coefficient: float | None = None

    def get_pairs(self) -> pd.DataFrame:
        """Paired values as columns ``a`` and ``b`` (see :func:`paired_values`)."""
        if self._pairs is None:
            self._pairs = paired_values(self._view.df, self._acc_a.name, self._acc_b.name)
        return self._pairs

    def fit(self) -> Self:
        """Compute the correlation coefficient."""
        pairs = self.get_pairs()
        self._coefficient = pearson(pairs["a"], pairs["b"])
        return self

    def result(self) -> CorrelationResult:
        if self._coefficient is None or self._pairs is None:
            raise ValueError("Must call fit() before result()")

        return CorrelationResult(
            field_a=self._acc_a.name,
            field_b=self._acc_b.name,
            coefficient=self._coefficient,
            n_pairs=len(self._pairs),
            pretty_a=self._acc_a.pretty_name,
            pretty_b=self._acc_b.pretty_name,
        )


def correlate(df: pd.DataFrame, field_a: str, field_b: str) -> float:
    """Pearson correlation of two numeric fields over the records in ``df`` (``nan`` if undefined)."""
    pairs = paired_values(df, field_a, field_b)
    return pearson(pairs["a"], pairs["b"])


def correlation_grid(
    df: pd.DataFrame,
    fuel_fields: Sequence[str] = FUEL_METRICS,
    engine_fields: Sequence[str] = ENGINE_METRICS,
) -> pd.DataFrame:
    """Correlation for every fuel/engine field combination.

    Returns:
        DataFrame indexed by fuel field with one column per engine field.
    """
    fuel = resolve_fields(fuel_fields, kind="numeric")
    engine = resolve_fields(engine_fields, kind="numeric")
    return pd.DataFrame(
        [[correlate(df, f.name, e.name) for e in engine] for f in fuel],
        index=pd.Index([f.name for f in fuel], name="fuel"),
        columns=pd.Index([e.name for e in engine], name="engine"),
        dtype=float,
    )
