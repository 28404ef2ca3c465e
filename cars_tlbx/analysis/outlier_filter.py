"""Multi-field IQR outlier filtering following the analyzer pattern."""

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import pandas as pd

from cars_tlbx.data.accessors import OUTLIER_FIELDS, resolve_fields
from cars_tlbx.data.views import DatasetView

from .base_analyser import BaseAnalyser


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldBounds:
    """Inclusive fences for one numeric field.

    Attributes:
        field: Field the fences apply to.
        lower: Lower fence ``Q1 - k * IQR`` (``-inf`` if the field had no values).
        upper: Upper fence ``Q3 + k * IQR`` (``+inf`` if the field had no values).
        n_values: Number of non-missing values the fences were computed from.
        q1: First quartile, ``None`` if the field had no values.
        q3: Third quartile, ``None`` if the field had no values.
    """

    field: str
    lower: float
    upper: float
    n_values: int
    q1: float | None = None
    q3: float | None = None

    @property
    def iqr(self) -> float:
        """Interquartile range ``Q3 - Q1`` (``nan`` if the field had no values)."""
        if self.q1 is None or self.q3 is None:
            return math.nan
        return self.q3 - self.q1

    def contains(self, value: float | None) -> bool:
        """Whether ``value`` lies within the fences. Missing values always pass."""
        return value is None or self.lower <= value <= self.upper


def compute_iqr_bounds(
    values: pd.Series | Sequence[float | None],
    multiplier: float = 1.5,
    field: str = "",
) -> FieldBounds:
    r"""Compute :math:`[Q_1 - k\cdot IQR,\, Q_3 + k\cdot IQR]` from the non-missing ``values``.

    Quartiles are picked by lower-index selection on the sorted values,
    ``Q1 = v[floor(0.25 n)]`` and ``Q3 = v[floor(0.75 n)]``, without interpolation. This differs
    from :meth:`pandas.Series.quantile` and is kept so cleaned datasets stay identical to the
    ones the dashboard was built on.

    Example:
        >>> compute_iqr_bounds([1, 2, 3, 4, 5, 6, 7, 100]).lower, compute_iqr_bounds([1, 2, 3, 4, 5, 6, 7, 100]).upper
        (-3.0, 13.0)
    """
    ordered = pd.Series(values, dtype="Float64").dropna().sort_values().to_numpy(dtype=float)
    n = len(ordered)
    if n == 0:
        return FieldBounds(field=field, lower=-math.inf, upper=math.inf, n_values=0)

    q1 = float(ordered[math.floor(0.25 * n)])
    q3 = float(ordered[math.floor(0.75 * n)])
    iqr = q3 - q1
    return FieldBounds(
        field=field,
        lower=q1 - multiplier * iqr,
        upper=q3 + multiplier * iqr,
        n_values=n,
        q1=q1,
        q3=q3,
    )


@dataclass(frozen=True)
class OutlierFilterResult:
    """Container for outlier filtering results.

    Attributes:
        cleaned: Records that respect every field's fences, in input order.
        bounds: Fences per screened field (empty if the input was empty).
        outlier_mask: Boolean DataFrame (records x fields), True where a value is outside its fences.
        n_outliers_per_column: Count of flagged values per field.
        n_outliers_per_row: Count of flagged fields per record.
        multiplier: IQR multiplier used for the fences.
        pretty_names: Mapping of field names to display names.
    """

    cleaned: pd.DataFrame
    bounds: Mapping[str, FieldBounds]
    outlier_mask: pd.DataFrame
    n_outliers_per_column: pd.Series
    n_outliers_per_row: pd.Series
    multiplier: float
    pretty_names: dict[str, str] | None = None

    @property
    def n_removed(self) -> int:
        """Number of records dropped from the input."""
        return int(self.n_outliers_per_row.gt(0).sum())

    @property
    def total_outliers(self) -> int:
        """Total number of flagged values across all fields."""
        return int(self.n_outliers_per_column.sum())

    @property
    def bounds_frame(self) -> pd.DataFrame:
        """Fences as a table with one row per field."""
        return pd.DataFrame(
            [
                {"field": b.field, "q1": b.q1, "q3": b.q3, "lower": b.lower, "upper": b.upper, "n_values": b.n_values}
                for b in self.bounds.values()
            ],
            columns=["field", "q1", "q3", "lower", "upper", "n_values"],
        )


class IQROutlierFilter(BaseAnalyser):
    r"""Drop records that are outliers in any screened field via the interquartile range rule.

    For every field, values outside :math:`[Q_1 - k\cdot IQR,\, Q_3 + k\cdot IQR]` are outliers,
    with fences computed by :func:`compute_iqr_bounds` on the current input. A record is kept
    only if none of its fields is an outlier. Missing values never disqualify a record, and a
    field without any values gets infinite fences.

    Fences are recomputed from whatever is passed in, so filtering an already cleaned frame
    again can drop a few more boundary records.

    Attributes:
        multiplier: Multiplier ``k`` applied to the IQR. Default is 1.5 according to Tukey's rule,
            1.0 is stricter.
    """

    def __init__(
        self,
        view: DatasetView,
        multiplier: float = 1.5,
        fields: Sequence[str] = OUTLIER_FIELDS,
    ) -> None:
        """Initialize IQR outlier filter.

        Args:
            view: Immutable dataset view to filter
            multiplier: IQR multiplier for fence calculation (default: 1.5)
            fields: Numeric fields to screen (default: the nine dimension, engine, fuel and year fields)

        Raises:
            ValueError: If ``multiplier`` is not positive.
            ConfigurationError: If a field is unknown or not numeric.
        """
        if not multiplier > 0:
            raise ValueError(f"multiplier must be positive, got {multiplier}")
        self._view = view
        self.multiplier = multiplier
        self._fields = resolve_fields(fields, kind="numeric")
        self._fitted = False
        self._cleaned: pd.DataFrame | None = None
        self._bounds: dict[str, FieldBounds] = {}
        self._outlier_mask: pd.DataFrame | None = None

    def fit(self) -> "IQROutlierFilter":
        """Compute fences and the outlier mask.

        Returns:
            Self for method chaining.
        """
        df = self._view.df
        names = [acc.name for acc in self._fields]

        if df.empty:
            self._cleaned = df
            self._bounds = {}
            self._outlier_mask = pd.DataFrame(False, index=df.index, columns=names)
            self._fitted = True
            return self

        flags = {}
        for acc in self._fields:
            values = acc.series(df)
            bounds = compute_iqr_bounds(values, self.multiplier, field=acc.name)
            logger.debug(
                "IQR fences for %s: [%s, %s] from %d values", acc.name, bounds.lower, bounds.upper, bounds.n_values
            )
            self._bounds[acc.name] = bounds
            flags[acc.name] = (values.lt(bounds.lower) | values.gt(bounds.upper)).fillna(False).astype(bool)

        self._outlier_mask = pd.DataFrame(flags, index=df.index, columns=names)
        self._cleaned = df.loc[~self._outlier_mask.any(axis=1)]
        logger.info(
            "IQR filter (k=%s) removed %d of %d records", self.multiplier, len(df) - len(self._cleaned), len(df)
        )
        self._fitted = True
        return self

    def result(self) -> OutlierFilterResult:
        """Return outlier filtering results.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if not self._fitted or self._outlier_mask is None or self._cleaned is None:
            raise ValueError("Must call fit() before result()")

        return OutlierFilterResult(
            cleaned=self._cleaned,
            bounds=dict(self._bounds),
            outlier_mask=self._outlier_mask,
            n_outliers_per_column=self._outlier_mask.sum(),
            n_outliers_per_row=self._outlier_mask.sum(axis=1),
            multiplier=self.multiplier,
            pretty_names={acc.name: acc.pretty_name for acc in self._fields},
        )


def remove_outliers(
    df: pd.DataFrame,
    multiplier: float = 1.5,
    fields: Sequence[str] = OUTLIER_FIELDS,
) -> pd.DataFrame:
    """Return the records of ``df`` that respect every field's IQR fences.

    Empty input is returned unchanged.
    """
    view = DatasetView(df=df, pretty_by_col={}, numeric_cols=[acc.name for acc in resolve_fields(fields)])
    return IQROutlierFilter(view, multiplier=multiplier, fields=fields).fit().result().cleaned
