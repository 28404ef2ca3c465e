"""Fixed accessor table mapping logical field names to value extraction.

Every analyzer reads record values through a :class:`FieldAccessor`, resolved once from
:data:`FIELD_ACCESSORS` when the analyzer is built. Unknown names fail fast with a
:class:`~cars_tlbx.exceptions.ConfigurationError` instead of surfacing as missing keys
while iterating over records.

Example:
    >>> from cars_tlbx.data.accessors import resolve_field
    >>> city = resolve_field("city_mpg")
    >>> city.extract({"Fuel Information": {"City mpg": 18}})
    18.0
    >>> city.extract({"Fuel Information": {"City mpg": "n/a"}}) is None
    True
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

import numpy as np
import pandas as pd

from cars_tlbx.exceptions import ConfigurationError

from .car_columns import CarColumn


def as_number(value: Any) -> float | None:
    """Return ``value`` as a float if it is a real number, otherwise ``None``.

    Booleans, strings, ``None`` and ``NaN`` are treated as absent.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        return None
    number = float(value)
    return None if math.isnan(number) else number


def as_label(value: Any) -> Any | None:
    """Return a categorical value unchanged, or ``None`` if it is missing."""
    if value is None or (isinstance(value, float) and math.isnan(value)) or value is pd.NA:
        return None
    return value


@dataclass(frozen=True)
class FieldAccessor:
    """Typed extraction of a single logical field from a vehicle record.

    Attributes:
        column: Column this accessor reads.
        kind: ``"numeric"`` accessors return floats, ``"categorical"`` accessors return labels.
    """

    column: CarColumn
    kind: Literal["numeric", "categorical"]

    @property
    def name(self) -> str:
        return self.column.value

    @property
    def pretty_name(self) -> str:
        return self.column.pretty_name

    def extract(self, record: Mapping[str, Any] | pd.Series) -> Any | None:
        """Extract the field from one record.

        Accepts either a nested raw record (as in the JSON file) or a flattened row whose
        keys are the cleaned column names.

        Returns:
            The value (float for numeric fields), or ``None`` if absent or not numeric.
        """
        if self.name in record:
            raw = record[self.name]
        else:
            raw = record
            for key in self.column.path:
                if not isinstance(raw, Mapping) or key not in raw:
                    return None
                raw = raw[key]
        return as_number(raw) if self.kind == "numeric" else as_label(raw)

    def series(self, df: pd.DataFrame) -> pd.Series:
        """Extract the field for every row of ``df``.

        Numeric fields yield a nullable ``Float64`` series where absent values are ``<NA>``.
        A frame that lacks the column yields an all-missing series.
        """
        if self.name not in df.columns:
            raw = pd.Series(None, index=df.index, dtype=object)
        else:
            raw = df[self.name]
        if self.kind == "numeric":
            return raw.map(as_number).astype("Float64").rename(self.name)
        return raw.map(as_label).astype(object).rename(self.name)


FIELD_ACCESSORS: dict[str, FieldAccessor] = {col.value: FieldAccessor(col, col.kind) for col in CarColumn}
"""All known accessors keyed by cleaned column name."""

_ALIASES: dict[str, str] = {
    # camelCase metric keys
    "cityMpg": CarColumn.CITY_MPG,
    "highwayMpg": CarColumn.HIGHWAY_MPG,
    # raw JSON paths
    **{col.original_name: col.value for col in CarColumn},
}

OUTLIER_FIELDS: tuple[str, ...] = (
    CarColumn.HEIGHT,
    CarColumn.LENGTH,
    CarColumn.WIDTH,
    CarColumn.FORWARD_GEARS,
    CarColumn.HORSEPOWER,
    CarColumn.TORQUE,
    CarColumn.CITY_MPG,
    CarColumn.HIGHWAY_MPG,
    CarColumn.YEAR,
)
"""Numeric fields screened by the IQR outlier filter."""

FUEL_METRICS: tuple[str, ...] = (CarColumn.CITY_MPG, CarColumn.HIGHWAY_MPG)
ENGINE_METRICS: tuple[str, ...] = (CarColumn.TORQUE, CarColumn.HORSEPOWER)


def resolve_field(
    name: str | CarColumn,
    kind: Literal["numeric", "categorical"] | None = None,
) -> FieldAccessor:
    """Resolve a logical field name to its accessor.

    Args:
        name: Column member, cleaned name (``"city_mpg"``), raw dotted path
            (``"Fuel Information.City mpg"``) or legacy metric key (``"cityMpg"``).
        kind: If given, require the accessor to be of this kind.

    Raises:
        ConfigurationError: If the name is unknown or the field has the wrong kind.
    """
    key = str(name)
    accessor = FIELD_ACCESSORS.get(_ALIASES.get(key, key))
    if accessor is None:
        raise ConfigurationError(f"Unknown field '{key}'. Known fields: {', '.join(FIELD_ACCESSORS)}")
    if kind is not None and accessor.kind != kind:
        raise ConfigurationError(f"Field '{key}' is {accessor.kind}, expected a {kind} field.")
    return accessor


def resolve_fields(
    names: Iterable[str | CarColumn],
    kind: Literal["numeric", "categorical"] | None = None,
) -> tuple[FieldAccessor, ...]:
    """Resolve several field names at once (see :func:`resolve_field`)."""
    return tuple(resolve_field(name, kind=kind) for name in names)


__all__ = [
    "ENGINE_METRICS",
    "FIELD_ACCESSORS",
    "FUEL_METRICS",
    "OUTLIER_FIELDS",
    "FieldAccessor",
    "as_label",
    "as_number",
    "resolve_field",
    "resolve_fields",
]
