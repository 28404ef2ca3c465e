"""Task-specific views over dataset content."""

from collections.abc import Mapping
from dataclasses import dataclass

import pandas as pd

from .accessors import resolve_fields


@dataclass(frozen=True)
class DatasetView:
    """Immutable snapshot of dataset records and related metadata.

    Attributes:
        df: Dataframe with one row per vehicle record (cleaned column names).
        pretty_by_col: Mapping from normalized column names to display-friendly labels.
        numeric_cols: Ordered list of numeric field names present in ``df``.
        categorical_cols: Ordered list of categorical field names present in ``df``.
    """

    df: pd.DataFrame
    """Dataframe slice containing the relevant records."""
    pretty_by_col: Mapping[str, str]
    """Mapping from normalized column names to display-friendly labels."""
    numeric_cols: list[str]
    categorical_cols: list[str] | None = None

    @property
    def features(self) -> pd.DataFrame:
        """Return typed numeric values (nullable ``Float64``) for the numeric fields."""
        accessors = resolve_fields(self.numeric_cols, kind="numeric")
        return pd.DataFrame({acc.name: acc.series(self.df) for acc in accessors}, index=self.df.index)

    def __len__(self) -> int:
        return len(self.df)
