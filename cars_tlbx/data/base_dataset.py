"""Base dataset class for all dataset implementations."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Self

import pandas as pd


if TYPE_CHECKING:
    from cars_tlbx.analysis.correlation_engine import CorrelationEngine
    from cars_tlbx.analysis.outlier_filter import IQROutlierFilter
    from cars_tlbx.analysis.rank_grouper import RankGrouper
    from cars_tlbx.analysis.temporal_aggregator import TemporalAggregator

from .accessors import OUTLIER_FIELDS, resolve_field
from .base_columns import BaseColumn
from .views import DatasetView


class BaseDataset(ABC):
    """Abstract base class for record datasets consumed by the analyzers."""

    Col: type[BaseColumn]

    def __init__(self, df: pd.DataFrame | None = None) -> None:
        """Initialize the base dataset.

        Args:
            df: Pre-loaded DataFrame with cleaned column names (optional)
        """
        self._df: pd.DataFrame | None = df

    @classmethod
    @abstractmethod
    def from_json(cls, json_path: str | Path | None = None, **kwargs: object) -> "BaseDataset":
        """Load dataset from a JSON file.

        Args:
            json_path: Path to the JSON file
            **kwargs: Additional loading parameters

        Returns:
            Dataset instance with loaded data
        """
        ...

    @property
    def df(self) -> pd.DataFrame:
        """Get the record DataFrame.

        Raises:
            ValueError: If dataset not loaded
        """
        if self._df is None:
            raise ValueError("Dataset not loaded. Use from_json() or from_records() to load data.")
        return self._df

    @property
    def df_pretty(self) -> pd.DataFrame:
        """Get the DataFrame with pretty column names."""
        return self.df.rename(columns={col: self.get_pretty_name(col) for col in self.df.columns})

    @property
    def numeric_cols(self) -> list[str]:
        """Numeric column names present in the DataFrame."""
        return [col for col in self.Col.numeric_columns() if col in self.df.columns]

    @property
    def categorical_cols(self) -> list[str]:
        """Categorical column names present in the DataFrame."""
        return [col for col in self.Col.categorical_columns() if col in self.df.columns]

    def __len__(self) -> int:
        return len(self.df)

    def with_df(self, df: pd.DataFrame) -> Self:
        """Return a new dataset of the same class wrapping ``df``."""
        return type(self)(df=df)

    def get_pretty_name(self, column_name: str) -> str:
        """Convert column name to pretty name for tables and reports.

        Args:
            column_name: The cleaned column name

        Returns:
            Pretty name suitable for labels and titles
        """
        try:
            col_enum = self.Col(column_name)
        except ValueError:
            # Fallback: capitalize and replace underscores if not in enum
            return column_name.replace("_", " ").title()
        else:
            return str(col_enum.pretty_name)

    def view(self, columns: Iterable[str] | None = None) -> DatasetView:
        """Build an immutable dataset view for analyzers.

        Args:
            columns: Columns to include in the view (defaults to all)

        Returns:
            DatasetView containing selected records and metadata
        """
        selected_cols = list(columns or self.df.columns.to_list())
        frame = self.df.loc[:, selected_cols]

        return DatasetView(
            df=frame,
            pretty_by_col={col: self.get_pretty_name(col) for col in selected_cols},
            numeric_cols=[col for col in selected_cols if col in self.numeric_cols],
            categorical_cols=[col for col in selected_cols if col in self.categorical_cols],
        )

    def category_options(self, column: str) -> list[object]:
        """Distinct values of a categorical column in order of first appearance.

        Missing values are not listed.
        """
        accessor = resolve_field(column, kind="categorical")
        return accessor.series(self.df).dropna().drop_duplicates().tolist()

    def make_outlier_filter(
        self,
        multiplier: float = 1.5,
        fields: Sequence[str] = OUTLIER_FIELDS,
    ) -> "IQROutlierFilter":
        """Instantiate an IQR outlier filter configured for this dataset.

        Example:
            >>> from cars_tlbx.data import CarsDataset
            >>> ds = CarsDataset.from_json()
            >>> res = ds.make_outlier_filter(multiplier=1.0).fit().result()
            >>> res.cleaned.shape, res.n_removed

        Args:
            multiplier: IQR multiplier for fence calculation (default: 1.5)
            fields: Numeric fields whose fences a record must respect

        Returns:
            IQROutlierFilter instance
        """
        from cars_tlbx.analysis.outlier_filter import IQROutlierFilter

        return IQROutlierFilter(self.view(), multiplier=multiplier, fields=fields)

    def remove_outliers(self, multiplier: float = 1.5) -> Self:
        """Return a new dataset without the records flagged by the IQR filter."""
        return self.with_df(self.make_outlier_filter(multiplier=multiplier).fit().result().cleaned)

    def make_correlation_engine(self, field_a: str, field_b: str) -> "CorrelationEngine":
        """Instantiate a correlation engine for a pair of numeric fields."""
        from cars_tlbx.analysis.correlation_engine import CorrelationEngine

        return CorrelationEngine(self.view(), field_a=field_a, field_b=field_b)

    def make_temporal_aggregator(self) -> "TemporalAggregator":
        """Instantiate a per-year fuel economy aggregator."""
        from cars_tlbx.analysis.temporal_aggregator import TemporalAggregator

        return TemporalAggregator(self.view())

    def make_rank_grouper(
        self,
        metric: str,
        predicates: Mapping[str, object] | None = None,
        limit: int = 10,
    ) -> "RankGrouper":
        """Instantiate a rank grouper for the top ``limit`` values of ``metric``.

        Example:
            >>> ranking = ds.make_rank_grouper("city_mpg", {"driveline": "Front-wheel drive"}).fit().result()
            >>> [(g.rank, g.value, len(g.members)) for g in ranking.groups]
        """
        from cars_tlbx.analysis.rank_grouper import RankGrouper

        return RankGrouper(self.view(), metric=metric, predicates=predicates, limit=limit)
