"""Base column definitions and metadata structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal


@dataclass(frozen=True)
class ColumnMetadata:
    """Metadata for a dataset column.

    Attributes:
        path: Key path of the value inside a nested raw record.
        cleaned_name: Standardized column name used in DataFrames.
        kind: ``"numeric"`` for measurable fields, ``"categorical"`` for labels and identifiers.
        pretty_name: Human-readable name for use in tables and reports.
    """

    path: tuple[str, ...]
    """Key path as it appears in the raw JSON record (outermost key first)."""
    cleaned_name: str
    kind: Literal["numeric", "categorical"]
    pretty_name: str

    @property
    def original_name(self) -> str:
        """Dotted path, matching the column name produced by :func:`pandas.json_normalize`."""
        return ".".join(self.path)


class BaseColumn(StrEnum):
    """Base class for dataset column enums.

    Subclasses must implement:
    - metadata(): Return ColumnMetadata for each enum member
    - identifier_columns(): Return list of identifier column names
    """

    def metadata(self) -> ColumnMetadata:
        """Get metadata for this column.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement metadata() method")

    @classmethod
    def identifier_columns(cls) -> list[str]:
        """Get identifier column names.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError(f"{cls.__name__} must implement identifier_columns() method")

    @classmethod
    def numeric_columns(cls) -> list[str]:
        """Get all numeric column names in declaration order."""
        return [col.value for col in cls if col.kind == "numeric"]

    @classmethod
    def categorical_columns(cls) -> list[str]:
        """Get all categorical column names in declaration order."""
        return [col.value for col in cls if col.kind == "categorical"]

    @property
    def pretty_name(self) -> str:
        """Get the human-readable name for tables and reports."""
        return self.metadata().pretty_name

    @property
    def original_name(self) -> str:
        """Get the dotted path of the column in the raw JSON records."""
        return self.metadata().original_name

    @property
    def path(self) -> tuple[str, ...]:
        """Get the nested key path of the column in the raw JSON records."""
        return self.metadata().path

    @property
    def kind(self) -> str:
        """Get the column kind (``numeric`` or ``categorical``)."""
        return self.metadata().kind
