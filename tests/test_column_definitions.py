"""Tests for column definition modules."""

import pytest

from cars_tlbx.data.base_columns import ColumnMetadata
from cars_tlbx.data.car_columns import CarColumn


class TestColumnMetadata:
    """Test ColumnMetadata dataclass."""

    def test_column_metadata_creation(self) -> None:
        """Test creating column metadata."""
        metadata = ColumnMetadata(
            path=("Fuel Information", "City mpg"),
            cleaned_name="city_mpg",
            kind="numeric",
            pretty_name="City MPG",
        )
        assert metadata.original_name == "Fuel Information.City mpg"
        assert metadata.kind == "numeric"

    def test_column_metadata_is_frozen(self) -> None:
        """Test that ColumnMetadata is immutable."""
        metadata = ColumnMetadata(path=("A",), cleaned_name="a", kind="categorical", pretty_name="A")
        with pytest.raises(AttributeError):
            metadata.pretty_name = "Changed"  # type: ignore[misc]


class TestCarColumn:
    """Test CarColumn enum."""

    def test_enum_values_are_snake_case(self) -> None:
        """Test that all enum values are valid snake_case identifiers."""
        for col in CarColumn:
            assert col.value.islower()
            assert " " not in col.value

    def test_metadata_matches_enum_value(self) -> None:
        """Test cleaned names agree with the enum values."""
        for col in CarColumn:
            assert col.metadata().cleaned_name == col.value

    def test_nested_paths(self) -> None:
        """Test the raw JSON paths of nested fields."""
        assert CarColumn.HORSEPOWER.path == ("Engine Information", "Engine Statistics", "Horsepower")
        assert CarColumn.FORWARD_GEARS.original_name == "Engine Information.Number of Forward Gears"
        assert CarColumn.YEAR.original_name == "Identification.Year"

    def test_pretty_names(self) -> None:
        """Test display names used in reports."""
        assert CarColumn.TORQUE.pretty_name == "Torque (ft-lbs)"
        assert CarColumn.CITY_MPG.pretty_name == "City MPG"

    def test_numeric_and_categorical_partition(self) -> None:
        """Test every column is either numeric or categorical."""
        numeric = set(CarColumn.numeric_columns())
        categorical = set(CarColumn.categorical_columns())
        assert numeric.isdisjoint(categorical)
        assert numeric | categorical == {col.value for col in CarColumn}
        assert {"driveline", "transmission"} <= categorical
        assert {"horsepower", "torque", "city_mpg", "highway_mpg", "year"} <= numeric

    def test_identifier_columns(self) -> None:
        """Test identifier columns."""
        assert CarColumn.identifier_columns() == ["id", "make", "model_year", "year"]
