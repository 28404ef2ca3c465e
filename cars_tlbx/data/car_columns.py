"""Column definitions for the cars dataset."""

from .base_columns import BaseColumn, ColumnMetadata


class CarColumn(BaseColumn):
    """Column names for the cars dataset as per the [CORGIS Cars dataset](https://corgis-edu.github.io/corgis/json/cars/).

    Columns:
    - ``height``: float - Vehicle height
    - ``length``: float - Vehicle length
    - ``width``: float - Vehicle width
    - ``driveline``: str - Driveline (e.g. All-wheel drive, Front-wheel drive)
    - ``engine_type``: str - Engine description
    - ``hybrid``: bool - Whether the vehicle is a hybrid
    - ``forward_gears``: int - Number of forward gears
    - ``transmission``: str - Transmission type
    - ``horsepower``: float - Engine horsepower
    - ``torque``: float - Engine torque (ft-lbs)
    - ``city_mpg``: float - Fuel economy in the city (miles per gallon)
    - ``fuel_type``: str - Fuel type
    - ``highway_mpg``: float - Fuel economy on the highway (miles per gallon)
    - ``classification``: str - Transmission classification (e.g. Automatic transmission)
    - ``id``: str - Vehicle identifier (make, model and trim)
    - ``make``: str - Manufacturer
    - ``model_year``: str - Model year label
    - ``year``: int - Year of release
    """

    # Dimensions
    HEIGHT = "height"
    LENGTH = "length"
    WIDTH = "width"

    # Engine information
    DRIVELINE = "driveline"
    ENGINE_TYPE = "engine_type"
    HYBRID = "hybrid"
    FORWARD_GEARS = "forward_gears"
    TRANSMISSION = "transmission"
    HORSEPOWER = "horsepower"
    TORQUE = "torque"

    # Fuel information
    CITY_MPG = "city_mpg"
    FUEL_TYPE = "fuel_type"
    HIGHWAY_MPG = "highway_mpg"

    # Identification
    CLASSIFICATION = "classification"
    ID = "id"
    MAKE = "make"
    MODEL_YEAR = "model_year"
    YEAR = "year"

    def metadata(self) -> ColumnMetadata:
        """Get metadata for this column.

        Returns:
            ColumnMetadata instance with raw path, cleaned name, kind, and pretty name.
        """
        return _COLUMN_METADATA_CARS[self]

    @classmethod
    def identifier_columns(cls) -> list[str]:
        """Get identifier column names.

        Returns:
            List of identifier column names (id, make, model year, year).
        """
        return [cls.ID, cls.MAKE, cls.MODEL_YEAR, cls.YEAR]


_DIM = "Dimensions"
_ENGINE = "Engine Information"
_STATS = "Engine Statistics"
_FUEL = "Fuel Information"
_IDENT = "Identification"

# Column metadata mapping
_COLUMN_METADATA_CARS: dict[CarColumn, ColumnMetadata] = {
    CarColumn.HEIGHT: ColumnMetadata(
        path=(_DIM, "Height"),
        cleaned_name="height",
        kind="numeric",
        pretty_name="Height",
    ),
    CarColumn.LENGTH: ColumnMetadata(
        path=(_DIM, "Length"),
        cleaned_name="length",
        kind="numeric",
        pretty_name="Length",
    ),
    CarColumn.WIDTH: ColumnMetadata(
        path=(_DIM, "Width"),
        cleaned_name="width",
        kind="numeric",
        pretty_name="Width",
    ),
    CarColumn.DRIVELINE: ColumnMetadata(
        path=(_ENGINE, "Driveline"),
        cleaned_name="driveline",
        kind="categorical",
        pretty_name="Driveline",
    ),
    CarColumn.ENGINE_TYPE: ColumnMetadata(
        path=(_ENGINE, "Engine Type"),
        cleaned_name="engine_type",
        kind="categorical",
        pretty_name="Engine Type",
    ),
    CarColumn.HYBRID: ColumnMetadata(
        path=(_ENGINE, "Hybrid"),
        cleaned_name="hybrid",
        kind="categorical",
        pretty_name="Hybrid",
    ),
    CarColumn.FORWARD_GEARS: ColumnMetadata(
        path=(_ENGINE, "Number of Forward Gears"),
        cleaned_name="forward_gears",
        kind="numeric",
        pretty_name="Gears",
    ),
    CarColumn.TRANSMISSION: ColumnMetadata(
        path=(_ENGINE, "Transmission"),
        cleaned_name="transmission",
        kind="categorical",
        pretty_name="Transmission",
    ),
    CarColumn.HORSEPOWER: ColumnMetadata(
        path=(_ENGINE, _STATS, "Horsepower"),
        cleaned_name="horsepower",
        kind="numeric",
        pretty_name="Horsepower",
    ),
    CarColumn.TORQUE: ColumnMetadata(
        path=(_ENGINE, _STATS, "Torque"),
        cleaned_name="torque",
        kind="numeric",
        pretty_name="Torque (ft-lbs)",
    ),
    CarColumn.CITY_MPG: ColumnMetadata(
        path=(_FUEL, "City mpg"),
        cleaned_name="city_mpg",
        kind="numeric",
        pretty_name="City MPG",
    ),
    CarColumn.FUEL_TYPE: ColumnMetadata(
        path=(_FUEL, "Fuel Type"),
        cleaned_name="fuel_type",
        kind="categorical",
        pretty_name="Fuel Type",
    ),
    CarColumn.HIGHWAY_MPG: ColumnMetadata(
        path=(_FUEL, "Highway mpg"),
        cleaned_name="highway_mpg",
        kind="numeric",
        pretty_name="Highway MPG",
    ),
    CarColumn.CLASSIFICATION: ColumnMetadata(
        path=(_IDENT, "Classification"),
        cleaned_name="classification",
        kind="categorical",
        pretty_name="Classification",
    ),
    CarColumn.ID: ColumnMetadata(
        path=(_IDENT, "ID"),
        cleaned_name="id",
        kind="categorical",
        pretty_name="Model",
    ),
    CarColumn.MAKE: ColumnMetadata(
        path=(_IDENT, "Make"),
        cleaned_name="make",
        kind="categorical",
        pretty_name="Make",
    ),
    CarColumn.MODEL_YEAR: ColumnMetadata(
        path=(_IDENT, "Model Year"),
        cleaned_name="model_year",
        kind="categorical",
        pretty_name="Model Year",
    ),
    CarColumn.YEAR: ColumnMetadata(
        path=(_IDENT, "Year"),
        cleaned_name="year",
        kind="numeric",
        pretty_name="Year",
    ),
}
