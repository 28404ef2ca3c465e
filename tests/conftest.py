"""Test configuration for the cars toolbox."""

from pathlib import Path
import sys

import pytest


# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def build_car(
    *,
    car_id: str | None = "Test Car",
    make: str | None = "Testmake",
    year: object = 2010,
    height: object = 140,
    length: object = 180,
    width: object = 70,
    driveline: str | None = "Front-wheel drive",
    transmission: str | None = "6 Speed Automatic",
    gears: object = 6,
    horsepower: object = 200,
    torque: object = 180,
    city: object = 20,
    highway: object = 28,
) -> dict:
    """Build one nested record shaped like an entry of ``cars.json``."""
    return {
        "Dimensions": {"Height": height, "Length": length, "Width": width},
        "Engine Information": {
            "Driveline": driveline,
            "Engine Type": "Test 2.0L 4cyl",
            "Hybrid": False,
            "Number of Forward Gears": gears,
            "Transmission": transmission,
            "Engine Statistics": {"Horsepower": horsepower, "Torque": torque},
        },
        "Fuel Information": {"City mpg": city, "Fuel Type": "Gasoline", "Highway mpg": highway},
        "Identification": {
            "Classification": "Automatic transmission",
            "ID": car_id,
            "Make": make,
            "Model Year": f"{year} {make} {car_id}",
            "Year": year,
        },
    }


@pytest.fixture
def make_car():
    """Factory fixture for nested vehicle records."""
    return build_car


@pytest.fixture
def sample_records() -> list[dict]:
    """A small fleet with two drivelines, two transmissions and three years."""
    return [
        build_car(car_id="Audi A3", year=2009, driveline="All-wheel drive", horsepower=200, torque=207, city=21, highway=29),
        build_car(car_id="Audi A4", year=2009, driveline="All-wheel drive", horsepower=211, torque=258, city=20, highway=27),
        build_car(car_id="Honda Civic", year=2010, horsepower=140, torque=128, city=25, highway=36),
        build_car(car_id="Honda Accord", year=2010, horsepower=177, torque=161, city=22, highway=31),
        build_car(
            car_id="BMW 335i",
            year=2011,
            driveline="Rear-wheel drive",
            transmission="6 Speed Manual",
            horsepower=300,
            torque=300,
            city=18,
            highway=28,
        ),
        build_car(car_id="Ford Focus", year=2011, transmission="6 Speed Manual", horsepower=160, torque=146, city=26, highway=36),
        build_car(car_id="VW Golf", year=2011, horsepower=170, torque=184, city=22, highway=31),
        build_car(car_id="Mazda 3", year=2010, horsepower=167, torque=168, city=24, highway=33),
    ]


@pytest.fixture
def sample_dataset(sample_records: list[dict]):
    """CarsDataset built from :func:`sample_records`."""
    from cars_tlbx.data import CarsDataset

    return CarsDataset.from_records(sample_records)
