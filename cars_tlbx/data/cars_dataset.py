"""Dataset class for loading the nested cars records."""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import pandas as pd

from cars_tlbx.utils.paths import get_dataset_path

from .base_dataset import BaseDataset
from .car_columns import CarColumn as Col


logger = logging.getLogger(__name__)


class CarsDataset(BaseDataset):
    """Loading and flattening for the [cars dataset](https://corgis-edu.github.io/corgis/json/cars/).

    Raw values are kept exactly as loaded; typed access goes through
    :mod:`cars_tlbx.data.accessors`, so a non-numeric horsepower stays in the record but
    reads as missing.

    **Example workflow**:
    >>> from cars_tlbx.data import CarsDataset, CarCol
    >>> ds = CarsDataset.from_json().remove_outliers(multiplier=1.0)
    >>> corr = ds.make_correlation_engine(CarCol.CITY_MPG, CarCol.TORQUE).fit().result()
    >>> trend = ds.make_temporal_aggregator().fit().result()
    >>> top = ds.make_rank_grouper(CarCol.HORSEPOWER, {CarCol.DRIVELINE: "All-wheel drive"}).fit().result()
    >>> corr.formatted(), trend.to_frame().shape, len(top.groups)
    """

    Col = Col

    @classmethod
    def from_json(cls, json_path: str | Path | None = None, **kwargs: object) -> "CarsDataset":
        """Load the dataset from a JSON file holding a list of nested records.

        Args:
            json_path: Path to the JSON file (defaults to ``_data/cars.json``)

        Returns:
            CarsDataset instance with flattened records
        """
        json_path = get_dataset_path("cars") if json_path is None else Path(json_path)

        with json_path.open(encoding="utf-8") as fh:
            records = json.load(fh)
        if not isinstance(records, list):
            raise ValueError(f"Expected a JSON list of records in {json_path}, got {type(records).__name__}")

        dataset = cls.from_records(records)
        logger.info("Loaded %d vehicle records from %s", len(dataset), json_path)
        return dataset

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "CarsDataset":
        """Build the dataset from in-memory nested records."""
        return cls(df=cls._flatten_records(list(records)))

    @staticmethod
    def _flatten_records(records: list[Mapping[str, Any]]) -> pd.DataFrame:
        """Flatten nested records into one row per vehicle with cleaned column names.

        Keys missing from a record become missing cells; keys outside the known schema are dropped.
        """
        raw = pd.json_normalize(records, sep=".") if records else pd.DataFrame(index=pd.RangeIndex(0))
        return raw.reindex(columns=[col.original_name for col in Col]).set_axis([col.value for col in Col], axis=1)


def load_clean_dataset(
    json_path: str | Path | None = None,
    multiplier: float = 1.5,
) -> CarsDataset:
    """Load the cars dataset and drop IQR outliers once, at startup.

    Args:
        json_path: Path to the JSON file (defaults to ``_data/cars.json``)
        multiplier: IQR multiplier for the outlier fences

    Returns:
        The cleaned dataset
    """
    cleaned = CarsDataset.from_json(json_path).remove_outliers(multiplier=multiplier)
    logger.info("Cleaned data length: %d", len(cleaned))
    return cleaned
