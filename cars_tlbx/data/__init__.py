"""Data module for dataset classes."""

from .accessors import FIELD_ACCESSORS, OUTLIER_FIELDS, FieldAccessor, resolve_field, resolve_fields
from .car_columns import CarColumn as CarCol
from .cars_dataset import CarsDataset, load_clean_dataset
from .views import DatasetView


__all__ = [
    "FIELD_ACCESSORS",
    "OUTLIER_FIELDS",
    "CarCol",
    "CarsDataset",
    "DatasetView",
    "FieldAccessor",
    "load_clean_dataset",
    "resolve_field",
    "resolve_fields",
]
