"""Vehicle record analytics: IQR outlier filtering, mpg trends, correlations and rankings."""

from .config import DEFAULT_ANALYSIS_CFG, AnalysisConfig
from .data import CarCol, CarsDataset, load_clean_dataset
from .exceptions import ConfigurationError
from .session import AnalysisSession


__all__ = [
    "DEFAULT_ANALYSIS_CFG",
    "AnalysisConfig",
    "AnalysisSession",
    "CarCol",
    "CarsDataset",
    "ConfigurationError",
    "load_clean_dataset",
]
