"""Shared analysis configuration (outlier fences, ranking and correlation defaults)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from cars_tlbx.data.accessors import OUTLIER_FIELDS, resolve_field, resolve_fields
from cars_tlbx.data.car_columns import CarColumn


@dataclass(frozen=True)
class AnalysisConfig:
    """Reusable analysis settings, validated when created.

    All field names are resolved in ``__post_init__``, so a typo fails at startup with a
    :class:`~cars_tlbx.exceptions.ConfigurationError` instead of during an analysis.
    """

    iqr_multiplier: float = 1.5
    outlier_fields: tuple[str, ...] = OUTLIER_FIELDS
    rank_metric: str = CarColumn.CITY_MPG
    rank_limit: int = 10
    fuel_metric: str = CarColumn.CITY_MPG
    engine_metric: str = CarColumn.TORQUE
    correlation_precision: int = 2

    def __post_init__(self) -> None:
        if not self.iqr_multiplier > 0:
            raise ValueError(f"iqr_multiplier must be positive, got {self.iqr_multiplier}")
        if self.rank_limit < 1:
            raise ValueError(f"rank_limit must be at least 1, got {self.rank_limit}")
        if self.correlation_precision < 0:
            raise ValueError(f"correlation_precision must not be negative, got {self.correlation_precision}")
        resolve_fields(self.outlier_fields, kind="numeric")
        for name in (self.rank_metric, self.fuel_metric, self.engine_metric):
            resolve_field(name, kind="numeric")

    def with_overrides(self, **overrides: Any) -> AnalysisConfig:
        """Return a validated copy with the given settings replaced. ``None`` values are ignored."""
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


# Default configuration used by the session and the CLI
DEFAULT_ANALYSIS_CFG = AnalysisConfig()


__all__ = ["DEFAULT_ANALYSIS_CFG", "AnalysisConfig"]
