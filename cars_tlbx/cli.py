"""Command line report for the cars dataset.

Loads a JSON dataset, drops IQR outliers and prints the per-year mpg trend, one
correlation and the top value groups of a ranking metric as plain text.

Example:
    cars-tlbx --data _data/cars.json --iqr-multiplier 1.0 --metric horsepower --driveline "All-wheel drive"
"""

import argparse
import logging
import sys
from collections.abc import Iterable

from cars_tlbx.config import DEFAULT_ANALYSIS_CFG, AnalysisConfig
from cars_tlbx.data.cars_dataset import CarsDataset
from cars_tlbx.exceptions import ConfigurationError
from cars_tlbx.session import AnalysisSession


logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Outlier-filtered fuel economy report for a cars JSON dataset.")
    p.add_argument("--data", default=None, help="Path to the JSON records (default: _data/cars.json)")
    p.add_argument("--iqr-multiplier", type=float, default=None, help="IQR fence multiplier (default: 1.5)")
    p.add_argument("--fuel-metric", default=None, help="Fuel field for the correlation (default: city_mpg)")
    p.add_argument("--engine-metric", default=None, help="Engine field for the correlation (default: torque)")
    p.add_argument("--metric", default=None, help="Ranking metric (default: city_mpg)")
    p.add_argument("--driveline", default=None, help="Only rank vehicles with this driveline")
    p.add_argument("--transmission", default=None, help="Only rank vehicles with this transmission")
    p.add_argument("--limit", type=int, default=None, help="Number of rank groups to show (default: 10)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def render_report(session: AnalysisSession, predicates: dict[str, str | None]) -> str:
    """Format the trend, correlation and ranking of ``session`` as plain text."""
    cfg = session.config
    lines = [f"Records: {len(session.dataset)} loaded, {len(session.cleaned)} after outlier removal", ""]

    trend = session.trend().to_frame()
    lines += ["Average MPG over time", trend.to_string(index=False, float_format="{:.2f}".format), ""]

    corr = session.correlation()
    lines += [f"Correlation {corr.pretty_a} vs {corr.pretty_b}: {corr.formatted(cfg.correlation_precision)}", ""]

    ranking = session.ranking(predicates=predicates)
    lines.append(f"Top {len(ranking.groups)} by {ranking.pretty_metric}")
    for group in ranking.groups:
        ids = ", ".join(str(i) for i in group.ids)
        lines.append(f"{group.rank:>3}. {group.value:g} ({len(group)}): {ids}")
    return "\n".join(lines)


def main(argv: Iterable[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s: %(message)s")

    try:
        config: AnalysisConfig = DEFAULT_ANALYSIS_CFG.with_overrides(
            iqr_multiplier=args.iqr_multiplier,
            fuel_metric=args.fuel_metric,
            engine_metric=args.engine_metric,
            rank_metric=args.metric,
            rank_limit=args.limit,
        )
        logger.debug("Configuration: %s", config)
        session = AnalysisSession(CarsDataset.from_json(args.data), config=config)
        report = render_report(session, {"driveline": args.driveline, "transmission": args.transmission})
    except (ConfigurationError, FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
