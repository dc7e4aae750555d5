"""Command-line pipeline for the Island Route Planner.

The pipeline loads the bundled island graph, runs the fastest tour
query and the max-reach query with the configured parameters, and
prints one report line for each.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import AppConfig, ObservabilityConfig, get_config
from .container import Container
from .services import RoutePlannerService


def configure_logging(config: ObservabilityConfig) -> None:
    """Apply the logging level and format from configuration."""
    logging.basicConfig(format=config.format)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(config.level.upper())


def plan_islands(config: Optional[AppConfig] = None) -> List[str]:
    """Run both queries and return the report lines.

    Reusable from tests or other front-ends without printing.
    """
    config = config or get_config()
    container = Container.create_default(config)
    planner: RoutePlannerService = container.resolve(RoutePlannerService)
    return planner.report(
        config.query.start,
        config.query.targets,
        config.query.hour_budget,
    )


def run_pipeline() -> None:
    """Run the pipeline once and print its report."""
    config = get_config()
    configure_logging(config.observability)
    for line in plan_islands(config):
        print(line)


if __name__ == "__main__":
    run_pipeline()
