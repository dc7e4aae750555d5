"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Tour and reach queries over the island graph
"""

from .route_planner import RoutePlannerService, format_path

__all__ = ["RoutePlannerService", "format_path"]
