"""Services layer - Application orchestration.

Available services:
- RailwayQueryService: Typed query contract over the railway graph
"""

from .railway_service import RailwayQueryService, parse_path

__all__ = ["RailwayQueryService", "parse_path"]
