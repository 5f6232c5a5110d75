"""Railway query service - The typed contract callers use.

The service normalises raw input (town labels, ``A-B-C`` path strings),
rejects what the engine cannot answer, and wraps engine answers in
result models. It holds the graph it was given and never rebuilds it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from ..domain.errors import InvalidArgumentError
from ..domain.models import CountResult, DistanceResult, Town
from ..graph.railway import RailwayGraph


def parse_path(path: str) -> List[Town]:
    """Split a ``A-B-C`` path string into normalised town labels."""
    return [part.strip().upper() for part in path.split("-") if part.strip()]


def normalize_town(town: str, argument: str) -> Town:
    """Strip and upper-case a town label, rejecting empty ones."""
    label = (town or "").strip().upper()
    if not label:
        raise InvalidArgumentError(f"{argument} is required", argument=argument)
    return label


@dataclass
class RailwayQueryService:
    """Answers railway questions against one fixed graph.

    Attributes:
        graph: The immutable railway graph to query
    """

    graph: RailwayGraph

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def distance(self, path: Union[str, Sequence[str]]) -> DistanceResult:
        """Length of the route that follows ``path`` exactly.

        Args:
            path: Either a ``A-B-C`` string or a sequence of town labels.

        Returns:
            DistanceResult for the given path; ``found`` is False when a
            hop has no direct route.

        Raises:
            InvalidArgumentError: If fewer than two towns are given.
        """
        if isinstance(path, str):
            towns = parse_path(path)
        else:
            towns = [t.strip().upper() for t in path if t and t.strip()]

        if len(towns) < 2:
            raise InvalidArgumentError("Provide at least two towns", argument="path")

        distance = self.graph.distance_along(towns)
        self._logger.debug(
            "Distance query", extra={"path": "-".join(towns), "distance": distance}
        )
        if distance is None:
            self._logger.info("No such route", extra={"path": "-".join(towns)})
            return DistanceResult(path=tuple(towns))
        return DistanceResult(path=tuple(towns), distance=distance)

    def trips_by_stops(
        self,
        start: str,
        end: str,
        exact_stops: Optional[int] = None,
        max_stops: Optional[int] = None,
    ) -> CountResult:
        """Number of trips from ``start`` to ``end`` with a stop constraint.

        Raises:
            InvalidArgumentError: If a town is empty, or unless exactly
                one of ``exact_stops`` and ``max_stops`` is given.
        """
        origin = normalize_town(start, "start")
        destination = normalize_town(end, "end")
        count = self.graph.count_trips_by_stops(
            origin, destination, exact_stops=exact_stops, max_stops=max_stops
        )
        self._logger.debug(
            "Trips by stops",
            extra={
                "start": origin,
                "end": destination,
                "exact_stops": exact_stops,
                "max_stops": max_stops,
                "count": count,
            },
        )
        return CountResult(start=origin, end=destination, count=count)

    def shortest(self, start: str, end: str) -> DistanceResult:
        """Shortest route from ``start`` to ``end`` (a cycle if they match)."""
        origin = normalize_town(start, "start")
        destination = normalize_town(end, "end")
        result = self.graph.shortest_route(origin, destination)
        if not result.found:
            self._logger.info(
                "No such route", extra={"start": origin, "end": destination}
            )
        return result

    def routes_within(self, start: str, end: str, max_distance: float) -> CountResult:
        """Number of routes from ``start`` to ``end`` shorter than ``max_distance``.

        Raises:
            InvalidArgumentError: If a town is empty or ``max_distance`` is
                not finite.
        """
        origin = normalize_town(start, "start")
        destination = normalize_town(end, "end")
        count = self.graph.count_routes_by_max_distance(origin, destination, max_distance)
        self._logger.debug(
            "Routes within distance",
            extra={
                "start": origin,
                "end": destination,
                "max_distance": max_distance,
                "count": count,
            },
        )
        return CountResult(start=origin, end=destination, count=count)

    def format_distance(self, result: DistanceResult) -> str:
        """Format a distance answer the way the reference output prints it."""
        if not result.found:
            return "NO SUCH ROUTE"
        return str(result.distance)
