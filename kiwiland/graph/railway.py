"""The railway graph and its query operations.

``RailwayGraph`` is a directed graph of towns with positive integer
route lengths. It is built once, from edge tokens or parsed edges, and
is read-only afterwards: every query is a pure function of the graph
and its arguments, so one instance can serve concurrent callers.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, cast

from ..domain.errors import DuplicateEdgeError, InvalidArgumentError
from ..domain.models import DistanceResult, Edge, Town, Weight
from .dijkstra import dijkstra
from .edges import parse_edge_tokens


class RailwayGraph:
    """Immutable directed, weighted graph of towns.

    Use :meth:`from_tokens` or :meth:`from_edges` to build one. If a
    construction error is raised, no graph is produced.
    """

    def __init__(self, adjacency: Mapping[Town, Mapping[Town, Weight]]) -> None:
        self._adjacency: Mapping[Town, Mapping[Town, Weight]] = MappingProxyType(
            {town: MappingProxyType(dict(row)) for town, row in adjacency.items()}
        )

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> RailwayGraph:
        """Build a graph from parsed edges.

        Raises:
            DuplicateEdgeError: If an ordered pair appears twice.
        """
        adjacency: Dict[Town, Dict[Town, Weight]] = {}
        for edge in edges:
            row = adjacency.setdefault(edge.origin, {})
            if edge.destination in row:
                raise DuplicateEdgeError(
                    f"Duplicate route {edge.origin}{edge.destination} not allowed",
                    token=edge.token,
                    origin=edge.origin,
                    destination=edge.destination,
                )
            row[edge.destination] = edge.weight
            # sinks are towns too
            adjacency.setdefault(edge.destination, {})
        return cls(adjacency)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> RailwayGraph:
        """Build a graph from edge tokens such as ``"AB5"``.

        Raises:
            FormatError: If a token is malformed.
            SelfLoopError: If a token names the same town twice.
            DuplicateEdgeError: If an ordered pair appears twice.
        """
        return cls.from_edges(parse_edge_tokens(tokens))

    # -- structure ---------------------------------------------------------

    @property
    def adjacency(self) -> Mapping[Town, Mapping[Town, Weight]]:
        """Read-only view of ``{town: {neighbour: weight}}``."""
        return self._adjacency

    @property
    def towns(self) -> Tuple[Town, ...]:
        return tuple(self._adjacency)

    def has_town(self, town: Town) -> bool:
        return town in self._adjacency

    def neighbors(self, town: Town) -> List[Tuple[Town, Weight]]:
        """Return ``(neighbour, weight)`` pairs leaving ``town``."""
        return list(self._adjacency.get(town, {}).items())

    def weight(self, origin: Town, destination: Town) -> Optional[Weight]:
        """Return the length of the direct route, or None if there is none."""
        return self._adjacency.get(origin, {}).get(destination)

    def edges(self) -> Iterator[Edge]:
        for origin, row in self._adjacency.items():
            for destination, weight in row.items():
                yield Edge(origin=origin, destination=destination, weight=weight)

    def __contains__(self, town: object) -> bool:
        return town in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        edge_count = sum(len(row) for row in self._adjacency.values())
        return f"RailwayGraph(towns={len(self)}, edges={edge_count})"

    # -- queries -----------------------------------------------------------

    def distance_along(self, path: Sequence[Town]) -> Optional[Weight]:
        """Total length of a route that follows ``path`` exactly.

        Returns None when some consecutive pair has no direct route.

        Raises:
            InvalidArgumentError: If ``path`` has fewer than two towns.
        """
        if len(path) < 2:
            raise InvalidArgumentError(
                "Provide at least two towns", argument="path"
            )

        total = 0
        for origin, destination in zip(path, path[1:]):
            weight = self.weight(origin, destination)
            if weight is None:
                return None
            total += weight
        return total

    def count_trips_by_stops(
        self,
        start: Town,
        end: Town,
        *,
        exact_stops: Optional[int] = None,
        max_stops: Optional[int] = None,
    ) -> int:
        """Count walks from ``start`` to ``end`` constrained by hop count.

        Walks may revisit towns and routes. With ``exact_stops=k`` a walk
        must take exactly k hops; with ``max_stops=k`` it may take 1 to k.

        Raises:
            InvalidArgumentError: Unless exactly one bound is given.
        """
        if (exact_stops is None) == (max_stops is None):
            raise InvalidArgumentError(
                "Provide exactly one of exactStops or maxStops",
                argument="exact_stops/max_stops",
            )
        limit: int = cast(int, exact_stops if exact_stops is not None else max_stops)

        count = 0
        stack: List[Tuple[Town, int]] = [(start, 0)]
        while stack:
            town, stops = stack.pop()
            # staying put is not a trip
            if town == end and stops > 0:
                if exact_stops is None or stops == exact_stops:
                    count += 1
            if stops >= limit:
                continue
            for neighbour, _ in self.neighbors(town):
                stack.append((neighbour, stops + 1))
        return count

    def shortest_route(self, start: Town, end: Town) -> DistanceResult:
        """Shortest route from ``start`` to ``end``.

        When ``start == end`` the answer is the shortest cycle through
        ``start``: the best of each outgoing route followed by the
        shortest way back.
        """
        if not self.has_town(start) or not self.has_town(end):
            return DistanceResult()

        if start != end:
            path, distance = dijkstra(self._adjacency, start, end)
            if not path:
                return DistanceResult()
            return DistanceResult(path=tuple(path), distance=int(distance))

        best = DistanceResult()
        for neighbour, weight in self.neighbors(start):
            back, back_distance = dijkstra(self._adjacency, neighbour, start)
            if not back:
                continue
            total = weight + int(back_distance)
            if best.distance is None or total < best.distance:
                best = DistanceResult(path=(start, *back), distance=total)
        return best

    def shortest_distance(self, start: Town, end: Town) -> Optional[Weight]:
        """Length of the shortest route, or None if there is none."""
        return self.shortest_route(start, end).distance

    def count_routes_by_max_distance(
        self, start: Town, end: Town, max_distance: float
    ) -> int:
        """Count walks from ``start`` to ``end`` shorter than ``max_distance``.

        Walks may revisit towns and routes; only walks of positive length
        count.

        Raises:
            InvalidArgumentError: If ``max_distance`` is not a finite number.
        """
        if not math.isfinite(max_distance):
            raise InvalidArgumentError(
                "threshold must be a finite number", argument="max_distance"
            )

        count = 0
        stack: List[Tuple[Town, float]] = [(start, 0)]
        while stack:
            town, travelled = stack.pop()
            if town == end and travelled > 0:
                count += 1
            for neighbour, weight in self.neighbors(town):
                # weights are positive, so nothing past the ceiling comes back under it
                if travelled + weight < max_distance:
                    stack.append((neighbour, travelled + weight))
        return count
