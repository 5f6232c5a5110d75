"""Shortest-path computation using Dijkstra's algorithm.

This module provides the single-pair shortest path primitive used by
the railway graph, both for ordinary trips and, composed edge by edge,
for the shortest cycle through a town.
"""

import heapq
from typing import Dict, List, Mapping, Set, Tuple, Union

Adjacency = Mapping[str, Mapping[str, int]]


def dijkstra(
    adjacency: Adjacency, start: str, end: str
) -> Tuple[List[str], Union[int, float]]:
    """Compute the shortest path between two towns using Dijkstra.

    Parameters
    ----------
    adjacency:
        Mapping of town to ``{neighbour: weight}``. Weights must be
        non-negative.
    start:
        Departure town.
    end:
        Arrival town.

    Returns
    -------
    list[str], int
        The towns visited from ``start`` to ``end`` (inclusive) and the
        total distance. When ``start == end`` the path is ``[start]``
        with distance 0. If no path exists, returns ``([], float("inf"))``.
    """
    if start not in adjacency or end not in adjacency:
        return [], float("inf")

    distances: Dict[str, Union[int, float]] = {town: float("inf") for town in adjacency}
    previous: Dict[str, str] = {}
    distances[start] = 0

    heap: List[Tuple[Union[int, float], str]] = [(0, start)]
    visited: Set[str] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        for v, weight in adjacency.get(u, {}).items():
            new_distance = current_distance + weight
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if end not in visited:
        return [], float("inf")

    path: List[str] = [end]
    while path[-1] != start:
        path.append(previous[path[-1]])

    path.reverse()
    return path, distances[end]
