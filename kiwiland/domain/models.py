"""Immutable domain models for the Kiwiland railroad.

All models are frozen dataclasses with slots. They carry no behaviour
beyond a few convenience properties and have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

Town = str
Weight = int


@dataclass(frozen=True, slots=True)
class Edge:
    """A one-way route between two towns.

    Attributes:
        origin: Town the route leaves from
        destination: Town the route arrives at
        weight: Distance covered by the route
    """

    origin: Town
    destination: Town
    weight: Weight

    @property
    def token(self) -> str:
        """Return the edge in its token form, e.g. ``AB5``."""
        return f"{self.origin}{self.destination}{self.weight}"


@dataclass(frozen=True, slots=True)
class DistanceResult:
    """Outcome of a distance query.

    A missing ``distance`` means there is no such route. That is a normal
    answer, not a failure.

    Attributes:
        path: Towns visited, in order (empty when no route was found
            by a search query)
        distance: Total weight along ``path``, or None
    """

    path: tuple[Town, ...] = field(default_factory=tuple)
    distance: Optional[Weight] = None

    @property
    def found(self) -> bool:
        """Check if a route exists."""
        return self.distance is not None

    @property
    def num_stops(self) -> int:
        """Return the number of hops along the route."""
        return max(len(self.path) - 1, 0)


@dataclass(frozen=True, slots=True)
class CountResult:
    """Outcome of a counting query.

    Attributes:
        start: Departure town
        end: Arrival town
        count: Number of qualifying walks (zero is a valid answer)
    """

    start: Town
    end: Town
    count: int
