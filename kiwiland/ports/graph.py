"""Graph ports - Abstractions for obtaining the railway graph.

The query layer never builds a graph itself. It is handed one by a
repository, so tests can pass arbitrary graphs and production code can
load the configured one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..graph.railway import RailwayGraph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/token_repository.py

    The repository is responsible for building the railway graph once
    and returning that same immutable instance on every call.
    """

    def load(self) -> RailwayGraph:
        """Load the railway graph.

        Returns:
            The immutable graph.

        Raises:
            GraphConstructionError: If the edge list is invalid.
            GraphSourceError: If the edge list cannot be read.
        """
        ...
