"""Edge token graph repository adapter.

Builds the railway graph from the configured edge tokens, or from an
edge list file when one is configured, and keeps the result for the
lifetime of the repository.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphConstructionError, GraphSourceError
from ...graph.edges import split_edge_list
from ...graph.railway import RailwayGraph


@dataclass
class TokenGraphRepository:
    """Graph repository that loads from edge tokens.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (inline tokens or edge file)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[RailwayGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> RailwayGraph:
        """Build the railway graph, once.

        Returns:
            The immutable graph.

        Raises:
            GraphSourceError: If the edge file cannot be read.
            GraphConstructionError: If a token is malformed, a self-loop
                or a duplicate. Nothing is cached in that case.
        """
        if self._graph is not None:
            return self._graph

        tokens = self._read_tokens()
        self._logger.debug(
            "Building graph",
            extra={"tokens": len(tokens), "edges_file": str(self.config.edges_file)},
        )

        try:
            graph = RailwayGraph.from_tokens(tokens)
        except GraphConstructionError as e:
            self._logger.error(
                "Graph construction failed",
                extra={"token": e.token, "error": type(e).__name__},
            )
            raise

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"towns": len(graph), "edges": len(tokens)},
        )
        return graph

    def _read_tokens(self) -> List[str]:
        """Return the configured tokens, reading the edge file if set."""
        path = self.config.edges_file
        if path is None:
            return list(self.config.edges)

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise GraphSourceError(
                f"Failed to read edge file {path}",
                file_path=str(path),
                cause=e,
            )
        return split_edge_list(text)
