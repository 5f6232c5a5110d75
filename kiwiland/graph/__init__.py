"""Graph engine for the railway network.

This subpackage contains the edge token parser, the immutable
``RailwayGraph`` with its four query operations, and the Dijkstra
primitive the shortest-route queries are built on.
"""

from .dijkstra import dijkstra
from .edges import DEFAULT_EDGE_TOKENS, parse_edge_token, parse_edge_tokens, split_edge_list
from .railway import RailwayGraph

__all__ = [
    "RailwayGraph",
    "dijkstra",
    "DEFAULT_EDGE_TOKENS",
    "parse_edge_token",
    "parse_edge_tokens",
    "split_edge_list",
]
