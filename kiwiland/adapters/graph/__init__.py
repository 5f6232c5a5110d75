"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TokenGraphRepository: Builds the graph from configured edge tokens
"""

from .token_repository import TokenGraphRepository

__all__ = ["TokenGraphRepository"]
