"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    DuplicateEdgeError,
    FormatError,
    GraphConstructionError,
    GraphSourceError,
    InvalidArgumentError,
    KiwilandError,
    SelfLoopError,
)
from .models import CountResult, DistanceResult, Edge, Town, Weight

__all__ = [
    # Models
    "Town",
    "Weight",
    "Edge",
    "DistanceResult",
    "CountResult",
    # Errors
    "KiwilandError",
    "GraphConstructionError",
    "FormatError",
    "SelfLoopError",
    "DuplicateEdgeError",
    "InvalidArgumentError",
    "GraphSourceError",
]
