"""Typed domain errors for the Kiwiland railroad.

Construction errors abort building a graph; query errors are local to
the call that raised them. "No route" is not an error and has no type
here: the engine returns ``None`` and the service wraps it in a
``DistanceResult``.

All errors inherit from KiwilandError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class KiwilandError(Exception):
    """Base error for the railroad domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphConstructionError(KiwilandError):
    """An edge could not be added while building the graph.

    Attributes:
        token: The offending edge token, if the edge came from one
    """

    token: str = ""


@dataclass
class FormatError(GraphConstructionError):
    """Edge token is not two uppercase letters followed by a weight."""


@dataclass
class SelfLoopError(GraphConstructionError):
    """Edge starts and ends at the same town.

    Attributes:
        town: The town named twice
    """

    town: str = ""


@dataclass
class DuplicateEdgeError(GraphConstructionError):
    """A second edge was given for an ordered pair already in the graph.

    Attributes:
        origin: Town the edge leaves from
        destination: Town the edge arrives at
    """

    origin: str = ""
    destination: str = ""


@dataclass
class InvalidArgumentError(KiwilandError):
    """A query was called with arguments it cannot answer.

    Attributes:
        argument: Name of the offending argument(s)
    """

    argument: str = ""


@dataclass
class GraphSourceError(KiwilandError):
    """The edge list could not be read from its source.

    Attributes:
        file_path: Path to the edge file if relevant
    """

    file_path: Optional[str] = None
