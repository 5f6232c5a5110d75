"""Edge token parsing.

An edge token is two uppercase town letters immediately followed by a
positive integer weight, e.g. ``AB5`` for a route from A to B of
length 5.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List

from ..domain.errors import FormatError, SelfLoopError
from ..domain.models import Edge

EDGE_TOKEN = re.compile(r"^([A-Z])([A-Z])(\d+)$")

DEFAULT_EDGE_TOKENS: List[str] = [
    "AB5",
    "BC4",
    "CD8",
    "DC8",
    "DE6",
    "AD5",
    "CE2",
    "EB3",
    "AE7",
]


def parse_edge_token(token: str) -> Edge:
    """Parse a single edge token.

    Parameters
    ----------
    token:
        Token such as ``"AB5"``. Surrounding whitespace is ignored.

    Returns
    -------
    Edge
        The directed edge described by the token.

    Raises
    ------
    FormatError
        If the token is not two uppercase letters followed by a
        positive integer.
    SelfLoopError
        If both letters name the same town.
    """
    raw = token.strip()
    match = EDGE_TOKEN.match(raw)
    if match is None:
        raise FormatError(f"Invalid edge token: {token!r}", token=token)

    origin, destination, digits = match.groups()
    weight = int(digits)
    if weight <= 0:
        raise FormatError(
            f"Invalid edge token: {token!r} (weight must be positive)",
            token=token,
        )
    if origin == destination:
        raise SelfLoopError(
            f"Self-loop {raw} is not allowed",
            token=token,
            town=origin,
        )
    return Edge(origin=origin, destination=destination, weight=weight)


def parse_edge_tokens(tokens: Iterable[str]) -> Iterator[Edge]:
    """Lazily parse tokens in order, raising on the first bad one."""
    for token in tokens:
        yield parse_edge_token(token)


def split_edge_list(text: str) -> List[str]:
    """Split an edge list document into tokens.

    Tokens may be separated by commas and/or whitespace. Anything after
    a ``#`` on a line is a comment.
    """
    tokens: List[str] = []
    for line in text.splitlines():
        line = line.split("#", 1)[0]
        tokens.extend(part for part in re.split(r"[,\s]+", line) if part)
    return tokens
