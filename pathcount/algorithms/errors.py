"""Errors raised by shortest-path computations.

Each error is local to one ``compute`` call and is raised before any result is
returned; records built by a failed call are discarded.
"""

from __future__ import annotations

from typing import Any

from pathcount.graph.base import NodeID


class PathCountError(Exception):
    """Base class for pathcount errors."""


class InvalidStartNode(PathCountError, KeyError):
    """The start node is not part of the graph's node set.

    Also a ``KeyError`` so callers treating unknown nodes as missing keys keep
    working.
    """

    def __init__(self, node: NodeID) -> None:
        self.node = node
        super().__init__(f"Source node '{node}' is not in the graph.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class MalformedGraph(PathCountError, ValueError):
    """The graph violates an engine precondition.

    Raised for a negative or NaN edge weight met during relaxation, or for an
    edge leading to a node outside the graph's node set.
    """

    def __init__(
        self, message: str, src: NodeID, dst: NodeID, weight: Any = None
    ) -> None:
        self.src = src
        self.dst = dst
        self.weight = weight
        super().__init__(message)
