"""Read-only weighted directed graph protocol."""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, Protocol, Tuple, runtime_checkable

NodeID = Hashable
AttrDict = Dict[str, Any]

#: One outgoing edge as ``(destination, weight)``.
OutEdge = Tuple[NodeID, float]


@runtime_checkable
class WeightedGraph(Protocol):
    """Contract the engine needs from a graph.

    Implementations must be safe to read concurrently and must not change
    while a computation is running. Weights are expected to be non-negative.
    """

    def __contains__(self, node: object) -> bool:
        """Return True if ``node`` is part of the node set."""
        ...

    def nodes(self) -> Iterable[NodeID]:
        """Iterate over every node identifier."""
        ...

    def out_edges(self, node: NodeID) -> Iterable[OutEdge]:
        """Iterate over ``(destination, weight)`` for each edge leaving ``node``.

        Parallel edges are reported one by one.
        """
        ...
