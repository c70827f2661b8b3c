"""Adapter exposing a NetworkX directed graph as a `WeightedGraph`."""

from __future__ import annotations

from typing import Iterator, Optional

import networkx as nx

from pathcount.config import (
    ENGINE_CONFIG,
    validate_default_weight,
    validate_weight_attr,
)
from pathcount.graph.base import NodeID, OutEdge


class NxWeightedGraph:
    """Read-only view of a ``networkx.DiGraph`` or ``networkx.MultiDiGraph``.

    Edge weights are read from ``weight`` on every call to ``out_edges``, so
    the view reflects the wrapped graph; callers must not mutate it while a
    computation runs. In a multigraph each parallel edge is yielded
    separately and therefore counts as a distinct path step.

    Args:
        nx_graph: Directed NetworkX graph to wrap.
        weight: Edge attribute holding the weight. Defaults to
            ``ENGINE_CONFIG.weight_attr``.
        default_weight: Weight for edges without ``weight``. Defaults to
            ``ENGINE_CONFIG.default_weight``.

    Raises:
        TypeError: If ``nx_graph`` is not a directed NetworkX graph.
        ValueError: If ``weight`` or ``default_weight`` (explicit or taken from
            ``ENGINE_CONFIG``) is invalid.
    """

    def __init__(
        self,
        nx_graph: nx.DiGraph,
        weight: Optional[str] = None,
        default_weight: Optional[float] = None,
    ) -> None:
        if not isinstance(nx_graph, nx.Graph) or not nx_graph.is_directed():
            raise TypeError(
                f"Expected a directed NetworkX graph, got {type(nx_graph).__name__}."
            )
        if weight is None or default_weight is None:
            ENGINE_CONFIG.validate()
        self._graph = nx_graph
        self.weight = validate_weight_attr(
            ENGINE_CONFIG.weight_attr if weight is None else weight
        )
        self.default_weight = validate_default_weight(
            ENGINE_CONFIG.default_weight if default_weight is None else default_weight
        )

    @property
    def nx_graph(self) -> nx.DiGraph:
        """The wrapped NetworkX graph."""
        return self._graph

    def __contains__(self, node: object) -> bool:
        return node in self._graph

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def nodes(self) -> Iterator[NodeID]:
        return iter(self._graph.nodes)

    def out_edges(self, node: NodeID) -> Iterator[OutEdge]:
        weight = self.weight
        default_weight = self.default_weight
        if self._graph.is_multigraph():
            for _, dst, attr in self._graph.out_edges(node, data=True):
                yield dst, attr.get(weight, default_weight)
        else:
            for dst, attr in self._graph.succ[node].items():
                yield dst, attr.get(weight, default_weight)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self._graph.number_of_nodes()}, "
            f"edges={self._graph.number_of_edges()}, weight={self.weight!r})"
        )
