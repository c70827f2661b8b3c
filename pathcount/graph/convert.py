"""Helpers for building engine-ready graphs.

Edges never create nodes implicitly when an explicit node list is given,
matching the strict node management of NetworkX-backed graphs elsewhere in
the package.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

import networkx as nx

from pathcount.config import ENGINE_CONFIG
from pathcount.graph.base import NodeID
from pathcount.graph.nx_adapter import NxWeightedGraph

EdgeSpec = Tuple[NodeID, NodeID, float]


def from_edges(
    edges: Iterable[EdgeSpec],
    nodes: Optional[Iterable[NodeID]] = None,
    weight: Optional[str] = None,
) -> NxWeightedGraph:
    """Build a weighted directed multigraph from ``(src, dst, weight)`` triples.

    Args:
        edges: Edge triples. Repeated ``(src, dst)`` pairs become parallel edges.
        nodes: Optional explicit node set. When given, it may contain isolated
            nodes and every edge endpoint must belong to it. When omitted, the
            node set is the set of edge endpoints.
        weight: Attribute name used to store weights. Defaults to
            ``ENGINE_CONFIG.weight_attr``.

    Returns:
        NxWeightedGraph wrapping a new ``networkx.MultiDiGraph``.

    Raises:
        ValueError: If an edge references a node missing from ``nodes``.
    """
    weight_attr = ENGINE_CONFIG.weight_attr if weight is None else weight
    graph = nx.MultiDiGraph()
    strict = nodes is not None
    if strict:
        graph.add_nodes_from(nodes)

    for src, dst, edge_weight in edges:
        if strict:
            if src not in graph:
                raise ValueError(f"Source node '{src}' does not exist.")
            if dst not in graph:
                raise ValueError(f"Target node '{dst}' does not exist.")
        graph.add_edge(src, dst, **{weight_attr: edge_weight})

    return NxWeightedGraph(graph, weight=weight_attr)


def to_networkx(graph: Union[NxWeightedGraph, nx.DiGraph]) -> nx.DiGraph:
    """Return the NetworkX graph behind ``graph``.

    Args:
        graph: An ``NxWeightedGraph`` or a directed NetworkX graph.

    Returns:
        The underlying NetworkX graph (not a copy).

    Raises:
        TypeError: If ``graph`` is neither.
    """
    if isinstance(graph, NxWeightedGraph):
        return graph.nx_graph
    if isinstance(graph, nx.Graph) and graph.is_directed():
        return graph
    raise TypeError(f"Cannot convert {type(graph).__name__} to a NetworkX graph.")
