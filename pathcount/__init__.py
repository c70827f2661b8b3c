"""pathcount: single-source shortest paths with path counts.

For every node reachable from a source, pathcount computes the shortest
distance, the number of distinct shortest paths and the set of immediate
predecessors on those paths. This is the per-source step of Brandes-style
betweenness centrality.

Primary API:
    shortest_path_counts() - One-off computation from a source node
    ShortestPathEngine - Reusable engine with a fixed tolerance
    ShortestPathTree, PathState - Result types
    NxWeightedGraph, from_edges() - Graph inputs backed by NetworkX

Example:
    from pathcount import from_edges, shortest_path_counts

    graph = from_edges([("A", "B", 1), ("A", "C", 2), ("B", "C", 1)])
    tree = shortest_path_counts(graph, "A")
    tree["C"].shortest_path_count  # 2
"""

from __future__ import annotations

from pathcount import logging
from pathcount._version import __version__
from pathcount.algorithms.errors import InvalidStartNode, MalformedGraph, PathCountError
from pathcount.algorithms.path_state import PathState
from pathcount.algorithms.paths import resolve_to_paths
from pathcount.algorithms.spf import (
    ShortestPathEngine,
    ShortestPathTree,
    shortest_path_counts,
)
from pathcount.config import ENGINE_CONFIG, EngineConfig
from pathcount.graph import NxWeightedGraph, WeightedGraph, from_edges, to_networkx

__all__ = [
    # Version
    "__version__",
    # Computation
    "shortest_path_counts",
    "ShortestPathEngine",
    "ShortestPathTree",
    "PathState",
    "resolve_to_paths",
    # Graph
    "WeightedGraph",
    "NxWeightedGraph",
    "from_edges",
    "to_networkx",
    # Errors
    "PathCountError",
    "InvalidStartNode",
    "MalformedGraph",
    # Configuration
    "EngineConfig",
    "ENGINE_CONFIG",
    # Utilities
    "logging",
]
