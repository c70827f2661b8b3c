"""Graph capability consumed by the shortest-path engine.

This package provides the read-only `WeightedGraph` protocol, the
`NxWeightedGraph` adapter over NetworkX directed graphs, and construction
helpers in `convert`.
"""

from pathcount.graph.base import AttrDict, NodeID, WeightedGraph
from pathcount.graph.convert import from_edges, to_networkx
from pathcount.graph.nx_adapter import NxWeightedGraph

__all__ = [
    "AttrDict",
    "NodeID",
    "WeightedGraph",
    "NxWeightedGraph",
    "from_edges",
    "to_networkx",
]
