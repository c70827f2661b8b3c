"""Per-node shortest-path state.

A ``PathState`` holds what one single-source run knows about a node: its
distance from the source, how many distinct shortest paths reach it, and which
nodes immediately precede it on those paths. The engine creates one record per
node for every run and mutates it only through the methods below.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Set

from pathcount.algorithms.base import INF_DISTANCE
from pathcount.graph.base import NodeID


@dataclass
class PathState:
    """Shortest-path record for a single node.

    Attributes:
        node: Node this record describes.
        distance: Shortest known distance from the source. Never increases.
        shortest_path_count: Number of distinct shortest paths from the source.
            Meaningful only while ``distance`` is finite.
        predecessors: Immediate predecessors on some shortest path.
    """

    node: NodeID
    distance: float = INF_DISTANCE
    shortest_path_count: int = 0
    predecessors: Set[NodeID] = field(default_factory=set)

    @property
    def is_reachable(self) -> bool:
        """True once a finite distance has been recorded."""
        return self.distance != INF_DISTANCE

    def mark_as_source(self) -> None:
        """Initialize this record as the source of the run."""
        self.distance = 0.0
        self.shortest_path_count = 1

    def record_shorter_path(
        self, predecessor: PathState, new_distance: float
    ) -> None:
        """Replace the best path with a strictly shorter one via ``predecessor``."""
        self.distance = new_distance
        self.predecessors = {predecessor.node}
        self.shortest_path_count = predecessor.shortest_path_count

    def record_tied_path(self, predecessor: PathState) -> None:
        """Add the paths via ``predecessor``, whose length ties the current best."""
        self.predecessors.add(predecessor.node)
        self.shortest_path_count += predecessor.shortest_path_count

    def add_paths(self, added: int) -> None:
        """Add ``added`` paths arriving through predecessors already recorded."""
        self.shortest_path_count += added

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dictionary.

        Infinite distances become ``None``; predecessors are sorted by their
        string form so output is stable for mixed-type node IDs.
        """
        return {
            "distance": self.distance if math.isfinite(self.distance) else None,
            "shortest_path_count": self.shortest_path_count,
            "predecessors": sorted(self.predecessors, key=str),
        }
