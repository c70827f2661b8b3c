"""Shortest-path-first (SPF) with shortest-path counting.

Implements a Dijkstra variant that, besides distances, records for every node
the number of distinct shortest paths from the source and the set of
immediate predecessors on those paths. This is the per-source step of
Brandes-style betweenness centrality.

Notes:
    Path lengths are compared with an explicit tolerance. A candidate length
    strictly improves a node only when it is shorter by more than the
    tolerance; a candidate within the tolerance is a tie and adds paths.

    ``heapq`` has no decrease-key. An improved node is pushed again and the
    older entry stays in the heap. The first extraction of a node settles it;
    later extractions of a settled node are skipped.

    Edge weights must be non-negative. With ``check_weights`` enabled a
    negative or NaN weight met during relaxation raises ``MalformedGraph``;
    with it disabled such graphs give undefined results.
"""

from __future__ import annotations

import logging
from heapq import heappop, heappush
from itertools import count
from time import perf_counter
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Tuple, Union

import networkx as nx

from pathcount.algorithms.base import Cost
from pathcount.algorithms.errors import InvalidStartNode, MalformedGraph
from pathcount.algorithms.path_state import PathState
from pathcount.algorithms.paths import NodePath, resolve_to_paths
from pathcount.config import ENGINE_CONFIG, validate_tolerance
from pathcount.graph.base import NodeID, WeightedGraph
from pathcount.graph.nx_adapter import NxWeightedGraph
from pathcount.logging import get_logger

logger = get_logger(__name__)


class ShortestPathTree(Mapping[NodeID, PathState]):
    """Result of one single-source run: a read-only ``node -> PathState`` mapping.

    Every node of the graph has a record; unreachable nodes keep an infinite
    distance, a zero count and no predecessors.

    Attributes:
        source: Start node of the run.
        tolerance: Tie tolerance used by the run.
        settled: Reachable nodes in the order they were settled. Distances are
            non-decreasing along this tuple and it starts with ``source``.
    """

    def __init__(
        self,
        source: NodeID,
        records: Dict[NodeID, PathState],
        settled: Tuple[NodeID, ...],
        tolerance: float,
    ) -> None:
        self.source = source
        self.settled = settled
        self.tolerance = tolerance
        self._records = records

    def __getitem__(self, node: NodeID) -> PathState:
        return self._records[node]

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def reachable(self) -> List[NodeID]:
        """Nodes with a finite distance from the source."""
        return [node for node, state in self._records.items() if state.is_reachable]

    def distances(self) -> Dict[NodeID, Cost]:
        return {node: state.distance for node, state in self._records.items()}

    def counts(self) -> Dict[NodeID, int]:
        return {
            node: state.shortest_path_count for node, state in self._records.items()
        }

    def predecessors(self) -> Dict[NodeID, Set[NodeID]]:
        return {node: set(state.predecessors) for node, state in self._records.items()}

    def paths_to(self, dst_node: NodeID) -> Iterator[NodePath]:
        """Yield every shortest path from ``source`` to ``dst_node`` as a node tuple."""
        return resolve_to_paths(self, self.source, dst_node)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dictionary of the run.

        Node IDs become dictionary keys as they are; callers with non-string
        node IDs must convert them before JSON encoding.
        """
        return {
            "source": self.source,
            "tolerance": self.tolerance,
            "settled": list(self.settled),
            "nodes": {node: state.to_dict() for node, state in self._records.items()},
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source={self.source!r}, "
            f"nodes={len(self._records)}, reachable={len(self.settled)})"
        )


class ShortestPathEngine:
    """Single-source shortest paths with path counts and predecessor sets.

    The engine only holds configuration. Each ``compute`` call builds and owns
    a fresh set of records, so one engine can serve many sources, including
    from several threads at once, as long as the graph is not mutated.

    Args:
        tolerance: Two path lengths closer than or equal to this value are
            equal. Defaults to ``ENGINE_CONFIG.tolerance``.
        check_weights: Raise ``MalformedGraph`` on negative or NaN weights.
            Defaults to ``ENGINE_CONFIG.check_weights``.

    Raises:
        ValueError: If ``tolerance`` is negative or not finite, or if a
            default is taken from an invalid ``ENGINE_CONFIG``.
    """

    def __init__(
        self,
        tolerance: Optional[float] = None,
        check_weights: Optional[bool] = None,
    ) -> None:
        if tolerance is None or check_weights is None:
            ENGINE_CONFIG.validate()
        self.tolerance = validate_tolerance(
            ENGINE_CONFIG.tolerance if tolerance is None else tolerance
        )
        self.check_weights = (
            ENGINE_CONFIG.check_weights if check_weights is None else check_weights
        )

    def compute(self, graph: WeightedGraph, start_node: NodeID) -> ShortestPathTree:
        """Run the search from ``start_node``.

        Args:
            graph: Read-only weighted directed graph with non-negative weights.
            start_node: Source node.

        Returns:
            ShortestPathTree with one record per node of ``graph``.

        Raises:
            InvalidStartNode: If ``start_node`` is not in ``graph``.
            MalformedGraph: If relaxation meets a negative or NaN weight (with
                ``check_weights``) or an edge to a node outside the graph.
        """
        if start_node not in graph:
            logger.debug("Rejecting unknown source node %r", start_node)
            raise InvalidStartNode(start_node)

        started_at = perf_counter()
        records: Dict[NodeID, PathState] = {
            node: PathState(node) for node in graph.nodes()
        }
        records[start_node].mark_as_source()
        logger.debug(
            "SPF from %r over %d nodes (tolerance=%g)",
            start_node,
            len(records),
            self.tolerance,
        )

        settled = self._run(graph, records, start_node)

        logger.debug(
            "SPF from %r settled %d/%d nodes in %.6fs",
            start_node,
            len(settled),
            len(records),
            perf_counter() - started_at,
        )
        return ShortestPathTree(start_node, records, tuple(settled), self.tolerance)

    def _run(
        self,
        graph: WeightedGraph,
        records: Dict[NodeID, PathState],
        start_node: NodeID,
    ) -> List[NodeID]:
        """Main loop. Returns reachable nodes in settle order."""
        check_weights = self.check_weights
        trace = logger.isEnabledFor(logging.DEBUG)

        # Entries are (distance, sequence, node); the sequence keeps pops FIFO
        # among equal distances and avoids comparing node IDs.
        sequence = count()
        min_pq: List[Tuple[float, int, NodeID]] = [(0.0, next(sequence), start_node)]
        settled: List[NodeID] = []
        settled_set: Set[NodeID] = set()

        while min_pq:
            _, _, node_id = heappop(min_pq)
            if node_id in settled_set:
                # Stale entry left behind by a later improvement
                continue
            settled_set.add(node_id)
            settled.append(node_id)

            node_state = records[node_id]
            if trace:
                logger.debug(
                    "Settled %r at distance %s with %d shortest path(s)",
                    node_id,
                    node_state.distance,
                    node_state.shortest_path_count,
                )

            for neighbor_id, weight in graph.out_edges(node_id):
                if check_weights and not weight >= 0:
                    logger.debug(
                        "Invalid weight %r on edge %r -> %r",
                        weight,
                        node_id,
                        neighbor_id,
                    )
                    raise MalformedGraph(
                        f"Edge '{node_id}' -> '{neighbor_id}' has invalid weight "
                        f"{weight!r}; weights must be non-negative.",
                        node_id,
                        neighbor_id,
                        weight,
                    )
                if neighbor_id == node_id or neighbor_id == start_node:
                    # No shortest path revisits its own node or the source
                    continue

                neighbor_state = records.get(neighbor_id)
                if neighbor_state is None:
                    raise MalformedGraph(
                        f"Edge '{node_id}' -> '{neighbor_id}' leads outside the graph.",
                        node_id,
                        neighbor_id,
                        weight,
                    )

                candidate = node_state.distance + weight
                if neighbor_state.distance - candidate > self.tolerance:
                    neighbor_state.record_shorter_path(node_state, candidate)
                    heappush(min_pq, (candidate, next(sequence), neighbor_id))
                elif abs(candidate - neighbor_state.distance) <= self.tolerance:
                    # Distance unchanged, so the queue needs no new entry
                    if neighbor_id in settled_set:
                        self._record_late_tie(
                            graph, records, settled_set, node_state, neighbor_state
                        )
                    else:
                        neighbor_state.record_tied_path(node_state)

        return settled

    def _record_late_tie(
        self,
        graph: WeightedGraph,
        records: Dict[NodeID, PathState],
        settled_set: Set[NodeID],
        node_state: PathState,
        neighbor_state: PathState,
    ) -> None:
        """Record a tie into a node that was already settled and relaxed.

        Only edges of weight within the tolerance get here. The tie is dropped
        when ``neighbor_state`` already precedes ``node_state``, since every
        such path would visit the neighbor twice. Otherwise the added paths
        are pushed on to every node that counted the neighbor's old total.
        """
        if _precedes(records, neighbor_state.node, node_state.node):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Ignoring tie %r -> %r that closes a zero-length cycle",
                    node_state.node,
                    neighbor_state.node,
                )
            return

        neighbor_state.record_tied_path(node_state)

        stack = [(neighbor_state, node_state.shortest_path_count)]
        while stack:
            state, added = stack.pop()
            for succ_id, weight in graph.out_edges(state.node):
                succ_state = records.get(succ_id)
                if succ_state is None or state.node not in succ_state.predecessors:
                    continue
                if abs(state.distance + weight - succ_state.distance) > self.tolerance:
                    continue
                succ_state.add_paths(added)
                if succ_id in settled_set:
                    stack.append((succ_state, added))


def _precedes(
    records: Dict[NodeID, PathState], ancestor: NodeID, node_id: NodeID
) -> bool:
    """True if ``ancestor`` lies on some recorded shortest path to ``node_id``."""
    seen = {node_id}
    stack = [node_id]
    while stack:
        for pred in records[stack.pop()].predecessors:
            if pred == ancestor:
                return True
            if pred not in seen:
                seen.add(pred)
                stack.append(pred)
    return False


def shortest_path_counts(
    graph: Union[WeightedGraph, nx.DiGraph],
    start_node: NodeID,
    tolerance: Optional[float] = None,
    check_weights: Optional[bool] = None,
) -> ShortestPathTree:
    """Compute distances, shortest-path counts and predecessors from ``start_node``.

    Args:
        graph: A ``WeightedGraph`` or a directed NetworkX graph. NetworkX
            graphs are wrapped with ``NxWeightedGraph`` using the configured
            weight attribute.
        start_node: Source node.
        tolerance: Tie tolerance; defaults to ``ENGINE_CONFIG.tolerance``.
        check_weights: Reject negative/NaN weights; defaults to
            ``ENGINE_CONFIG.check_weights``.

    Returns:
        ShortestPathTree for ``start_node``.

    Raises:
        InvalidStartNode: If ``start_node`` is not in ``graph``.
        MalformedGraph: See ``ShortestPathEngine.compute``.
    """
    if isinstance(graph, nx.Graph):
        graph = NxWeightedGraph(graph)
    engine = ShortestPathEngine(tolerance=tolerance, check_weights=check_weights)
    return engine.compute(graph, start_node)
