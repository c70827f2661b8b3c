from __future__ import annotations

from typing import Iterator, List, Mapping, Tuple

from pathcount.algorithms.path_state import PathState
from pathcount.graph.base import NodeID

#: Node sequence from the source to a destination.
NodePath = Tuple[NodeID, ...]


def resolve_to_paths(
    tree: Mapping[NodeID, PathState],
    src_node: NodeID,
    dst_node: NodeID,
) -> Iterator[NodePath]:
    """
    Enumerate all shortest src->dst node paths from predecessor sets.

    Walks predecessors backwards from ``dst_node`` with an explicit stack.
    Parallel edges collapse into one node path, so on multigraphs fewer paths
    may be yielded than ``shortest_path_count``.

    Args:
        tree: Records from one run, e.g. a ``ShortestPathTree``.
        src_node: Source node of that run.
        dst_node: Destination node.

    Yields:
        Node tuples starting at ``src_node`` and ending at ``dst_node``.

    Raises:
        KeyError: If ``dst_node`` has no record.
    """
    dst_state = tree[dst_node]
    if dst_node == src_node:
        yield (src_node,)
        return
    if not dst_state.is_reachable:
        return

    seen = {dst_node}
    # Each frame: [node, predecessors of node in a fixed order, next index]
    stack: List[list] = [[dst_node, list(dst_state.predecessors), 0]]

    while stack:
        frame = stack[-1]
        current_node, preds, idx = frame

        if current_node == src_node:
            yield tuple(f[0] for f in reversed(stack))
            seen.discard(current_node)
            stack.pop()
            continue

        if idx < len(preds):
            frame[2] = idx + 1
            next_pred = preds[idx]
            if next_pred in seen:
                # cycle through zero-weight edges, skip
                continue
            seen.add(next_pred)
            stack.append([next_pred, list(tree[next_pred].predecessors), 0])
        else:
            # backtrack
            seen.discard(current_node)
            stack.pop()
