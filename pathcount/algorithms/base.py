from __future__ import annotations

from typing import Union

#: Represents a numeric path length (sum of edge weights).
Cost = Union[int, float]

#: Distance of a node not (yet) reached from the source.
INF_DISTANCE: float = float("inf")
