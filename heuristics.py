"""
Heuristics for A* search.

A heuristic estimates the remaining cost between two vertices. The engine
does not check admissibility; an estimate that overshoots the true cost
silently yields suboptimal paths.
"""

from typing import Mapping, Tuple
import math

from graph import Vertex


def zero_heuristic(a: Vertex, b: Vertex) -> float:
    """Always 0. A* with this heuristic settles vertices exactly like Dijkstra."""
    return 0.0


class EuclideanHeuristic:
    """
    Scaled straight-line distance between vertex coordinates.

    Admissible (and consistent) whenever every edge weight is at least
    scale * the straight-line length of the edge. Scales above that bound
    trade optimality for fewer settled vertices.
    """

    def __init__(self, coords: Mapping[Vertex, Tuple[float, float]], scale: float = 1.0) -> None:
        if scale < 0.0:
            raise ValueError("scale must be non-negative")
        self._coords = coords
        self.scale = scale

    def __call__(self, a: Vertex, b: Vertex) -> float:
        ax, ay = self._coords[a]
        bx, by = self._coords[b]
        return self.scale * math.hypot(ax - bx, ay - by)
