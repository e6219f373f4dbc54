"""
Utilities to generate planar test topologies with vertex coordinates.

Every edge weight is at least the Euclidean length of the edge, so
EuclideanHeuristic(coords) is admissible and consistent on these graphs.
"""

from typing import Dict, List, Tuple
import math
import random

from adjacency_list_graph import AdjacencyListGraph


Coords = Dict[int, Tuple[float, float]]


def build_grid_graph(rows: int, cols: int, spacing: float = 1.0) -> tuple[AdjacencyListGraph, Coords]:
    """
    Bidirectional 4-neighbour grid.

    Vertex r * cols + c sits at (c * spacing, r * spacing); every edge has
    weight spacing.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError("rows and cols must be positive")
    if spacing <= 0.0:
        raise ValueError("spacing must be positive")

    graph = AdjacencyListGraph()
    coords: Coords = {}
    for r in range(rows):
        for c in range(cols):
            v = r * cols + c
            coords[v] = (c * spacing, r * spacing)
            graph.add_vertex(v)

    for r in range(rows):
        for c in range(cols):
            v = r * cols + c
            if c + 1 < cols:
                graph.add_edge(v, v + 1, spacing)
                graph.add_edge(v + 1, v, spacing)
            if r + 1 < rows:
                graph.add_edge(v, v + cols, spacing)
                graph.add_edge(v + cols, v, spacing)
    return graph, coords


def build_geometric_graph(
    nodes: int,
    degree: int,
    seed: int | None = None,
    width: float = 100.0,
    height: float = 100.0,
) -> tuple[AdjacencyListGraph, Coords]:
    """
    Random points in a width x height box linked to their nearest neighbours.

    Args:
        nodes: number of vertices (ids 0..nodes-1).
        degree: number of nearest neighbours each vertex links to (bidirectional).
        seed: RNG seed for reproducibility.
        width, height: extent of the sampling box.
    """
    if nodes <= 0:
        raise ValueError("nodes must be positive")
    rng = random.Random(seed)

    graph = AdjacencyListGraph()
    coords: Coords = {}
    for v in range(nodes):
        coords[v] = (rng.uniform(0.0, width), rng.uniform(0.0, height))
        graph.add_vertex(v)

    _connect_nearest(graph, coords, degree)
    return graph, coords


def _connect_nearest(graph: AdjacencyListGraph, coords: Coords, degree: int) -> None:
    if degree <= 0:
        return

    for v, (vx, vy) in coords.items():
        distances: List[tuple[float, int]] = []
        for w, (wx, wy) in coords.items():
            if w == v:
                continue
            distances.append((math.hypot(vx - wx, vy - wy), w))

        distances.sort()
        for length, neighbor in distances[:degree]:
            graph.add_edge(v, neighbor, length)
            graph.add_edge(neighbor, v, length)
