"""
Concrete directed, weighted graph implementation.

Implements the Graph interface with a pair of adjacency maps: one for
successors and one for predecessors, kept mutually consistent on every
mutation.
"""

from typing import Dict, Iterator, List, Mapping, Tuple
import math

from graph import EdgeNotFoundError, Graph, Vertex


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by vertex -> (neighbour -> weight) maps.

    Enumerations (nodes, successors, predecessors) are returned in sorted
    vertex order, so vertices must be mutually comparable.
    """

    def __init__(self) -> None:
        self._succ: Dict[Vertex, Dict[Vertex, float]] = {}
        self._pred: Dict[Vertex, Dict[Vertex, float]] = {}
        self._edge_count = 0

    # --- Mutation API (not part of Graph interface) --------------------------

    def add_vertex(self, node: Vertex) -> bool:
        """Ensure node exists. Returns False if it was already present."""
        if node in self._succ:
            return False
        self._succ[node] = {}
        self._pred[node] = {}
        return True

    def add_edge(self, src: Vertex, dst: Vertex, weight: float = 1.0) -> bool:
        """
        Add or update a directed edge src -> dst with weight.

        Auto-adds vertices if they don't exist. Returns True if a new edge was
        created, False if an existing edge had its weight overwritten.
        """
        weight = float(weight)
        if not 0.0 <= weight < math.inf:
            raise ValueError(f"edge weight must be finite and non-negative, got {weight}")

        self.add_vertex(src)
        self.add_vertex(dst)
        is_new = dst not in self._succ[src]
        self._succ[src][dst] = weight
        self._pred[dst][src] = weight
        if is_new:
            self._edge_count += 1
        return is_new

    def invert(self) -> "AdjacencyListGraph":
        """Return a new graph with every edge reversed (isolated vertices kept)."""
        inverted = AdjacencyListGraph()
        for node in self.nodes():
            inverted.add_vertex(node)
        for src, dst, weight in self.edges():
            inverted.add_edge(dst, src, weight)
        return inverted

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> List[Vertex]:
        return sorted(self._succ)

    def outgoing(self, node: Vertex) -> Mapping[Vertex, float]:
        return dict(self._succ.get(node, {}))  # defensive copy

    def successors(self, node: Vertex) -> List[Vertex]:
        return sorted(self._succ[node])

    def predecessors(self, node: Vertex) -> List[Vertex]:
        return sorted(self._pred[node])

    def contains_vertex(self, node: Vertex) -> bool:
        return node in self._succ

    def contains_edge(self, v: Vertex, w: Vertex) -> bool:
        return w in self._succ.get(v, {})

    def weight(self, v: Vertex, w: Vertex) -> float:
        try:
            return self._succ[v][w]
        except KeyError:
            raise EdgeNotFoundError(v, w) from None

    def in_degree(self, node: Vertex) -> int:
        return len(self._pred[node])

    def out_degree(self, node: Vertex) -> int:
        return len(self._succ[node])

    def number_of_vertices(self) -> int:
        return len(self._succ)

    def number_of_edges(self) -> int:
        return self._edge_count

    # --- Convenience ---------------------------------------------------------

    def edges(self) -> Iterator[Tuple[Vertex, Vertex, float]]:
        """Yield (src, dst, weight) for every edge, sorted by src then dst."""
        for src in self.nodes():
            for dst in sorted(self._succ[src]):
                yield src, dst, self._succ[src][dst]

    def __contains__(self, node: object) -> bool:
        return node in self._succ

    def __len__(self) -> int:
        return len(self._succ)

    def __str__(self) -> str:
        # One line per edge: "1 => 2 weight = 1.0"
        return "".join(f"{src} => {dst} weight = {weight}\n" for src, dst, weight in self.edges())
