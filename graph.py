"""
Directed, weighted graph abstraction for the shortest-path engine.

Vertices are hashable, mutually orderable values (ints, strings, ...).
Edges are directed: v -> w with a non-negative float weight.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Iterable, Mapping


Vertex = Hashable


class EdgeNotFoundError(KeyError):
    """Raised when the weight of a non-existent edge is requested."""

    def __init__(self, v: Vertex, w: Vertex) -> None:
        super().__init__((v, w))
        self.v = v
        self.w = w

    def __str__(self) -> str:
        return f"no edge {self.v!r} -> {self.w!r}"


class Graph(ABC):
    """Directed, weighted graph over hashable vertices."""

    @abstractmethod
    def nodes(self) -> Iterable[Vertex]:
        """Return all vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: Vertex) -> Mapping[Vertex, float]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: dict[Vertex, float]
        """
        raise NotImplementedError

    @abstractmethod
    def successors(self, node: Vertex) -> Iterable[Vertex]:
        """Vertices w with an edge node -> w."""
        raise NotImplementedError

    @abstractmethod
    def predecessors(self, node: Vertex) -> Iterable[Vertex]:
        """Vertices v with an edge v -> node."""
        raise NotImplementedError

    @abstractmethod
    def contains_vertex(self, node: Vertex) -> bool:
        raise NotImplementedError

    @abstractmethod
    def contains_edge(self, v: Vertex, w: Vertex) -> bool:
        raise NotImplementedError

    @abstractmethod
    def weight(self, v: Vertex, w: Vertex) -> float:
        """
        Weight of edge v -> w.

        Raises:
            EdgeNotFoundError: if the edge does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def in_degree(self, node: Vertex) -> int:
        raise NotImplementedError

    @abstractmethod
    def out_degree(self, node: Vertex) -> int:
        raise NotImplementedError

    @abstractmethod
    def number_of_vertices(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def number_of_edges(self) -> int:
        raise NotImplementedError
