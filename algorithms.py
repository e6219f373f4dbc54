"""
Algorithm interfaces for shortest-path search.

Keeps the search engine contract separate from the graph and priority-queue
implementations, plus the pluggable pieces an engine is parameterised with:
the heuristic and the search observer.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List

from graph import Vertex


# Estimated remaining cost between two vertices. Must be non-negative; for A*
# to return optimal paths it must also be admissible and consistent.
Heuristic = Callable[[Vertex, Vertex], float]


class NoPathComputedError(ValueError):
    """Raised when a path or distance is requested without a successful search."""


class SearchStatus(Enum):
    """
    Lifecycle of one search invocation.

    IDLE: no search has been run on this engine yet.
    INITIALIZED: search state reset, source queued.
    EXPLORING: main loop is settling frontier vertices.
    SUCCESS: goal settled; path and distance are available.
    EXHAUSTED: frontier emptied without reaching the goal.
    """

    IDLE = "idle"
    INITIALIZED = "initialized"
    EXPLORING = "exploring"
    SUCCESS = "success"
    EXHAUSTED = "exhausted"


class SearchObserver(ABC):
    """
    Passive hook for animating or tracing a search.

    Implementations must not touch the search state and must return
    promptly; the engine blocks on every call.
    """

    @abstractmethod
    def visit_vertex(self, v: Vertex) -> None:
        """Called when v is settled (extracted from the frontier)."""
        raise NotImplementedError

    @abstractmethod
    def traverse_edge(self, v: Vertex, w: Vertex) -> None:
        """Called for every edge v -> w examined while relaxing v."""
        raise NotImplementedError


class NullObserver(SearchObserver):
    """Observer that ignores every event."""

    def visit_vertex(self, v: Vertex) -> None:
        pass

    def traverse_edge(self, v: Vertex, w: Vertex) -> None:
        pass


class ShortestPathEngine(ABC):
    """
    Interface for single-pair shortest-path search.
    """

    @abstractmethod
    def search(self, source: Vertex, goal: Vertex) -> None:
        """
        Search for a shortest path from source to goal.

        Replaces the state left by any earlier search.
        """
        raise NotImplementedError

    @abstractmethod
    def get_path(self) -> List[Vertex]:
        """
        Shortest path of the latest search, source and goal inclusive.

        Raises:
            NoPathComputedError: if the latest search did not reach the goal.
        """
        raise NotImplementedError

    @abstractmethod
    def get_distance(self) -> float:
        """
        Total weight of the path returned by get_path().

        Raises:
            NoPathComputedError: if the latest search did not reach the goal.
        """
        raise NotImplementedError
