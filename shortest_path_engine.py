"""
Single-pair shortest-path engine (Dijkstra / A*) over an indexed min-heap.

Without a heuristic the engine runs Dijkstra; with one it runs A* and
orders the frontier by g(v) + h(v, goal). The frontier is an IndexMinPQ,
so improving a queued vertex is a decrease-key rather than a duplicate
push.

Both modes stop as soon as the goal is settled (extracted from the
frontier), before its outgoing edges are relaxed.
"""

from typing import Dict, List, Optional, Tuple
import math

from algorithms import (
    Heuristic,
    NoPathComputedError,
    NullObserver,
    SearchObserver,
    SearchStatus,
    ShortestPathEngine,
)
from graph import Graph, Vertex
from index_min_pq import IndexMinPQ


class ShortestPath(ShortestPathEngine):
    """
    Dijkstra / A* search using an indexed binary heap.

    Complexity:
        O((V + E) log V) per search; initialisation touches every vertex.

    One instance owns its distance/predecessor maps and its frontier; it is
    not re-entrant and must not be shared between concurrent searches.
    """

    def __init__(
        self,
        graph: Graph,
        heuristic: Optional[Heuristic] = None,
        observer: Optional[SearchObserver] = None,
    ) -> None:
        self._graph = graph
        self._heuristic = heuristic
        self._observer: SearchObserver = observer if observer is not None else NullObserver()

        self._dist: Dict[Vertex, float] = {}
        self._pred: Dict[Vertex, Optional[Vertex]] = {}
        self._cand: IndexMinPQ[Vertex, float] = IndexMinPQ()
        self._source: Optional[Vertex] = None
        self._goal: Optional[Vertex] = None
        self._status = SearchStatus.IDLE
        self._searching = False

        # Instrumentation counters per invocation.
        self.last_settled = 0
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pushes = 0
        self.last_decrease_keys = 0

    @property
    def mode(self) -> str:
        return "dijkstra" if self._heuristic is None else "astar"

    @property
    def status(self) -> SearchStatus:
        return self._status

    def set_observer(self, observer: Optional[SearchObserver]) -> None:
        """Attach an observer for subsequent searches (None detaches)."""
        self._observer = observer if observer is not None else NullObserver()

    # --- ShortestPathEngine interface ----------------------------------------

    def search(self, source: Vertex, goal: Vertex) -> None:
        """
        Search a shortest path from source to goal.

        Afterwards status is SUCCESS or EXHAUSTED. An unknown source or goal
        raises ValueError and drops the result of any earlier search. Errors
        raised by the graph (e.g. EdgeNotFoundError) propagate and leave the
        engine without a usable result.
        """
        if self._searching:
            raise RuntimeError("search() is not re-entrant")
        self._status = SearchStatus.IDLE
        for v in (source, goal):
            if not self._graph.contains_vertex(v):
                raise ValueError(f"vertex {v!r} is not in the graph")

        self._searching = True
        try:
            self._initialise(source, goal)
            self._status = self._explore(goal)
        finally:
            self._searching = False

    def get_path(self) -> List[Vertex]:
        self._require_success()
        path: List[Vertex] = []
        current: Optional[Vertex] = self._goal
        while True:
            path.append(current)
            if current == self._source:
                break
            current = self._pred[current]
        path.reverse()
        return path

    def get_distance(self) -> float:
        self._require_success()
        return self._dist[self._goal]

    # --- Search internals ----------------------------------------------------

    def _initialise(self, source: Vertex, goal: Vertex) -> None:
        self.last_settled = 0
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pushes = 0
        self.last_decrease_keys = 0

        self._source = source
        self._goal = goal
        self._cand.clear()
        self._dist = {v: math.inf for v in self._graph.nodes()}
        self._pred = {v: None for v in self._dist}

        self._dist[source] = 0.0
        self._cand.add(source, self._priority(source, 0.0, goal))
        self.last_heap_pushes += 1
        self._status = SearchStatus.INITIALIZED

    def _explore(self, goal: Vertex) -> SearchStatus:
        self._status = SearchStatus.EXPLORING
        graph = self._graph
        dist = self._dist
        pred = self._pred
        cand = self._cand

        while not cand.is_empty():
            v = cand.remove_min()
            self.last_settled += 1
            self._observer.visit_vertex(v)

            if v == goal:
                return SearchStatus.SUCCESS

            d_v = dist[v]
            for w in graph.successors(v):
                self.last_edges_examined += 1
                self._observer.traverse_edge(v, w)
                alt = d_v + graph.weight(v, w)

                if dist[w] == math.inf:
                    pred[w] = v
                    dist[w] = alt
                    cand.add(w, self._priority(w, alt, goal))
                    self.last_heap_pushes += 1
                    self.last_relaxed += 1
                elif alt < dist[w]:
                    pred[w] = v
                    dist[w] = alt
                    prio = self._priority(w, alt, goal)
                    if cand.change(w, prio) is None:
                        # w was already settled; only an inconsistent heuristic gets here.
                        cand.add(w, prio)
                        self.last_heap_pushes += 1
                    else:
                        self.last_decrease_keys += 1
                    self.last_relaxed += 1

        return SearchStatus.EXHAUSTED

    def _priority(self, v: Vertex, g: float, goal: Vertex) -> float:
        if self._heuristic is None:
            return g
        return g + self._heuristic(v, goal)

    def _require_success(self) -> None:
        if self._status is not SearchStatus.SUCCESS:
            raise NoPathComputedError(
                f"no shortest path available (last search status: {self._status.value})"
            )


def shortest_path(
    graph: Graph,
    source: Vertex,
    goal: Vertex,
    heuristic: Optional[Heuristic] = None,
) -> Tuple[List[Vertex], float]:
    """
    One-shot search returning (path, distance), or ([], inf) if goal is unreachable.
    """
    engine = ShortestPath(graph, heuristic)
    engine.search(source, goal)
    if engine.status is not SearchStatus.SUCCESS:
        return [], math.inf
    return engine.get_path(), engine.get_distance()
