"""
CLI to run shortest-path queries across topologies, seeds and search modes.

Reads experiments/queries.yml, builds each topology, runs every query with
Dijkstra and/or A*, and produces per-run rows plus per-mode aggregates.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple
import csv
import math
import time

from adjacency_list_graph import AdjacencyListGraph
from heuristics import EuclideanHeuristic
from shortest_path_engine import ShortestPath
from algorithms import SearchStatus
from topology_builder import Coords, build_geometric_graph, build_grid_graph


MODES = ("dijkstra", "astar")
TOPOLOGY_KINDS = ("grid", "geometric")


@dataclass(frozen=True)
class TopologyConfig:
    name: str
    kind: str
    rows: int = 0
    cols: int = 0
    spacing: float = 1.0
    nodes: int = 0
    degree: int = 0


@dataclass(frozen=True)
class QueryConfig:
    source: int
    goal: int


@dataclass(frozen=True)
class Config:
    seed: int
    seed_count: int
    modes: Sequence[str]
    heuristic_scale: float
    topologies: Sequence[TopologyConfig]
    queries: Sequence[QueryConfig]


def load_config(path: Path) -> Config:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text())
    topologies = [
        TopologyConfig(
            name=topo["name"],
            kind=topo["kind"],
            rows=int(topo.get("rows", 0)),
            cols=int(topo.get("cols", 0)),
            spacing=float(topo.get("spacing", 1.0)),
            nodes=int(topo.get("nodes", 0)),
            degree=int(topo.get("degree", 0)),
        )
        for topo in data["topologies"]
    ]
    for topo in topologies:
        if topo.kind not in TOPOLOGY_KINDS:
            raise ValueError(f"Unknown topology kind '{topo.kind}' in '{topo.name}'.")

    modes = list(data.get("modes", MODES))
    for mode in modes:
        if mode not in MODES:
            raise ValueError(f"Unknown search mode '{mode}'.")

    queries = [QueryConfig(source=int(q["source"]), goal=int(q["goal"])) for q in data.get("queries") or []]
    return Config(
        seed=int(data["seed"]),
        seed_count=int(data["seed_count"]),
        modes=modes,
        heuristic_scale=float(data.get("heuristic_scale", 1.0)),
        topologies=topologies,
        queries=queries,
    )


def build_topology(topo: TopologyConfig, seed: int) -> tuple[AdjacencyListGraph, Coords]:
    if topo.kind == "grid":
        return build_grid_graph(topo.rows, topo.cols, topo.spacing)
    return build_geometric_graph(topo.nodes, topo.degree, seed=seed)


def default_queries(graph: AdjacencyListGraph) -> List[QueryConfig]:
    """First vertex to last vertex (corner to corner on a grid)."""
    nodes = graph.nodes()
    return [QueryConfig(source=nodes[0], goal=nodes[-1])]


def run_queries(
    config_path: Path,
    results_csv: Path | None = None,
    aggregates_csv: Path | None = None,
) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()

    tasks: List[tuple[TopologyConfig, int]] = [
        (topo, cfg.seed + offset) for topo in cfg.topologies for offset in range(cfg.seed_count)
    ]
    print(f"[run] queued {len(tasks)} topology builds, modes={list(cfg.modes)}")

    results: List[Dict[str, object]] = []
    for topo, seed in tasks:
        graph, coords = build_topology(topo, seed)
        queries = list(cfg.queries) or default_queries(graph)
        for query in queries:
            try:
                rows = [
                    _run_single(topo, seed, mode, graph, coords, query, cfg.heuristic_scale)
                    for mode in cfg.modes
                ]
            except ValueError as exc:
                print(f"[run] failed topology={topo.name} seed={seed} {query.source}->{query.goal}: {exc}")
                continue
            _report_mismatch(rows)
            for res in rows:
                print(
                    f"[run] completed topology={topo.name} seed={seed} mode={res['mode']} "
                    f"{query.source}->{query.goal} distance={res['distance']} settled={res['settled']}"
                )
            results.extend(rows)

    if results_csv:
        write_results_csv(results, results_csv)
    if aggregates_csv:
        write_aggregates_csv(aggregate_by_mode(results), aggregates_csv)

    elapsed = time.time() - start
    print(f"[run] completed {len(results)} total runs in {elapsed:.2f}s")
    return results


def _run_single(
    topo: TopologyConfig,
    seed: int,
    mode: str,
    graph: AdjacencyListGraph,
    coords: Coords,
    query: QueryConfig,
    heuristic_scale: float,
) -> Dict[str, object]:
    heuristic = EuclideanHeuristic(coords, heuristic_scale) if mode == "astar" else None
    engine = ShortestPath(graph, heuristic)

    start_run = time.time()
    engine.search(query.source, query.goal)
    duration = time.time() - start_run

    reachable = engine.status is SearchStatus.SUCCESS
    return {
        "topology": topo.name,
        "seed": seed,
        "mode": mode,
        "source": query.source,
        "goal": query.goal,
        "reachable": reachable,
        "distance": engine.get_distance() if reachable else math.inf,
        "path_length": len(engine.get_path()) if reachable else 0,
        "settled": engine.last_settled,
        "edges_examined": engine.last_edges_examined,
        "duration_sec": duration,
    }


def _report_mismatch(rows: Sequence[Mapping[str, object]]) -> None:
    distances = {row["mode"]: float(row["distance"]) for row in rows}
    if len(distances) < 2:
        return
    if not math.isclose(distances["dijkstra"], distances["astar"], rel_tol=1e-9, abs_tol=1e-9):
        row = rows[0]
        print(
            f"[run] mismatch topology={row['topology']} seed={row['seed']} "
            f"{row['source']}->{row['goal']} dijkstra={distances['dijkstra']} astar={distances['astar']}"
        )


def aggregate_by_mode(results: Iterable[Mapping[str, object]]) -> List[Dict[str, object]]:
    """
    Aggregate metrics per (topology, mode), averaging across seeds and queries.
    """
    accum: Dict[Tuple[str, str], Dict[str, float]] = {}
    counts: Dict[Tuple[str, str], int] = {}

    for res in results:
        key = (str(res["topology"]), str(res["mode"]))
        counts[key] = counts.get(key, 0) + 1
        bucket = accum.setdefault(
            key, {"settled_sum": 0.0, "edges_sum": 0.0, "reachable_sum": 0.0, "duration_sum": 0.0}
        )
        bucket["settled_sum"] += float(res["settled"])
        bucket["edges_sum"] += float(res["edges_examined"])
        bucket["reachable_sum"] += 1.0 if res["reachable"] else 0.0
        bucket["duration_sum"] += float(res.get("duration_sec", 0.0))

    aggregated_rows: List[Dict[str, object]] = []
    for (topology, mode), sums in accum.items():
        n = counts[(topology, mode)]
        aggregated_rows.append(
            {
                "topology": topology,
                "mode": mode,
                "runs": float(n),
                "avg_settled": sums["settled_sum"] / n,
                "avg_edges_examined": sums["edges_sum"] / n,
                "reachable_ratio": sums["reachable_sum"] / n,
                "avg_duration_sec": sums["duration_sum"] / n,
            }
        )
    return aggregated_rows


def write_results_csv(results: Iterable[Mapping[str, object]], path: Path) -> None:
    """
    Write per-run results to CSV for downstream analysis.
    """
    fieldnames = [
        "topology",
        "seed",
        "mode",
        "source",
        "goal",
        "reachable",
        "distance",
        "path_length",
        "settled",
        "edges_examined",
        "duration_sec",
    ]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for res in results:
            writer.writerow({name: res.get(name) for name in fieldnames})


def write_aggregates_csv(aggregated: Iterable[Mapping[str, object]], path: Path) -> None:
    """
    Write aggregated metrics by mode to CSV.
    """
    fieldnames = [
        "topology",
        "mode",
        "runs",
        "avg_settled",
        "avg_edges_examined",
        "reachable_ratio",
        "avg_duration_sec",
    ]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in aggregated:
            writer.writerow({name: row.get(name, 0.0) for name in fieldnames})


def main() -> None:
    config_path = Path(__file__).parent / "experiments" / "queries.yml"
    out_dir = Path(__file__).parent / "experiments" / "results"
    results_csv = out_dir / "runs.csv"
    aggregates_csv = out_dir / "aggregates.csv"

    results = run_queries(config_path, results_csv=results_csv, aggregates_csv=aggregates_csv)
    print("Aggregated by mode:", aggregate_by_mode(results))
    print(f"Wrote runs to {results_csv} and aggregates to {aggregates_csv}")


if __name__ == "__main__":
    main()
