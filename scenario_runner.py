"""
CLI to run shortest-path scenarios across every graph representation.

Reads scenarios/scenarios.yml, builds each scenario graph in one
representation, converts it to the others, runs the configured
shortest-path queries in each, and writes one CSV row per query.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple
import argparse
import csv
import time

from conversions import Representation, convert
from dijkstra_engine import SimpleDijkstraEngine
from graph import Graph


DEFAULT_CONFIG = Path(__file__).parent / "scenarios" / "scenarios.yml"
DEFAULT_OUTPUT = Path(__file__).parent / "scenarios" / "results" / "paths.csv"

FIELDNAMES = [
    "scenario",
    "representation",
    "source",
    "dest",
    "path",
    "cost",
    "nodes",
    "edges",
    "heap_pops",
    "relaxed",
    "duration_sec",
]


@dataclass(frozen=True)
class ScenarioConfig:
    name: str
    nodes: int
    edges: Sequence[Tuple[int, int, int]]
    queries: Sequence[Tuple[int, int]]


@dataclass(frozen=True)
class Config:
    representations: Sequence[Representation]
    scenarios: Sequence[ScenarioConfig]


def _pairs(raw: object, width: int, field: str, scenario: str) -> List[Tuple[Any, ...]]:
    # Node ids must be ints here; weights pass through as written and are
    # checked by Graph.add_edge.
    items = raw or []
    if not isinstance(items, list):
        raise ValueError(f"Scenario {scenario!r}: '{field}' must be a list.")
    rows: List[Tuple[Any, ...]] = []
    for item in items:
        if not isinstance(item, (list, tuple)) or len(item) != width:
            raise ValueError(
                f"Scenario {scenario!r}: each '{field}' entry needs {width} integers, got {item!r}."
            )
        for node in item[:2]:
            if isinstance(node, bool) or not isinstance(node, int):
                raise ValueError(
                    f"Scenario {scenario!r}: node ids in '{field}' must be integers, got {item!r}."
                )
        rows.append(tuple(item))
    return rows


def load_config(path: Path) -> Config:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text()) or {}
    names = data.get("representations") or [r.value for r in Representation]
    try:
        representations = [Representation(name) for name in names]
    except ValueError as exc:
        raise ValueError(f"Unknown representation in {path}: {exc}") from exc

    scenarios = []
    for raw in data.get("scenarios", []):
        name = str(raw["name"])
        nodes = int(raw["nodes"])
        if nodes < 0:
            raise ValueError(f"Scenario {name!r}: 'nodes' must be non-negative.")
        scenarios.append(
            ScenarioConfig(
                name=name,
                nodes=nodes,
                edges=_pairs(raw.get("edges"), 3, "edges", name),  # type: ignore[arg-type]
                queries=_pairs(raw.get("queries"), 2, "queries", name),  # type: ignore[arg-type]
            )
        )
    return Config(representations=representations, scenarios=scenarios)


def build_graph(scenario: ScenarioConfig, representation: Representation) -> Graph:
    """Build the scenario graph directly in the given representation."""
    graph = representation.graph_class()
    graph.add_nodes(scenario.nodes)
    for source, dest, weight in scenario.edges:
        graph.add_edge(source, dest, weight)
    return graph


def run_scenario(
    scenario: ScenarioConfig, representations: Sequence[Representation]
) -> List[Dict[str, object]]:
    """
    Build the scenario in the first representation, convert it to the rest,
    and run every query in each.
    """
    if not representations:
        return []
    base = build_graph(scenario, representations[0])
    engine = SimpleDijkstraEngine()
    rows: List[Dict[str, object]] = []

    for representation in representations:
        graph = base if representation is representations[0] else convert(base, representation)
        for source, dest in scenario.queries:
            start = time.perf_counter()
            path = engine.shortest_path(graph, source, dest)
            duration = time.perf_counter() - start
            rows.append(
                {
                    "scenario": scenario.name,
                    "representation": representation.value,
                    "source": source,
                    "dest": dest,
                    "path": " ".join(str(n) for n in path),
                    "cost": graph.path_weight(path) if path else "",
                    "nodes": graph.node_count(),
                    "edges": graph.edge_count(),
                    "heap_pops": engine.last_heap_pops,
                    "relaxed": engine.last_relaxed,
                    "duration_sec": duration,
                }
            )
    return rows


def write_rows_csv(rows: Sequence[Dict[str, object]], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)


def run_scenarios(config_path: Path, output_csv: Optional[Path] = None) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()
    print(
        f"[run] queued {len(cfg.scenarios)} scenarios across "
        f"{len(cfg.representations)} representations"
    )

    results: List[Dict[str, object]] = []
    for scenario in cfg.scenarios:
        t0 = time.time()
        rows = run_scenario(scenario, cfg.representations)
        results.extend(rows)
        print(
            f"[run] completed scenario={scenario.name} queries={len(scenario.queries)} "
            f"duration={time.time() - t0:.2f}s"
        )

    if output_csv:
        write_rows_csv(results, output_csv)

    elapsed = time.time() - start
    print(f"[run] completed {len(results)} queries in {elapsed:.2f}s")
    return results


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run shortest-path scenarios.")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG, help="Scenario YAML file.")
    parser.add_argument("--out", type=Path, default=DEFAULT_OUTPUT, help="CSV file for results.")
    args = parser.parse_args(argv)

    results = run_scenarios(args.config, output_csv=args.out)
    for res in results:
        print(f"{res['scenario']} [{res['representation']}] {res['source']} -> {res['dest']}: "
              f"path=[{res['path']}] cost={res['cost']}")
    print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
