"""
Tests for the YAML-driven scenario runner.
"""

import csv
from pathlib import Path

import pytest

from conversions import Representation
from graph_errors import InvalidWeightError
from scenario_runner import (
    DEFAULT_CONFIG,
    ScenarioConfig,
    build_graph,
    load_config,
    main,
    run_scenario,
    run_scenarios,
)


SMALL_CONFIG = """
representations: [sparse, adjacency_matrix]
scenarios:
  - name: triangle
    nodes: 3
    edges:
      - [0, 1, 2]
      - [1, 2, 2]
      - [0, 2, 9]
      - [2, 0, 1]
    queries:
      - [0, 2]
      - [1, 1]
  - name: pair
    nodes: 2
    edges: []
    queries:
      - [0, 1]
"""


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "scenarios.yml"
    path.write_text(SMALL_CONFIG)
    return path


def test_load_config(config_path):
    cfg = load_config(config_path)

    assert cfg.representations == [Representation.SPARSE, Representation.ADJACENCY_MATRIX]
    assert [s.name for s in cfg.scenarios] == ["triangle", "pair"]
    assert cfg.scenarios[0].edges[0] == (0, 1, 2)
    assert cfg.scenarios[0].queries == [(0, 2), (1, 1)]
    assert cfg.scenarios[1].edges == []


def test_missing_representations_default_to_all(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("scenarios: []\n")

    assert list(load_config(path).representations) == list(Representation)


def test_unknown_representation_rejected(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("representations: [linked_hash]\nscenarios: []\n")

    with pytest.raises(ValueError):
        load_config(path)


def test_malformed_edge_rejected(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("scenarios:\n  - name: bad\n    nodes: 2\n    edges: [[0, 1]]\n")

    with pytest.raises(ValueError, match="bad"):
        load_config(path)


def test_fractional_weight_is_kept_and_rejected_by_graph(tmp_path):
    """A weight like 2.5 must not be truncated to 2 on the way in."""
    path = tmp_path / "cfg.yml"
    path.write_text(
        "representations: [adjacency_list]\n"
        "scenarios:\n  - name: frac\n    nodes: 2\n    edges: [[0, 1, 2.5]]\n    queries: [[0, 1]]\n"
    )

    cfg = load_config(path)
    assert cfg.scenarios[0].edges == [(0, 1, 2.5)]

    with pytest.raises(InvalidWeightError):
        build_graph(cfg.scenarios[0], Representation.ADJACENCY_LIST)
    with pytest.raises(InvalidWeightError):
        run_scenario(cfg.scenarios[0], cfg.representations)


def test_fractional_node_id_rejected(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("scenarios:\n  - name: frac_node\n    nodes: 3\n    edges: [[1.5, 2, 1]]\n")

    with pytest.raises(ValueError, match="frac_node"):
        load_config(path)


def test_build_graph_in_each_representation():
    scenario = ScenarioConfig(name="s", nodes=2, edges=[(0, 1, 4)], queries=[])

    for representation in Representation:
        g = build_graph(scenario, representation)
        assert isinstance(g, representation.graph_class)
        assert g.edge_weight(0, 1) == 4


def test_run_scenario_rows_agree_across_representations(config_path):
    cfg = load_config(config_path)
    rows = run_scenario(cfg.scenarios[0], list(Representation))

    assert len(rows) == 2 * len(Representation)
    by_query = {}
    for row in rows:
        by_query.setdefault((row["source"], row["dest"]), set()).add((row["path"], row["cost"]))

    assert by_query[(0, 2)] == {("0 1 2", 4)}
    assert by_query[(1, 1)] == {("1 2 0 1", 5)}


def test_run_scenarios_writes_csv(config_path, tmp_path, capsys):
    out = tmp_path / "results" / "paths.csv"
    results = run_scenarios(config_path, output_csv=out)

    assert len(results) == 6
    with out.open() as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 6
    unreachable = [r for r in rows if r["scenario"] == "pair"]
    assert {r["path"] for r in unreachable} == {""}
    assert {r["cost"] for r in unreachable} == {""}

    printed = capsys.readouterr().out
    assert "[run] queued 2 scenarios" in printed
    assert "[run] completed scenario=triangle" in printed


def test_main_runs_bundled_scenarios(tmp_path, capsys):
    out = tmp_path / "paths.csv"
    main(["--config", str(DEFAULT_CONFIG), "--out", str(out)])

    assert out.exists()
    printed = capsys.readouterr().out
    assert "seven_nodes [adjacency_list] 0 -> 6: path=[0 5 1 6] cost=8" in printed
    assert "seven_nodes [sparse] 1 -> 1: path=[1 6 5 1] cost=9" in printed
