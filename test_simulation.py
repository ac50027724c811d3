"""
Tests for the route planner, batch simulation, config and CLI.
"""

import math
import sys

import pytest

import main
from roadgraph.config import RunConfig, load_config, merge_config
from roadgraph.dijkstra import ShortestPathFinder
from roadgraph.graph import RoadGraph
from roadgraph.metrics import Metrics
from roadgraph.planner import FOUND, MISSING_SELECTION, NO_PATH, SAME_CITY, plan_route
from roadgraph.queries import generate_queries
from roadgraph.simulation import run_simulation
from roadgraph.topology import build_sample_road_network, save_graph_yaml


@pytest.fixture
def sample_graph():
    return build_sample_road_network()


# ---------- Planner


def test_plan_route_found(sample_graph):
    outcome = plan_route(sample_graph, "Wien", "Bregenz")
    assert outcome.status == FOUND
    assert outcome.found
    assert outcome.message == "Wien → St. Pölten → Linz → Salzburg → Innsbruck → Bregenz  (710 km)"


def test_plan_route_accepts_vertices_and_shared_finder(sample_graph):
    finder = ShortestPathFinder(sample_graph)
    graz = sample_graph.vertex_by_name("Graz")
    outcome = plan_route(sample_graph, "Eisenstadt", graz, finder=finder)
    assert outcome.result.total_distance == 170
    assert outcome.message == "Eisenstadt → Graz  (170 km)"


def test_plan_route_missing_selection(sample_graph):
    for start, end in [(None, "Graz"), ("Graz", None), (None, None)]:
        outcome = plan_route(sample_graph, start, end)
        assert outcome.status == MISSING_SELECTION
        assert not outcome.found
        assert math.isinf(outcome.result.total_distance)
        assert outcome.message == "Please select both a start and an end city."


def test_plan_route_same_city(sample_graph):
    outcome = plan_route(sample_graph, "Linz", "Linz")
    assert outcome.status == SAME_CITY
    assert outcome.result.total_distance == 0
    assert [v.name for v in outcome.result.path] == ["Linz"]
    assert outcome.message == "Start and end city are identical. Distance: 0"


def test_plan_route_no_path(sample_graph):
    sample_graph.add_vertex("Vaduz")
    outcome = plan_route(sample_graph, "Bregenz", "Vaduz")
    assert outcome.status == NO_PATH
    assert outcome.message == "No path found between Bregenz and Vaduz."


def test_plan_route_unknown_city(sample_graph):
    with pytest.raises(KeyError):
        plan_route(sample_graph, "Wien", "Atlantis")


def test_display_distance_truncates():
    G = RoadGraph()
    a, b = G.add_vertex("A"), G.add_vertex("B")
    G.add_edge(a, b, 12.9)
    assert plan_route(G, a, b).message == "A → B  (12 km)"


# ---------- Queries & metrics


def test_generate_queries_deterministic(sample_graph):
    q1 = generate_queries(sample_graph, num_queries=20, seed=7)
    q2 = generate_queries(sample_graph, num_queries=20, seed=7)
    assert q1 == q2
    assert [q["id"] for q in q1] == list(range(20))
    assert all(q["start"] != q["end"] for q in q1)
    assert generate_queries(sample_graph, num_queries=0) == []


def test_generate_queries_needs_two_cities():
    G = RoadGraph()
    G.add_vertex("Alone")
    with pytest.raises(ValueError):
        generate_queries(G, num_queries=1)


def test_metrics_summary():
    m = Metrics()
    m.log(100.0, 2, True)
    m.log(300.0, 4, True)
    m.log(math.inf, 0, False)
    s = m.summary()
    assert s["queries"] == 3
    assert s["found_ratio"] == pytest.approx(2 / 3)
    assert s["avg_distance"] == pytest.approx(200.0)
    assert s["max_distance"] == pytest.approx(300.0)
    assert s["avg_hops"] == pytest.approx(3.0)


def test_metrics_summary_empty():
    assert Metrics().summary() == {
        "queries": 0, "found_ratio": 0.0, "avg_distance": 0.0, "max_distance": 0.0, "avg_hops": 0.0
    }


# ---------- Simulation


def test_run_simulation_with_sample_network(capsys):
    config = merge_config({
        "routes": [
            {"start": "Wien", "end": "Bregenz"},
            {"start": "Graz", "end": "Graz"},
            {"start": "Graz"},
        ],
        "num_random_queries": 4,
        "seed": 3,
    })
    outcomes, metrics = run_simulation(config)

    assert len(outcomes) == 7
    assert [o.status for o in outcomes[:3]] == [FOUND, SAME_CITY, MISSING_SELECTION]
    assert all(o.status == FOUND for o in outcomes[3:])
    summary = metrics.summary()
    assert summary["queries"] == 7
    assert summary["found_ratio"] == pytest.approx(6 / 7)

    out = capsys.readouterr().out
    assert "[0] Wien -> Bregenz: Wien → St. Pölten" in out
    assert "Simulation Complete" in out


def test_run_simulation_from_network_file(tmp_path):
    net = save_graph_yaml(build_sample_road_network(), tmp_path / "net.yaml")
    config = merge_config({"network_path": str(net), "routes": [{"start": "Linz", "end": "Graz"}]})
    outcomes, _ = run_simulation(config)
    assert outcomes[0].message == "Linz → Graz  (220 km)"


# ---------- Config


def test_load_config_defaults_and_merge(tmp_path):
    assert load_config() == RunConfig()

    path = tmp_path / "run.yaml"
    path.write_text("num_random_queries: 3\nlog_level: debug\n", encoding="utf-8")
    config = load_config(path)
    assert config.num_random_queries == 3
    assert config.log_level == "DEBUG"
    assert config.routes == []
    assert config.network_path is None


@pytest.mark.parametrize(
    "data",
    [
        {"colour": "red"},
        {"num_random_queries": -1},
        {"num_random_queries": "5"},
        {"log_level": "LOUD"},
        {"routes": ["Wien-Graz"]},
        {"routes": [{"start": "Wien", "via": "Linz"}]},
        {"routes": 5},
        {"routes": [{"start": 5}]},
        {"seed": "abc"},
        {"network_path": 5},
        {"num_random_queries": True},
    ],
)
def test_invalid_config(data):
    with pytest.raises(ValueError):
        merge_config(data)


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


# ---------- CLI


def test_cli_single_query(tmp_path, capsys):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("seed: 1\n", encoding="utf-8")
    assert main.main(["--config", str(cfg), "--start", "Wien", "--end", "Eisenstadt"]) == 0
    assert "Wien → Eisenstadt  (60 km)" in capsys.readouterr().out


def test_cli_unknown_city(tmp_path, capsys):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("seed: 1\n", encoding="utf-8")
    assert main.main(["--config", str(cfg), "--start", "Wien", "--end", "Atlantis"]) == 1
    assert "Atlantis" in capsys.readouterr().err


def test_cli_missing_end_is_reported(tmp_path, capsys):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("seed: 1\n", encoding="utf-8")
    assert main.main(["--config", str(cfg), "--start", "Wien"]) == 2
    assert "Please select both" in capsys.readouterr().out


def test_cli_batch(tmp_path, capsys):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("routes:\n  - {start: Graz, end: Klagenfurt}\n", encoding="utf-8")
    assert main.main(["--config", str(cfg)]) == 0
    assert "Graz → Klagenfurt  (140 km)" in capsys.readouterr().out


def test_invalid_config_names_its_source(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("seed: [1]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="run.yaml: invalid config"):
        load_config(path)


def test_cli_rejects_badly_typed_config(tmp_path, capsys):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("routes: 5\n", encoding="utf-8")
    assert main.main(["--config", str(cfg)]) == 1
    assert "invalid config" in capsys.readouterr().err


def test_cli_log_level_override(tmp_path, capsys):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("seed: 1\n", encoding="utf-8")
    assert main.main(["--config", str(cfg), "--log-level", "info", "--start", "Wien", "--end", "Graz"]) == 0
    assert main.main(["--config", str(cfg), "--log-level", "LOUD", "--start", "Wien", "--end", "Graz"]) == 1
    assert "--log-level: invalid config" in capsys.readouterr().err


def run_all_tests():
    """Run this module through pytest and report the result."""
    print("\n" + "#"*60)
    print("#" + " "*16 + "SIMULATION TEST SUITE" + " "*21 + "#")
    print("#"*60)
    return pytest.main([__file__, "-v"]) == 0


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
