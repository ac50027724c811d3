from roadgraph.dijkstra import ShortestPathFinder
from roadgraph.metrics import Metrics
from roadgraph.planner import FOUND, SAME_CITY, plan_route
from roadgraph.queries import generate_queries
from roadgraph.topology import (
    build_sample_road_network,
    load_graph_yaml,
    topology_summary
)


def load_network(config):
    path = config.network_path
    if path:
        print(f"Loading road network from {path}...")
        return load_graph_yaml(path)
    print("Using bundled sample road network...")
    return build_sample_road_network()


def run_simulation(config, G=None):
    """
    Run every configured route plus `num_random_queries` random ones.

    Args:
        config: RunConfig from roadgraph.config
        G: RoadGraph to use instead of loading one from config

    Returns:
        (outcomes, metrics): list of RouteOutcome in query order, and Metrics
    """
    if G is None:
        G = load_network(config)
    print(f"Network: {topology_summary(G)}")

    queries = [{"id": i, "start": r.start, "end": r.end}
               for i, r in enumerate(config.routes)]
    queries += [
        {**q, "id": len(queries) + q["id"]}
        for q in generate_queries(G, config.num_random_queries, seed=config.seed)
    ]

    finder = ShortestPathFinder(G)
    metrics = Metrics()
    outcomes = []

    for q in queries:
        outcome = plan_route(G, q["start"], q["end"], finder=finder)
        outcomes.append(outcome)
        print(f"[{q['id']}] {q['start']} -> {q['end']}: {outcome.message}")

        result = outcome.result
        if outcome.status in (FOUND, SAME_CITY):
            metrics.log(result.total_distance, len(result.edges), True)
        else:
            metrics.log(result.total_distance, 0, False)

    print("\n=== Simulation Complete ===")
    print(metrics.summary())
    return outcomes, metrics
