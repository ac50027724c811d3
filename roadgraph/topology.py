"""
Topology helpers for roadgraph
- Builds the bundled sample road network (Austrian cities, distances in km)
- Saves/loads a network as YAML:
    cities: [Wien, Linz, ...]
    roads:
      - {from: Wien, to: Linz, distance: 185.0}
- Summarises a network
Usage:
    from roadgraph.topology import build_sample_road_network, save_graph_yaml
    G = build_sample_road_network()
    save_graph_yaml(G, "config/road_network.yaml")
"""

import logging
import math

import yaml

from roadgraph.graph import RoadGraph

logger = logging.getLogger(__name__)

SAMPLE_CITIES = [
    "Wien",
    "St. Pölten",
    "Linz",
    "Salzburg",
    "Innsbruck",
    "Bregenz",
    "Graz",
    "Klagenfurt",
    "Eisenstadt",
    "Hollabrunn",
]

# (city, city, km)
SAMPLE_ROADS = [
    ("Wien", "St. Pölten", 65),
    ("Wien", "Eisenstadt", 60),
    ("Wien", "Hollabrunn", 55),
    ("Wien", "Graz", 200),
    ("Hollabrunn", "St. Pölten", 90),
    ("St. Pölten", "Linz", 130),
    ("Linz", "Salzburg", 135),
    ("Linz", "Graz", 220),
    ("Salzburg", "Innsbruck", 185),
    ("Salzburg", "Klagenfurt", 225),
    ("Innsbruck", "Bregenz", 195),
    ("Eisenstadt", "Graz", 170),
    ("Graz", "Klagenfurt", 140),
]


def build_sample_road_network():
    """
    Creates the demo road network used when no network file is configured.
    """
    G = RoadGraph()
    for name in SAMPLE_CITIES:
        G.add_vertex(name)
    for a, b, km in SAMPLE_ROADS:
        G.add_edge(G.vertex_by_name(a), G.vertex_by_name(b), km)
    return G


# ----------------------
# YAML I/O
# ----------------------

def save_graph_yaml(G, path="config/road_network.yaml"):
    """
    Save a compact, human-readable YAML describing cities and roads.
    Roads refer to cities by name, so names should be unique for a lossless round trip.
    """
    out = {
        'cities': [v.name for v in G.vertices()],
        'roads': [
            {
                'from': G.vertex(e.u).name,
                'to': G.vertex(e.v).name,
                'distance': float(e.distance),
            }
            for e in G.edges()
        ],
    }
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(out, f, allow_unicode=True, sort_keys=False)
    return path


def load_graph_yaml(path="config/road_network.yaml"):
    """
    Load the YAML created by save_graph_yaml back into a RoadGraph.
    Raises ValueError for malformed documents, unknown cities, negative or non-finite distances.
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    G = graph_from_dict(data, source=path)
    logger.info("loaded road network from %s: %d cities, %d roads",
                path, G.number_of_vertices(), G.number_of_edges())
    return G


def graph_from_dict(data, source="<dict>"):
    if not isinstance(data, dict):
        raise ValueError(f"{source}: expected a mapping with 'cities' and 'roads'")

    G = RoadGraph()
    by_name = {}
    for name in data.get('cities') or []:
        name = str(name)
        if name in by_name:
            raise ValueError(f"{source}: duplicate city {name!r}")
        by_name[name] = G.add_vertex(name)

    for i, road in enumerate(data.get('roads') or []):
        try:
            a, b = str(road['from']), str(road['to'])
            km = float(road['distance'])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"{source}: road #{i} is malformed ({e})") from e
        for name in (a, b):
            if name not in by_name:
                raise ValueError(f"{source}: road #{i} references unknown city {name!r}")
        if not math.isfinite(km) or km < 0:
            raise ValueError(f"{source}: road #{i} has invalid distance {km} (must be finite and >= 0)")
        G.add_edge(by_name[a], by_name[b], km)
    return G


# ----------------------
# Small summary helper
# ----------------------
def topology_summary(G):
    n = G.number_of_vertices()
    m = G.number_of_edges()
    degs = [len(G.incident_edges(v)) for v in G.vertices()]
    avg_deg = sum(degs) / len(degs) if degs else 0.0
    km = [e.distance for e in G.edges()]
    return {
        'cities': n,
        'roads': m,
        'avg_degree': avg_deg,
        'avg_road_km': sum(km) / len(km) if km else 0.0,
        'total_road_km': sum(km),
    }


if __name__ == "__main__":
    G = build_sample_road_network()
    print("Sample road network created. Summary:")
    print(topology_summary(G))
    save_path = save_graph_yaml(G, "config/road_network.yaml")
    print("Saved road network to:", save_path)
