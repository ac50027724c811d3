import random


def generate_queries(G, num_queries=5, seed=42):
    """
    Generate random start/end city pairs for a batch run.

    Args:
        G: RoadGraph with at least two cities
        num_queries: Number of queries to generate
        seed: Random seed for reproducibility

    Returns:
        List of query dictionaries {"id", "start", "end"} (city names)
    """
    rng = random.Random(seed)
    vertices = G.vertices()
    if num_queries > 0 and len(vertices) < 2:
        raise ValueError("need at least two cities to generate queries")

    queries = []
    for i in range(num_queries):
        start, end = rng.sample(vertices, 2)
        queries.append({
            "id": i,
            "start": start.name,
            "end": end.name,
        })
    return queries
