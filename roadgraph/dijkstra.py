import heapq
import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

PATH_SEPARATOR = " → "
NO_PATH_TEXT = "No path found"


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of one shortest-path query.
    The "no path" sentinel has an empty path, no edges and an infinite distance.
    Path and edges are stored as tuples, so results are hashable and read-only.
    """

    path: tuple = ()
    edges: tuple = ()
    total_distance: float = math.inf

    def __post_init__(self):
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "edges", tuple(self.edges))

    @classmethod
    def no_path(cls):
        return cls((), (), math.inf)

    def path_exists(self):
        return bool(self.path) and self.total_distance != math.inf

    def path_as_string(self):
        if not self.path_exists():
            return NO_PATH_TEXT
        return PATH_SEPARATOR.join(v.name for v in self.path)

    def display_distance(self):
        """Total distance truncated to an int, for display only; None when there is no path."""
        if not self.path_exists():
            return None
        return int(self.total_distance)


class ShortestPathFinder:
    def __init__(self, graph):
        self.graph = graph

    def find_shortest_path(self, start, end):
        """
        Dijkstra from start, stopping once end is finalized.
        Edge distances must be non-negative; they are not validated.

        Returns:
            PathResult (the no-path sentinel when start/end is None or end is unreachable)
        """
        if start is None or end is None:
            return PathResult.no_path()

        G = self.graph
        start, end = G.vertex(start), G.vertex(end)

        distances = [math.inf] * G.number_of_vertices()
        pred_vertex = {}
        pred_edge = {}
        visited = set()

        distances[start.index] = 0.0
        # (distance, vertex index): equal distances pop in insertion order
        queue = [(0.0, start.index)]

        while queue:
            dist, current = heapq.heappop(queue)
            if current in visited:
                continue
            visited.add(current)

            if current == end.index:
                break

            for edge in G.incident_edges(current):
                neighbor = edge.other(current)
                if neighbor in visited:
                    continue

                candidate = dist + edge.distance
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    pred_vertex[neighbor] = current
                    pred_edge[neighbor] = edge
                    heapq.heappush(queue, (candidate, neighbor))

        if distances[end.index] == math.inf:
            logger.debug("no path from %s to %s (%d vertices finalized)", start, end, len(visited))
            return PathResult.no_path()

        path, edges = [end], []
        current = end.index
        while current != start.index:
            edges.append(pred_edge[current])
            current = pred_vertex[current]
            path.append(G.vertex(current))
        path.reverse()
        edges.reverse()

        logger.debug(
            "shortest path %s -> %s: %d hops, distance %.3f",
            start, end, len(edges), distances[end.index],
        )
        return PathResult(path, edges, distances[end.index])


def find_shortest_path(graph, start, end):
    """Shortest route between two vertices of graph (see ShortestPathFinder)."""
    return ShortestPathFinder(graph).find_shortest_path(start, end)
