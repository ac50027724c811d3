"""
Route planner: the caller side of the shortest-path finder.
Resolves the selected cities, handles the cases the finder leaves to its caller
(nothing selected, identical start and end) and phrases the result for display.
"""

from dataclasses import dataclass

from roadgraph.dijkstra import PathResult, ShortestPathFinder
from roadgraph.graph import Vertex

MISSING_SELECTION = "missing_selection"
SAME_CITY = "same_city"
NO_PATH = "no_path"
FOUND = "found"


@dataclass(frozen=True)
class RouteOutcome:
    status: str
    result: PathResult
    message: str

    @property
    def found(self):
        return self.status == FOUND


def _resolve(G, city):
    if city is None or isinstance(city, Vertex):
        return city
    return G.vertex_by_name(city)


def describe_result(result, start, end):
    if not result.path_exists():
        return f"No path found between {start.name} and {end.name}."
    return f"{result.path_as_string()}  ({result.display_distance()} km)"


def plan_route(G, start, end, finder=None):
    """
    Plan a route between two cities.

    Args:
        G: RoadGraph
        start, end: Vertex, city name, or None when nothing is selected
        finder: optional ShortestPathFinder bound to G (reused across queries)

    Returns:
        RouteOutcome with one of the statuses
        'missing_selection', 'same_city', 'no_path', 'found'
    """
    start, end = _resolve(G, start), _resolve(G, end)

    if start is None or end is None:
        return RouteOutcome(
            MISSING_SELECTION,
            PathResult.no_path(),
            "Please select both a start and an end city.",
        )

    if start == end:
        return RouteOutcome(
            SAME_CITY,
            PathResult((start,), (), 0.0),
            "Start and end city are identical. Distance: 0",
        )

    finder = finder or ShortestPathFinder(G)
    result = finder.find_shortest_path(start, end)
    status = FOUND if result.path_exists() else NO_PATH
    return RouteOutcome(status, result, describe_result(result, start, end))
