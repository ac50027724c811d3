"""
Road network model for roadgraph.
- Vertices are cities, addressed by their index in the vertex array
- Edges are undirected roads with a non-negative 'distance' (km)
- Incident edges are kept in an adjacency list keyed by vertex index
Usage:
    from roadgraph.graph import RoadGraph
    G = RoadGraph()
    a, b = G.add_vertex("Wien"), G.add_vertex("Linz")
    G.add_edge(a, b, 185)
"""

from dataclasses import dataclass

import networkx as nx


@dataclass(frozen=True)
class Vertex:
    index: int
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Edge:
    index: int
    u: int  # vertex index
    v: int
    distance: float

    def other(self, vertex_index):
        """Return the endpoint opposite to vertex_index (self-loops return themselves)."""
        if vertex_index == self.u:
            return self.v
        if vertex_index == self.v:
            return self.u
        raise KeyError(f"vertex {vertex_index} is not an endpoint of edge {self.index}")


def _index_of(v):
    if isinstance(v, Vertex):
        return v.index
    if isinstance(v, int) and not isinstance(v, bool):
        return v
    raise KeyError(f"expected a Vertex or vertex index, got {v!r}")


class RoadGraph:
    """
    Weighted undirected graph built once and read afterwards.
    Two cities with the same name are distinct vertices if added separately.
    """

    def __init__(self):
        self._vertices = []
        self._edges = []
        self._adjacency = []

    # ----------------------
    # Construction
    # ----------------------

    def add_vertex(self, name):
        vertex = Vertex(len(self._vertices), str(name))
        self._vertices.append(vertex)
        self._adjacency.append([])
        return vertex

    def add_edge(self, u, v, distance):
        ui, vi = self.vertex(u).index, self.vertex(v).index
        edge = Edge(len(self._edges), ui, vi, float(distance))
        self._edges.append(edge)
        self._adjacency[ui].append(edge.index)
        if vi != ui:
            self._adjacency[vi].append(edge.index)
        return edge

    # ----------------------
    # Queries
    # ----------------------

    def vertices(self):
        return list(self._vertices)

    def edges(self):
        return list(self._edges)

    def vertex(self, v):
        idx = _index_of(v)
        if idx < 0 or idx >= len(self._vertices):
            raise KeyError(f"unknown vertex {v!r}")
        return self._vertices[idx]

    def vertex_by_name(self, name):
        for vertex in self._vertices:
            if vertex.name == name:
                return vertex
        raise KeyError(f"unknown city {name!r}")

    def incident_edges(self, v):
        return [self._edges[e] for e in self._adjacency[self.vertex(v).index]]

    def neighbor(self, edge, v):
        return self._vertices[edge.other(_index_of(v))]

    def number_of_vertices(self):
        return len(self._vertices)

    def number_of_edges(self):
        return len(self._edges)

    def __contains__(self, v):
        if not isinstance(v, Vertex):
            return False
        return 0 <= v.index < len(self._vertices) and self._vertices[v.index] == v

    def __repr__(self):
        return f"RoadGraph(vertices={len(self._vertices)}, edges={len(self._edges)})"

    # ----------------------
    # networkx interop
    # ----------------------

    def to_networkx(self):
        """Export as a networkx MultiGraph keyed by vertex index (parallel roads survive)."""
        G = nx.MultiGraph()
        for vertex in self._vertices:
            G.add_node(vertex.index, name=vertex.name)
        for edge in self._edges:
            G.add_edge(edge.u, edge.v, key=edge.index, distance=edge.distance)
        return G

    @classmethod
    def from_networkx(cls, G, weight="distance", name_attr="name"):
        """
        Build a RoadGraph from any networkx graph.
        Node label is used as the city name unless the node carries `name_attr`.
        Missing weights default to 1.0, like networkx's own shortest-path helpers.
        """
        graph = cls()
        index = {}
        for node, data in G.nodes(data=True):
            index[node] = graph.add_vertex(data.get(name_attr, node))
        for u, v, data in G.edges(data=True):
            graph.add_edge(index[u], index[v], data.get(weight, 1.0))
        return graph
