import logging
import sys
from typing import Hashable, Iterable, List, Optional, TextIO, Tuple, Union

from .constants import Constants
from .graph import DuplicateVertexError, Edge, Vertex, VertexNotFoundError

logger = logging.getLogger(__name__)

class DirectedGraph:
    """
    Directed weighted graph stored as adjacency lists.

    Vertices are indexed by name; each vertex owns the list of its outgoing
    edges. Parallel edges between the same pair of vertices are allowed.
    """

    def __init__(
        self,
        vertices: Optional[Iterable[Vertex]] = None
    ):
        self.vertices: dict[Hashable, Vertex] = {}

        if vertices:
            for v in vertices:
                self.add_vertex(v)

    def __str__(self) -> str:
        # One line per vertex with the names of its direct successors
        lines = ""
        for name, v in self.vertices.items():
            successors = "".join(f"{t} " for t in v.successors())
            lines += f"{name} -> [ {successors}]\n"
        return lines

    def __contains__(self, name: Hashable) -> bool:
        return self.has_vertex(name)

    def print_adjacency_list(self, file: Optional[TextIO] = None):
        """Write the adjacency dump to `file` (stdout by default)."""
        print(str(self), end="", file=file if file is not None else sys.stdout)

    def add_vertex(
        self,
        v: Union[Vertex, Hashable],
        x: Optional[float] = None,
        y: Optional[float] = None
    ) -> Vertex:
        """
        Insert a vertex given by name (with optional coordinates) or as a
        `Vertex` object. A `Vertex` must not carry edges yet; edges are only
        created through `add_edge` so their endpoints belong to this graph.
        """
        if isinstance(v, Vertex):
            if x is not None or y is not None:
                raise TypeError("Coordinates cannot be passed along with a Vertex")
            if v.get_edges():
                raise ValueError(
                    f"Vertex {v.name!r} already has edges, add them with add_edge"
                )
        else:
            v = Vertex(
                v,
                Constants.DEFAULT_X if x is None else x,
                Constants.DEFAULT_Y if y is None else y
            )

        if v.name in self.vertices:
            raise DuplicateVertexError(f"Vertex with name {v.name!r} already exists")

        self.vertices[v.name] = v
        logger.debug("added vertex %s at (%s, %s)", v.name, v.x, v.y)
        return v

    def has_vertex(self, name: Hashable) -> bool:
        """Check if a vertex with the given name exists in the graph."""
        return name in self.vertices

    def get_vertex(self, name: Hashable) -> Vertex:
        try:
            return self.vertices[name]
        except KeyError:
            raise VertexNotFoundError(name) from None

    def get_vertices(self) -> Tuple[Vertex, ...]:
        """Return a snapshot of all vertices, in no particular order."""
        return tuple(self.vertices.values())

    def get_edges(self) -> List[Edge]:
        """Return a snapshot of every edge in the graph."""
        return [e for v in self.vertices.values() for e in v.get_edges()]

    def add_edge(
        self,
        u: Hashable,
        w: Hashable,
        cost: float = Constants.DEFAULT_EDGE_COST
    ) -> Edge:
        """
        Add a new edge from u to w, creating either vertex if it doesn't
        exist yet. Multiple edges between the same vertices are permitted.
        """
        if u not in self.vertices:
            self.add_vertex(u)
        if w not in self.vertices:
            self.add_vertex(w)

        source = self.vertices[u]
        e = Edge(source, self.vertices[w], cost)
        source.add_edge(e)
        logger.debug("added edge %s -> %s with cost %s", u, w, cost)
        return e

    def add_undirected_edge(
        self,
        u: Hashable,
        v: Hashable,
        cost: float = Constants.DEFAULT_EDGE_COST
    ) -> Tuple[Edge, Edge]:
        """Add two independent directed edges, u -> v and v -> u."""
        return self.add_edge(u, v, cost), self.add_edge(v, u, cost)

    def edge_count(self):
        """Return total number of directed edges (counts parallel edges)."""
        return sum(len(v.get_edges()) for v in self.vertices.values())

    def vertex_count(self):
        """Return number of vertices."""
        return len(self.vertices)
