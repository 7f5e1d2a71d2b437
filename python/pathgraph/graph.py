from dataclasses import dataclass, field
from typing import Hashable, List

from .constants import Constants

class GraphError(Exception):
    """Base class for errors raised by graph operations."""
    pass

class DuplicateVertexError(GraphError, ValueError):
    """Exception raised when inserting a vertex whose name is already taken."""
    pass

class VertexNotFoundError(GraphError, LookupError):
    """Exception raised when a vertex name is not present in the graph."""

    def __init__(self, name: Hashable):
        super().__init__(f"Unknown vertex {name!r}")
        self.name = name

@dataclass(eq=False)
class Vertex:
    """
    A named vertex with planar coordinates and its outgoing edges.

    Equality and hashing use the name only, so a vertex can sit in a set or
    dict key while edges are still being added to it.
    """

    name: Hashable
    x: float = Constants.DEFAULT_X
    y: float = Constants.DEFAULT_Y
    edges: List["Edge"] = field(default_factory=list, repr=False)

    def get_edges(self) -> List["Edge"]:
        return self.edges

    def add_edge(self, e: "Edge"):
        if e.source is not self:
            raise ValueError(f"Edge {e} does not start at vertex {self}")
        self.edges.append(e)

    def successors(self) -> List["Vertex"]:
        return [e.target for e in self.edges]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"{self.name}"

@dataclass(eq=False)
class Edge:
    """
    Directed edge from `source` to `target`.

    `cost` is the caller-supplied weight, `distance` the Euclidean length
    filled in by `compute_all_euclidean_distances` (0.0 until then).
    """

    source: Vertex
    target: Vertex
    cost: float = Constants.DEFAULT_EDGE_COST
    distance: float = 0.0

    def __str__(self) -> str:
        return f"{self.source} --[{self.cost}]--> {self.target}"
