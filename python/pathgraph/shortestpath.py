import heapq
import itertools
import logging
import math
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional

from .constants import Constants
from .directedgraph import DirectedGraph
from .graph import Edge, GraphError, Vertex, VertexNotFoundError

logger = logging.getLogger(__name__)

class NegativeWeightError(GraphError, ValueError):
    """Exception raised when Dijkstra's algorithm meets a negative edge weight."""
    pass

@dataclass
class TraversalState:
    """Per-vertex bookkeeping of a single Dijkstra run."""
    visited: bool = False
    cost: float = math.inf  # inf => not reached
    backpointer: Optional[Vertex] = None
    via: Optional[Edge] = None

class ShortestPaths:
    """
    Shortest-path tree rooted at `source`, as left behind by one run of
    `do_dijkstra`. Every run owns its states, so results never interfere.
    """

    def __init__(
        self,
        graph: DirectedGraph,
        source: Vertex,
        weight: str = Constants.DEFAULT_WEIGHT
    ):
        self.graph = graph
        self.source = source
        self.weight = weight
        self.states: Dict[Hashable, TraversalState] = {
            name: TraversalState() for name in graph.vertices
        }
        self.states[source.name].cost = 0.0

    def __repr__(self) -> str:
        return f"ShortestPaths(source={self.source.name!r}, weight={self.weight!r})"

    def state(self, name: Hashable) -> TraversalState:
        try:
            return self.states[name]
        except KeyError:
            raise VertexNotFoundError(name) from None

    def cost(self, name: Hashable) -> float:
        return self.state(name).cost

    def backpointer(self, name: Hashable) -> Optional[Vertex]:
        return self.state(name).backpointer

    def visited(self, name: Hashable) -> bool:
        return self.state(name).visited

    def is_reachable(self, name: Hashable) -> bool:
        return self.state(name).cost < math.inf

    def path_to(self, name: Hashable) -> List[Edge]:
        """
        Walk backpointers from `name` toward the source and collect the edges
        used to reach each vertex.

        The edge nearest the target comes first, the edge leaving the source
        last. The list is empty for the source itself and for vertices the
        source cannot reach.
        """
        path = []
        state = self.state(name)
        while state.backpointer is not None:
            path.append(state.via)
            state = self.states[state.backpointer.name]
        return path

    def vertex_path_to(self, name: Hashable) -> List[Hashable]:
        """Names of the vertices from the source to `name`, in travel order."""
        if not self.is_reachable(name):
            return []
        names = [name] + [e.source.name for e in self.path_to(name)]
        names.reverse()
        return names

def compute_all_euclidean_distances(graph: DirectedGraph):
    """Set the `distance` of every edge to the planar length between its endpoints."""
    count = 0
    for v in graph.get_vertices():
        for e in v.get_edges():
            e.distance = math.hypot(e.source.x - e.target.x, e.source.y - e.target.y)
            count += 1
    logger.debug("computed euclidean distances for %d edges", count)

def do_dijkstra(
    graph: DirectedGraph,
    source: Hashable,
    weight: str = Constants.DEFAULT_WEIGHT
) -> ShortestPaths:
    """
    Run Dijkstra's algorithm from `source` over the `weight` attribute of the
    edges ("distance" by default, or "cost").

    State starts fresh on every call: all vertices unvisited and unreached,
    the source at cost 0. Outdated heap entries are skipped when popped
    instead of being removed on relaxation.

    Raises:
        VertexNotFoundError: `source` is not in the graph, or an edge leads to
            a vertex object this graph does not hold
        NegativeWeightError: an edge with negative weight is reached
        ValueError: `weight` is not an edge weight attribute
    """
    if weight not in Constants.WEIGHT_ATTRIBUTES:
        raise ValueError(
            f"Unknown weight attribute {weight!r}, "
            f"expected one of {', '.join(Constants.WEIGHT_ATTRIBUTES)}"
        )

    start = graph.get_vertex(source)
    result = ShortestPaths(graph, start, weight)
    states = result.states

    # Counter breaks cost ties by push order and keeps vertices out of comparisons
    counter = itertools.count()
    queue = [(0.0, next(counter), start)]
    settled = 0

    while queue:
        cost, _, current = heapq.heappop(queue)
        current_state = states[current.name]

        # Skip outdated entries
        if current_state.visited or cost > current_state.cost:
            continue

        current_state.visited = True
        settled += 1

        for edge in current.get_edges():
            w = getattr(edge, weight)
            if w < 0:
                raise NegativeWeightError(
                    f"Edge {edge.source} -> {edge.target} has negative {weight} {w}"
                )

            # Edges must stay inside the graph, even for shared vertex objects
            if graph.vertices.get(edge.target.name) is not edge.target:
                raise VertexNotFoundError(edge.target.name)

            target_state = states[edge.target.name]
            if target_state.visited:
                continue

            candidate = current_state.cost + w
            if candidate < target_state.cost:
                target_state.cost = candidate
                target_state.backpointer = current
                target_state.via = edge
                heapq.heappush(queue, (candidate, next(counter), edge.target))

    logger.debug(
        "dijkstra from %s over %s settled %d of %d vertices",
        start.name, weight, settled, graph.vertex_count()
    )
    return result

def get_dijkstra_path(
    graph: DirectedGraph,
    source: Hashable,
    target: Hashable,
    weight: str = Constants.DEFAULT_WEIGHT
) -> List[Edge]:
    """
    Recompute shortest paths from `source` and return the edges leading to
    `target`, nearest-to-target first (see `ShortestPaths.path_to`).

    An unreachable target yields an empty list; an unknown name raises
    `VertexNotFoundError`.
    """
    graph.get_vertex(target)
    return do_dijkstra(graph, source, weight).path_to(target)
