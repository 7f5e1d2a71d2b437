import logging
import math
import random
from typing import Optional

from .constants import Constants
from .directedgraph import DirectedGraph
from .shortestpath import compute_all_euclidean_distances

logger = logging.getLogger(__name__)

class GraphGenerator:
    @classmethod
    def generate_random_geometric_graph(
        cls,
        vertex_count: int = Constants.DEFAULT_VERTEX_COUNT,
        edge_count: int = Constants.DEFAULT_EDGE_COUNT,
        width: int = Constants.DEFAULT_WIDTH,
        height: int = Constants.DEFAULT_HEIGHT,
        undirected: bool = True,
        connected: bool = True,
        seed: Optional[int] = None,
        max_attempts: int = None
    ) -> DirectedGraph:

        """
        Generate a random graph whose vertices lie on an integer grid.
        Args:
            vertex_count: Number of vertices, named 1..vertex_count
            edge_count: Number of links to add (an undirected link counts once)
            width, height: Extent of the grid vertex coordinates are drawn from
            undirected: Add every link in both directions
            connected: Start from a random chain through all vertices, beginning
                at vertex 1, so that every vertex is reachable from vertex 1
            seed: Seed for a private random generator
            max_attempts: Maximum attempts to place the remaining links
        Returns:
            A DirectedGraph with Euclidean distances already computed; each
            edge's cost is its length rounded to the nearest integer
        """

        if vertex_count < 1:
            raise ValueError("Graph needs at least one vertex")

        if width < 0 or height < 0:
            raise ValueError("Grid extent cannot be negative")

        max_links = vertex_count * (vertex_count - 1)
        if undirected:
            max_links //= 2

        if edge_count > max_links:
            raise ValueError(
                f"Cannot place {edge_count} links between {vertex_count} vertices"
            )

        if connected and edge_count < vertex_count - 1:
            raise ValueError(
                f"A connected graph on {vertex_count} vertices needs at least "
                f"{vertex_count - 1} links"
            )

        rng = random.Random(seed)
        graph = DirectedGraph()

        for name in range(1, vertex_count + 1):
            graph.add_vertex(name, rng.randint(0, width), rng.randint(0, height))

        links = set()

        def link(src, dst):
            key = frozenset((src, dst)) if undirected else (src, dst)
            if src == dst or key in links:
                return False
            links.add(key)
            a, b = graph.get_vertex(src), graph.get_vertex(dst)
            cost = float(round(math.hypot(a.x - b.x, a.y - b.y)))
            if undirected:
                graph.add_undirected_edge(src, dst, cost)
            else:
                graph.add_edge(src, dst, cost)
            return True

        if connected:
            # Chain all vertices in random order to guarantee reachability
            chain = [1] + rng.sample(range(2, vertex_count + 1), vertex_count - 1)
            for i in range(vertex_count - 1):
                link(chain[i], chain[i + 1])

        max_attempts = edge_count * 20 if max_attempts is None else max_attempts  # Prevent infinite loops
        attempts = 0

        while len(links) < edge_count and attempts < max_attempts:
            attempts += 1
            link(rng.randint(1, vertex_count), rng.randint(1, vertex_count))

        if len(links) < edge_count:
            raise RuntimeError(
                f"Failed to place {edge_count} links within {max_attempts} attempts"
            )

        compute_all_euclidean_distances(graph)
        logger.debug(
            "generated graph with %d vertices and %d edges",
            graph.vertex_count(), graph.edge_count()
        )
        return graph
