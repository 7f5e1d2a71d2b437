from .constants import Constants
from .graph import Vertex, Edge, GraphError, DuplicateVertexError, VertexNotFoundError
from .directedgraph import DirectedGraph
from .shortestpath import (
    NegativeWeightError,
    ShortestPaths,
    TraversalState,
    compute_all_euclidean_distances,
    do_dijkstra,
    get_dijkstra_path
)
from .graph_generator import GraphGenerator
