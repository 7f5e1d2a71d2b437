import logging
import math

from ..constants import Constants
from ..graph_generator import GraphGenerator
from ..shortestpath import do_dijkstra

logger = logging.getLogger(__name__)

class ShortestPathExercise:
    def __init__(self):
        self.num_vertices = Constants.DEFAULT_VERTEX_COUNT
        self.num_edges = Constants.DEFAULT_EDGE_COUNT
        self.width = Constants.DEFAULT_WIDTH
        self.height = Constants.DEFAULT_HEIGHT
        self.undirected = True
        self.weight = Constants.DEFAULT_WEIGHT
        self.seed = None
        self.source = None
        self.target = None

    @staticmethod
    def create_parser(subparsers):
        parser = subparsers.add_parser(
            "shortest-path",
            help="Generate a random geometric graph and find a shortest path on it"
        )
        parser.add_argument(
            "--num-vertices",
            type=int,
            help="Number of vertices in the graph"
        )
        parser.add_argument(
            "--num-edges",
            type=int,
            help="Number of links between vertices"
        )
        parser.add_argument(
            "--width",
            type=int,
            help="Width of the grid vertices are placed on"
        )
        parser.add_argument(
            "--height",
            type=int,
            help="Height of the grid vertices are placed on"
        )
        parser.add_argument(
            "--seed",
            type=int,
            help="Seed for the random generator"
        )
        parser.add_argument(
            "--source",
            type=int,
            help="Source vertex (default: 1)"
        )
        parser.add_argument(
            "--target",
            type=int,
            help="Target vertex (default: the last vertex)"
        )
        parser.add_argument(
            "--undirected",
            action="store_true",
            dest="undirected",
            default=None,
            help="Add every link in both directions"
        )
        parser.add_argument(
            "--directed",
            action="store_false",
            dest="undirected",
            help="Add every link in one direction only"
        )
        parser.add_argument(
            "--weight",
            choices=Constants.WEIGHT_ATTRIBUTES,
            help="Edge attribute to minimise"
        )

    def parse_args(self, args):
        if args.num_vertices is not None:
            self.num_vertices = args.num_vertices
        if args.num_edges is not None:
            self.num_edges = args.num_edges
        if args.width is not None:
            self.width = args.width
        if args.height is not None:
            self.height = args.height
        if args.seed is not None:
            self.seed = args.seed
        if args.source is not None:
            self.source = args.source
        if args.target is not None:
            self.target = args.target
        if getattr(args, "undirected", None) is not None:
            self.undirected = args.undirected
        if args.weight is not None:
            self.weight = args.weight

        # Vertices are named 1..num_vertices
        for option, value in (("--source", self.source), ("--target", self.target)):
            if value is not None and not 1 <= value <= self.num_vertices:
                raise ValueError(
                    f"{option} must be between 1 and {self.num_vertices}, got {value}"
                )

    def print_banner(self):
        print("Generating shortest-path exercise with the following parameters:")
        print(f"Number of vertices: {self.num_vertices}")
        print(f"Number of links: {self.num_edges}")
        print(f"Grid size: {self.width} x {self.height}")
        print(f"Undirected: {self.undirected}")
        print(f"Weight: {self.weight}")

    def generate(self):
        graph = GraphGenerator.generate_random_geometric_graph(
            vertex_count=self.num_vertices,
            edge_count=self.num_edges,
            width=self.width,
            height=self.height,
            undirected=self.undirected,
            seed=self.seed
        )

        source = self.source if self.source is not None else 1
        target = self.target if self.target is not None else self.num_vertices

        print("Vertices:")
        for v in graph.get_vertices():
            print(f"{v} at ({v.x}, {v.y})")

        print("Adjacency list:")
        graph.print_adjacency_list()

        paths = do_dijkstra(graph, source, self.weight)
        cost = paths.cost(target)

        print(f"Shortest path from {source} to {target}:")
        if math.isinf(cost):
            print("unreachable")
        else:
            route = " -> ".join(str(name) for name in paths.vertex_path_to(target))
            print(f"{route} (total {self.weight}: {cost:.2f})")

        logger.debug("exercise finished for %s -> %s", source, target)
        return graph, paths
