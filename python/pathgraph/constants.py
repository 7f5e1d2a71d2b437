class Constants:
    DEFAULT_X = 0
    DEFAULT_Y = 0
    DEFAULT_EDGE_COST = 1.0

    # Edge attributes Dijkstra can run over
    WEIGHT_ATTRIBUTES = ("distance", "cost")
    DEFAULT_WEIGHT = "distance"

    # Random graph generation
    DEFAULT_VERTEX_COUNT = 6
    DEFAULT_EDGE_COUNT = 8
    DEFAULT_WIDTH = 10
    DEFAULT_HEIGHT = 10
