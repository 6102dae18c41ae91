from .hashtable import HashtableMap
from .graph import Graph, Node, Edge
from .algorithms import (
    DijkstraGraph, dijkstra, furthest_reachable_from,
    shortest_path_cost, shortest_path_costs, shortest_path_data
)
from .errors import (
    GraphError, NullKeyError, DuplicateKeyError, NotFoundError,
    EndpointNotFoundError, NoPathError, GraphLoadError
)
from .loader import load_graph_data, parse_line
from .backend import RouteBackend
from .config import Settings, configure_logging, get_settings

__all__ = [
    "HashtableMap", "Graph", "Node", "Edge",
    "DijkstraGraph", "dijkstra", "furthest_reachable_from",
    "shortest_path_cost", "shortest_path_costs", "shortest_path_data",
    "GraphError", "NullKeyError", "DuplicateKeyError", "NotFoundError",
    "EndpointNotFoundError", "NoPathError", "GraphLoadError",
    "load_graph_data", "parse_line",
    "RouteBackend",
    "Settings", "configure_logging", "get_settings"
]
