import logging
from pathlib import Path
from typing import List, Optional, Union

from .algorithms import DijkstraGraph
from .errors import EndpointNotFoundError, NotFoundError
from .loader import load_graph_data

logger = logging.getLogger(__name__)


class RouteBackend:
    """
    Answers location queries over a DijkstraGraph whose nodes are location
    names and whose edge weights are travel times in seconds.

    The list returning queries report a missing location or an unreachable
    destination as an empty list.
    """

    def __init__(self, graph: Optional[DijkstraGraph] = None) -> None:
        self.graph: DijkstraGraph = graph if graph is not None else DijkstraGraph()

    def load_graph_data(self, filename: Union[str, Path]) -> None:
        """
        Replaces the current graph contents with the graph in a DOT file.

        Raises:
            GraphLoadError: If the file cannot be read or parsed.
        """
        load_graph_data(self.graph, filename)

    def get_list_of_all_locations(self) -> List[str]:
        return self.graph.get_all_nodes()

    def find_locations_on_shortest_path(self, start: str, end: str) -> List[str]:
        """Returns the locations along the shortest path, or [] if there is none."""
        try:
            return self.graph.shortest_path_data(start, end)
        except NotFoundError as e:
            logger.debug("No route from %r to %r: %s", start, end, e)
            return []

    def find_times_on_shortest_path(self, start: str, end: str) -> List[float]:
        """
        Returns the time of each hop along the shortest path, or [] if there
        is no path.
        """
        path = self.find_locations_on_shortest_path(start, end)
        return [float(self.graph.get_edge(pred, succ)) for pred, succ in zip(path, path[1:])]

    def get_furthest_destination_from(self, start: str) -> str:
        """
        Returns the location that takes longest to reach along shortest paths
        from start, or "" if no other location is reachable.

        Raises:
            EndpointNotFoundError: If start is not a known location.
        """
        if not self.graph.contains_node(start):
            raise EndpointNotFoundError(f"Location {start} does not exist.")
        furthest = self.graph.furthest_reachable_from(start)
        return furthest if furthest is not None else ""
