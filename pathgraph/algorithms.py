import heapq
import itertools
import logging
from typing import Dict, Hashable, List, NamedTuple, Optional, Tuple

from .errors import EndpointNotFoundError, NoPathError
from .graph import Graph, Node
from .hashtable import HashtableMap

logger = logging.getLogger(__name__)


def _settled_capacity(graph: Graph) -> int:
    # Twice the node count keeps the settled set below the resize threshold.
    return 2 * max(graph.get_node_count(), 1)


class SearchNode(NamedTuple):
    """
    One candidate path found while searching: the node it ends at, its total
    cost from the start, and the arena index of the SearchNode it extends
    (None for the start).
    """

    node: Node
    cost: float
    predecessor: Optional[int]


def _compute_shortest_path(
    graph: Graph, start: Hashable, end: Hashable
) -> Tuple[SearchNode, List[SearchNode]]:
    """
    Runs Dijkstra's algorithm from start until end is settled.

    SearchNodes live in an arena list and refer to their predecessor by index,
    so the whole search state is released when the arena goes out of scope.

    Returns:
        The settled SearchNode for end, and the arena holding its predecessor
        chain.

    Raises:
        EndpointNotFoundError: If start or end is not a node of the graph.
        NoPathError: If end cannot be reached from start.
    """
    if not graph.contains_node(start) or not graph.contains_node(end):
        raise EndpointNotFoundError(
            f"Start node {start} or end node {end} not found in the graph."
        )

    target = graph.get_node(end)
    arena: List[SearchNode] = [SearchNode(graph.get_node(start), 0.0, None)]
    # (cost, push order, arena index); push order makes equal-cost pops FIFO.
    counter = itertools.count()
    frontier: List[Tuple[float, int, int]] = [(0.0, next(counter), 0)]
    settled: HashtableMap[Node, Node] = HashtableMap(_settled_capacity(graph))

    while frontier:
        _, _, index = heapq.heappop(frontier)
        current = arena[index]

        # Stale entry: a cheaper path to this node was settled earlier.
        if settled.contains_key(current.node):
            continue
        settled.put(current.node, current.node)

        if current.node is target:
            logger.debug(
                "Settled %r from %r at cost %s after %d node(s)",
                end, start, current.cost, settled.get_size(),
            )
            return current, arena

        for edge in current.node.edges_leaving:
            if settled.contains_key(edge.successor):
                continue
            cost = current.cost + float(edge.weight)
            arena.append(SearchNode(edge.successor, cost, index))
            heapq.heappush(frontier, (cost, next(counter), len(arena) - 1))

    raise NoPathError(f"No path exists from {start} to {end}.")


def _walk_back(result: SearchNode, arena: List[SearchNode]) -> List[Hashable]:
    path: List[Hashable] = [result.node.data]
    while result.predecessor is not None:
        result = arena[result.predecessor]
        path.append(result.node.data)
    path.reverse()
    return path


def shortest_path_data(graph: Graph, start: Hashable, end: Hashable) -> List[Hashable]:
    """
    Returns the node identifiers along the cheapest path from start to end,
    both included.

    Raises:
        EndpointNotFoundError: If start or end is not a node of the graph.
        NoPathError: If end cannot be reached from start.
    """
    result, arena = _compute_shortest_path(graph, start, end)
    return _walk_back(result, arena)


def shortest_path_cost(graph: Graph, start: Hashable, end: Hashable) -> float:
    """
    Returns the total weight of the cheapest path from start to end.

    Raises:
        EndpointNotFoundError: If start or end is not a node of the graph.
        NoPathError: If end cannot be reached from start.
    """
    result, _ = _compute_shortest_path(graph, start, end)
    return result.cost


def dijkstra(graph: Graph, start: Hashable, end: Hashable) -> Tuple[float, List[Hashable]]:
    """
    Calculates the shortest path between two nodes using Dijkstra's algorithm.

    Args:
        graph: The graph on which to perform the algorithm.
        start: The starting node for the path.
        end: The destination node for the path.

    Returns:
        A tuple containing:
        - cost: The total weight of the shortest path.
        - path: The nodes along that path, from start to end inclusive.

    Raises:
        EndpointNotFoundError: If start or end is not a node of the graph.
        NoPathError: If end cannot be reached from start.
    """
    result, arena = _compute_shortest_path(graph, start, end)
    return result.cost, _walk_back(result, arena)


def shortest_path_costs(graph: Graph, start: Hashable) -> Dict[Hashable, float]:
    """
    Calculates the cost of the cheapest path from start to every reachable
    node. Unreachable nodes are left out; start maps to 0.0.

    Raises:
        EndpointNotFoundError: If start is not a node of the graph.
    """
    if not graph.contains_node(start):
        raise EndpointNotFoundError(f"Start node {start} not found in the graph.")

    counter = itertools.count()
    frontier: List[Tuple[float, int, Node]] = [(0.0, next(counter), graph.get_node(start))]
    settled: HashtableMap[Node, Node] = HashtableMap(_settled_capacity(graph))
    costs: Dict[Hashable, float] = {}

    while frontier:
        cost, _, node = heapq.heappop(frontier)
        if settled.contains_key(node):
            continue
        settled.put(node, node)
        costs[node.data] = cost

        for edge in node.edges_leaving:
            if not settled.contains_key(edge.successor):
                heapq.heappush(
                    frontier, (cost + float(edge.weight), next(counter), edge.successor)
                )

    return costs


def furthest_reachable_from(graph: Graph, start: Hashable) -> Optional[Hashable]:
    """
    Finds the node whose shortest path from start is the most expensive.

    Nodes that cannot be reached from start are skipped. On equal costs the
    node listed first by ``graph.get_all_nodes()`` wins.

    Returns:
        The furthest node, or None if no other node is reachable.

    Raises:
        EndpointNotFoundError: If start is not a node of the graph.
    """
    if not graph.contains_node(start):
        raise EndpointNotFoundError(f"Start node {start} not found in the graph.")

    furthest: Optional[Hashable] = None
    longest = -1.0
    for candidate in graph.get_all_nodes():
        if candidate == start:
            continue
        try:
            cost = shortest_path_cost(graph, start, candidate)
        except NoPathError:
            continue
        if cost > longest:
            longest = cost
            furthest = candidate
    return furthest


class DijkstraGraph(Graph):
    """
    A Graph that answers shortest path queries directly. This is the object
    handed to the query layer: it exposes ``get_all_nodes`` together with the
    path queries below.
    """

    def shortest_path_data(self, start: Hashable, end: Hashable) -> List[Hashable]:
        return shortest_path_data(self, start, end)

    def shortest_path_cost(self, start: Hashable, end: Hashable) -> float:
        return shortest_path_cost(self, start, end)

    def shortest_path_costs(self, start: Hashable) -> Dict[Hashable, float]:
        return shortest_path_costs(self, start)

    def furthest_reachable_from(self, start: Hashable) -> Optional[Hashable]:
        return furthest_reachable_from(self, start)
