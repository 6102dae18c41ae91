import logging
from numbers import Real
from typing import Any, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

from .errors import DuplicateKeyError, NotFoundError
from .hashtable import HashtableMap

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)
W = TypeVar("W", bound=Real)


class Node(Generic[N, W]):
    """
    A graph vertex. Holds the application supplied identifier and the edges
    attached to it. Nodes hash by identity, so two records with equal data
    are still distinct objects.
    """

    __slots__ = ("data", "edges_leaving", "edges_entering")

    def __init__(self, data: N) -> None:
        self.data = data
        self.edges_leaving: List["Edge[N, W]"] = []
        self.edges_entering: List["Edge[N, W]"] = []

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class Edge(Generic[N, W]):
    """A directed, weighted connection from predecessor to successor."""

    __slots__ = ("predecessor", "successor", "weight")

    def __init__(self, predecessor: Node[N, W], successor: Node[N, W], weight: W) -> None:
        self.predecessor = predecessor
        self.successor = successor
        self.weight = weight

    def __repr__(self) -> str:
        return f"Edge({self.predecessor.data!r} -> {self.successor.data!r}, {self.weight!r})"


class Graph(Generic[N, W]):
    """
    A directed graph with weighted edges. Nodes are registered in a
    HashtableMap keyed by their identifier; each node owns the list of its
    outgoing edges and keeps a back-reference list of incoming ones so that
    removing a node can detach every edge touching it.
    """

    def __init__(self, nodes: Optional[HashtableMap[N, Node[N, W]]] = None) -> None:
        """
        Args:
            nodes: Optional empty map to use as the node registry.

        Raises:
            ValueError: If the supplied map is not empty.
        """
        if nodes is None:
            nodes = HashtableMap()
        elif nodes.get_size() != 0:
            raise ValueError("Node registry must start empty.")
        self._nodes: HashtableMap[N, Node[N, W]] = nodes
        self._edge_count = 0

    def insert_node(self, data: N) -> None:
        """
        Adds a node to the graph.

        Args:
            data: The unique identifier for the node.

        Raises:
            NullKeyError: If data is None.
            DuplicateKeyError: If the node already exists.
        """
        if self._nodes.contains_key(data):
            raise DuplicateKeyError(f"Node {data} already exists.")
        self._nodes.put(data, Node(data))

    def remove_node(self, data: N) -> None:
        """
        Removes a node together with every edge that starts or ends at it.

        Raises:
            NotFoundError: If the node does not exist.
        """
        node = self.get_node(data)
        self._nodes.remove(data)

        removed = 0
        # A self-loop leaves node.edges_entering in the first pass.
        for edge in node.edges_leaving:
            edge.successor.edges_entering.remove(edge)
            removed += 1
        for edge in node.edges_entering:
            edge.predecessor.edges_leaving.remove(edge)
            removed += 1
        node.edges_leaving.clear()
        node.edges_entering.clear()
        self._edge_count -= removed

        logger.debug("Removed node %r and %d attached edge(s)", data, removed)

    def insert_edge(self, pred: N, succ: N, weight: W) -> None:
        """
        Adds a directed edge from pred to succ. If the edge already exists its
        weight is replaced and the edge count is unchanged.

        Args:
            pred: Identifier of the node the edge leaves.
            succ: Identifier of the node the edge enters.
            weight: Numeric weight, convertible to float.

        Raises:
            NotFoundError: If pred or succ is not a node of the graph.
            TypeError: If weight is not a real number or is a bool.
        """
        if not isinstance(weight, Real) or isinstance(weight, bool):
            raise TypeError(f"Edge weight must be a real number, got {weight!r}.")
        source = self.get_node(pred)
        target = self.get_node(succ)

        existing = self._find_edge(source, target)
        if existing is not None:
            existing.weight = weight
            return

        edge = Edge(source, target, weight)
        source.edges_leaving.append(edge)
        target.edges_entering.append(edge)
        self._edge_count += 1

    def remove_edge(self, pred: N, succ: N) -> None:
        """
        Removes the directed edge from pred to succ.

        Raises:
            NotFoundError: If either node or the edge does not exist.
        """
        edge = self._get_edge_record(pred, succ)
        edge.predecessor.edges_leaving.remove(edge)
        edge.successor.edges_entering.remove(edge)
        self._edge_count -= 1

    def contains_node(self, data: N) -> bool:
        """Checks if a node exists in the graph."""
        return self._nodes.contains_key(data)

    def contains_edge(self, pred: N, succ: N) -> bool:
        """Checks if a directed edge from pred to succ exists."""
        if not (self._nodes.contains_key(pred) and self._nodes.contains_key(succ)):
            return False
        return self._find_edge(self._nodes.get(pred), self._nodes.get(succ)) is not None

    def get_edge(self, pred: N, succ: N) -> W:
        """
        Gets the weight of the edge from pred to succ.

        Raises:
            NotFoundError: If either node or the edge does not exist.
        """
        return self._get_edge_record(pred, succ).weight

    def get_node(self, data: N) -> Node[N, W]:
        """
        Returns the node record for an identifier.

        Raises:
            NotFoundError: If the node does not exist.
        """
        if not self._nodes.contains_key(data):
            raise NotFoundError(f"Node {data} does not exist.")
        return self._nodes.get(data)

    def neighbors(self, data: N) -> Iterator[N]:
        """
        Returns an iterator over the successors of a node.

        Raises:
            NotFoundError: If the node does not exist.
        """
        node = self.get_node(data)
        return (edge.successor.data for edge in node.edges_leaving)

    def edges_leaving(self, data: N) -> List[Tuple[N, W]]:
        """
        Returns the outgoing edges of a node as (successor, weight) pairs, in
        insertion order.

        Raises:
            NotFoundError: If the node does not exist.
        """
        node = self.get_node(data)
        return [(edge.successor.data, edge.weight) for edge in node.edges_leaving]

    def get_all_nodes(self) -> List[N]:
        """Returns all node identifiers. Order is unspecified."""
        return self._nodes.get_keys()

    def get_node_count(self) -> int:
        """Returns the number of nodes in the graph."""
        return self._nodes.get_size()

    def get_edge_count(self) -> int:
        """Returns the number of edges in the graph."""
        return self._edge_count

    def clear(self) -> None:
        """Removes every node and edge."""
        self._nodes.clear()
        self._edge_count = 0

    def __contains__(self, data: Any) -> bool:
        return self.contains_node(data)

    def __len__(self) -> int:
        return self.get_node_count()

    def _find_edge(self, source: Node[N, W], target: Node[N, W]) -> Optional[Edge[N, W]]:
        for edge in source.edges_leaving:
            if edge.successor is target:
                return edge
        return None

    def _get_edge_record(self, pred: N, succ: N) -> Edge[N, W]:
        edge = self._find_edge(self.get_node(pred), self.get_node(succ))
        if edge is None:
            raise NotFoundError(f"Edge {pred} -> {succ} does not exist.")
        return edge
