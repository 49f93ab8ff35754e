"""
Concrete weighted graph implementation.

Implements the Graph interface using a list of Node objects, each holding a
neighbour -> Edge mapping. Supports directed and undirected graphs.
"""

from typing import Iterable, List, Optional
import logging
import math

from graph import Graph
from nodes import Edge, Node

logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph):
    """
    Weighted graph backed by an append-only list of nodes.

    Node indices are assigned at insertion and never reused. When undirected
    is True, every edge insertion or removal is mirrored on (dst, src).
    """

    def __init__(self, node_count: int = 0, undirected: bool = False) -> None:
        self.undirected = undirected
        self._nodes: List[Node] = []
        for _ in range(node_count):
            self.insert_node()

    @classmethod
    def from_edges(
        cls,
        node_count: int,
        edges: Iterable[tuple[int, int, float]],
        undirected: bool = False,
    ) -> "AdjacencyListGraph":
        """Build a graph with node_count nodes and the given (src, dst, weight) edges."""
        g = cls(node_count, undirected=undirected)
        for src, dst, weight in edges:
            g.insert_edge(src, dst, weight)
        return g

    # --- Mutation API --------------------------------------------------------

    def insert_node(self, label: Optional[str] = None) -> Node:
        """Append a node whose index is the current node count."""
        node = Node(len(self._nodes), label)
        self._nodes.append(node)
        logger.debug("Inserted node %d (label=%r)", node.index, label)
        return node

    def insert_edge(self, src: int, dst: int, weight: float) -> None:
        """
        Add or overwrite the edge src -> dst.

        Raises:
            NodeIndexError: if either index is out of range.
            ValueError: if weight is NaN.
        """
        self.validate_index(src, dst)
        if math.isnan(weight):
            raise ValueError(f"Edge {src} -> {dst} has a NaN weight")
        self._nodes[src].add_edge(dst, weight)
        if self.undirected:
            self._nodes[dst].add_edge(src, weight)
        logger.debug("Inserted edge %d -> %d (weight=%s)", src, dst, weight)

    def remove_edge(self, src: int, dst: int) -> None:
        """
        Remove the edge src -> dst; removing a missing edge is a no-op.

        Raises:
            NodeIndexError: if either index is out of range.
        """
        self.validate_index(src, dst)
        self._nodes[src].remove_edge(dst)
        if self.undirected:
            self._nodes[dst].remove_edge(src)
        logger.debug("Removed edge %d -> %d", src, dst)

    # --- Graph interface -----------------------------------------------------

    def node_count(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def nodes(self) -> List[Node]:
        return list(self._nodes)  # callers cannot reorder or append

    def node(self, index: int) -> Node:
        self.validate_index(index)
        return self._nodes[index]

    def edges_of(self, node: int, ordered: bool = True) -> List[Edge]:
        self.validate_index(node)
        if ordered:
            return self._nodes[node].ordered_edge_list()
        return self._nodes[node].edge_list()

    def edge(self, src: int, dst: int) -> Optional[Edge]:
        self.validate_index(src, dst)
        return self._nodes[src].get_edge(dst)
