"""
Directed, weighted graph abstraction.

Nodes are identified by their index 0..node_count-1.
Edges are directed: src -> dst with float weight.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from errors import NodeIndexError
from nodes import Edge


class Graph(ABC):
    """Directed, weighted graph over integer node indices."""

    @abstractmethod
    def node_count(self) -> int:
        """Return the number of nodes in the graph."""
        raise NotImplementedError

    @abstractmethod
    def edges_of(self, node: int, ordered: bool = True) -> List[Edge]:
        """
        Outgoing edges of a given node.

        With ordered=True the edges are sorted by ascending neighbour index.
        This is the view every algorithm iterates over, so results do not
        depend on the storage layout. With ordered=False any order is
        returned, stable across calls while the graph is not mutated.
        """
        raise NotImplementedError

    @abstractmethod
    def edge(self, src: int, dst: int) -> Optional[Edge]:
        """
        Return the edge src -> dst, or None if there is none.

        Raises:
            NodeIndexError: if either index is out of range.
        """
        raise NotImplementedError

    def validate_index(self, *indices: int) -> None:
        """
        Raise NodeIndexError unless every index is in [0, node_count).
        """
        n = self.node_count()
        for i in indices:
            if not (0 <= i < n):
                raise NodeIndexError(indices, n)

    def has_edge(self, src: int, dst: int) -> bool:
        """True iff both indices are valid and the edge exists."""
        try:
            return self.edge(src, dst) is not None
        except NodeIndexError:
            return False

    def all_edges(self, ordered: bool = False) -> List[Edge]:
        """Every node's outgoing edges, concatenated in node order."""
        edges: List[Edge] = []
        for i in range(self.node_count()):
            edges.extend(self.edges_of(i, ordered=ordered))
        return edges
