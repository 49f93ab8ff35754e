"""
Node and edge records for the adjacency-list graph.

A node owns its outgoing edges, keyed by neighbour index, so there is at
most one edge per neighbour and re-adding an edge overwrites the old one.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Edge:
    """
    Directed edge src -> dst with a float weight.

    Weights may be negative or infinite.
    """

    src: int
    dst: int
    weight: float


@dataclass
class Node:
    """
    Graph node: its position in the graph, an optional label, and its
    outgoing edges.
    """

    index: int
    label: Optional[str] = None
    _edges: Dict[int, Edge] = field(default_factory=dict, repr=False)

    def num_edges(self) -> int:
        return len(self._edges)

    def get_edge(self, neighbor: int) -> Optional[Edge]:
        return self._edges.get(neighbor)

    def add_edge(self, neighbor: int, weight: float) -> None:
        """Add or overwrite the edge to neighbor."""
        self._edges[neighbor] = Edge(self.index, neighbor, float(weight))

    def remove_edge(self, neighbor: int) -> None:
        """Remove the edge to neighbor; no-op if absent."""
        self._edges.pop(neighbor, None)

    def edge_list(self) -> List[Edge]:
        """Outgoing edges in insertion order."""
        return list(self._edges.values())

    def ordered_edge_list(self) -> List[Edge]:
        """Outgoing edges sorted by ascending neighbour index."""
        return [self._edges[k] for k in sorted(self._edges)]
