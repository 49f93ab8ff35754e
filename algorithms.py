"""
Algorithm interfaces for shortest paths.

Keeps the algorithms separate from the graph storage. Every engine borrows
the graph read-only and returns freshly allocated results.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

import numpy as np

from graph import Graph


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: int) -> Optional[List[float]]:
        """
        Compute shortest-path costs from source to every node.

        Returns:
            List of length node_count; dist[source] == 0 and unreachable
            nodes carry math.inf. None if the costs are undefined because a
            negative cycle is reachable from source.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: int
    ) -> Optional[tuple[List[float], List[int]]]:
        """
        Compute shortest-path costs plus the predecessor of each node.

        Returns:
            (dist, prev) where prev[v] is the node before v on a shortest
            path, or -1 for the source and unreachable nodes. None under the
            same condition as shortest_path_costs.
        """
        raise NotImplementedError


class AllPairsEngine(ABC):
    """
    Interface for all-pairs shortest-path computation.
    """

    @abstractmethod
    def shortest_paths(self, graph: Graph) -> tuple[np.ndarray, np.ndarray]:
        """
        Compute the cost and predecessor matrices.

        Returns:
            (cost, last), both node_count x node_count. last[i][j] is the
            node before j on a shortest i -> j path, or -1 if there is no
            path or i == j.
        """
        raise NotImplementedError
