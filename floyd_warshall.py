"""
Floyd-Warshall all-pairs shortest paths.

The cost and predecessor matrices are numpy arrays. For each intermediate
node k, the i/j double loop is a single vectorised update using the same
strict-improvement rule as the textbook triple loop.
"""

from typing import List, Optional, Sequence, Union
import logging

import numpy as np

from algorithms import AllPairsEngine
from errors import NegativeCycleError
from graph import Graph
from settings import PreconditionPolicy, resolve_policy

logger = logging.getLogger(__name__)

PredecessorMatrix = Union[np.ndarray, Sequence[Sequence[int]]]


class FloydWarshallEngine(AllPairsEngine):
    """
    Dense all-pairs solver. Complexity: O(V^3) time, O(V^2) memory.
    """

    def __init__(self, policy: Optional[PreconditionPolicy] = None) -> None:
        self.policy = policy

    def shortest_paths(self, graph: Graph) -> tuple[np.ndarray, np.ndarray]:
        """
        Build the direct-edge matrices, then relax through every k.

        cost starts at 0 on the diagonal, the edge weight where an edge
        i -> j exists and inf elsewhere. last[i][j] starts at i for a direct
        edge and -1 otherwise; the diagonal stays -1. Improving i -> j via k
        inherits last[k][j], the hop before j on the k -> j sub-path.

        Raises:
            NegativeCycleError: under the REJECT policy, if the graph has a
                negative-weight cycle.
        """
        n = graph.node_count()
        cost = np.full((n, n), np.inf, dtype=np.float64)
        last = np.full((n, n), -1, dtype=np.int64)

        for e in graph.all_edges():
            if e.src == e.dst:
                continue
            cost[e.src, e.dst] = e.weight
            last[e.src, e.dst] = e.src
        np.fill_diagonal(cost, 0.0)

        # inf + -inf gives nan, which never compares as an improvement
        with np.errstate(invalid="ignore"):
            for k in range(n):
                via = cost[:, k, np.newaxis] + cost[np.newaxis, k, :]
                better = via < cost
                cost = np.where(better, via, cost)
                last = np.where(better, last[k, :][np.newaxis, :], last)

        self._check_cycles(graph, cost)
        logger.debug("Floyd-Warshall finished over %d nodes", n)
        return cost, last

    def _check_cycles(self, graph: Graph, cost: np.ndarray) -> None:
        if resolve_policy(self.policy) is PreconditionPolicy.UNCHECKED:
            logger.debug("Skipping negative-cycle check for Floyd-Warshall")
            return
        negative = np.flatnonzero(np.diag(cost) < 0)
        if negative.size:
            raise NegativeCycleError(int(negative[0]))
        for e in graph.all_edges():
            if e.src == e.dst and e.weight < 0:
                raise NegativeCycleError(e.src)


def floyd_warshall(graph: Graph) -> np.ndarray:
    """Predecessor matrix for every node pair; -1 where no path exists."""
    _, last = FloydWarshallEngine().shortest_paths(graph)
    return last


def all_pairs_shortest_paths(graph: Graph) -> tuple[np.ndarray, np.ndarray]:
    """(cost, last) matrices for every node pair."""
    return FloydWarshallEngine().shortest_paths(graph)


def reconstruct_path(last: PredecessorMatrix, i: int, j: int) -> Optional[List[int]]:
    """
    Walk last[i][...] back from j to i.

    Returns:
        [i, ..., j]; [i] when i == j; None when j is unreachable from i.

    Raises:
        NegativeCycleError: if the predecessor chain loops without reaching i,
            which only happens on matrices computed over a negative cycle.
    """
    if i == j:
        return [i]
    if last[i][j] == -1:
        return None

    n = len(last)
    path = [j]
    current = j
    while current != i:
        current = int(last[i][current])
        if current == -1:
            return None
        path.append(current)
        if len(path) > n:
            raise NegativeCycleError(j)
    path.reverse()
    return path
