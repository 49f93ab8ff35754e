"""
Heap-based Dijkstra implementation.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface.
"""

from typing import List, Optional
import heapq
import logging
import math

from algorithms import ShortestPathEngine
from errors import NegativeWeightError
from graph import Graph
from settings import PreconditionPolicy, resolve_policy

logger = logging.getLogger(__name__)


class HeapDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap with lazy deletion.

    Heap entries are (cost, node) tuples, so equal costs pop in ascending
    node order. Complexity: O((V + E) log V).
    """

    def __init__(self, policy: Optional[PreconditionPolicy] = None) -> None:
        self.policy = policy

    def shortest_path_costs(self, graph: Graph, source: int) -> List[float]:
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(self, graph: Graph, source: int) -> tuple[List[float], List[int]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        Every node is seeded into the heap up front, the source at cost 0 and
        the rest at infinity. A node is settled the first time it is popped;
        any later, stale entries for it are skipped. Relaxation only targets
        unsettled neighbours.

        Raises:
            NodeIndexError: if source is out of range.
            NegativeWeightError: under the REJECT policy, if any edge weight
                is negative.
        """
        graph.validate_index(source)
        self._check_weights(graph)

        n = graph.node_count()
        dist: List[float] = [math.inf] * n
        prev: List[int] = [-1] * n
        settled: List[bool] = [False] * n
        dist[source] = 0.0

        pq = [(dist[i], i) for i in range(n)]
        heapq.heapify(pq)

        while pq:
            d_u, u = heapq.heappop(pq)

            # Skip outdated entries
            if settled[u]:
                continue
            settled[u] = True

            for e in graph.edges_of(u):
                v = e.dst
                if settled[v]:
                    continue
                alt = d_u + e.weight
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, v))

        logger.debug("Dijkstra from %d settled %d nodes", source, n)
        return dist, prev

    def _check_weights(self, graph: Graph) -> None:
        if resolve_policy(self.policy) is PreconditionPolicy.UNCHECKED:
            logger.debug("Skipping negative-weight check for Dijkstra")
            return
        for e in graph.all_edges():
            if e.weight < 0:
                raise NegativeWeightError(e.src, e.dst, e.weight)


def dijkstra(graph: Graph, start: int) -> List[float]:
    """Distance from start to every node; math.inf where unreachable."""
    return HeapDijkstraEngine().shortest_path_costs(graph, start)
