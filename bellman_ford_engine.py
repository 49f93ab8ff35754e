"""
Round-based Bellman-Ford engine.

Handles negative weights and reports a reachable negative cycle by returning
None instead of a distance vector.
"""

from typing import Dict, List, Optional, Sequence
import logging
import math

from algorithms import ShortestPathEngine
from graph import Graph
from nodes import Edge

logger = logging.getLogger(__name__)


def relax(edges: Sequence[Edge], dist: List[float], prev: Optional[List[int]] = None) -> bool:
    """
    Perform one Bellman-Ford relaxation pass over edges, in place.

    For each edge we combine the source's current cost with the edge weight.
    If the combined cost beats the target's current cost, we update it (and
    its predecessor, when prev is given).

    Returns:
        True if any distance improved.
    """
    changed = False
    for e in edges:
        candidate = dist[e.src] + e.weight
        if candidate < dist[e.dst]:
            dist[e.dst] = candidate
            if prev is not None:
                prev[e.dst] = e.src
            changed = True
    return changed


def _reaches(adjacency: Dict[int, List[int]], start: int, target: int) -> bool:
    seen = {start}
    stack = [start]
    while stack:
        current = stack.pop()
        if current == target:
            return True
        for neighbor in adjacency.get(current, ()):
            if neighbor not in seen:
                seen.add(neighbor)
                stack.append(neighbor)
    return False


def has_unbounded_cycle(edges: Sequence[Edge], dist: List[float]) -> bool:
    """
    Look for a negative cycle among nodes already driven to -inf.

    Once a distance is -inf, relaxing through it can no longer improve
    anything, so the regular detection pass is blind there. Within the
    reached nodes, a cycle through a -inf edge is negative. A cycle of
    finite edges is found by relaxing from an all-zero start: after as many
    rounds as there are nodes, a still changing round means a negative cycle.
    +inf edges never relax and are left out.
    """
    if -math.inf not in dist:
        return False

    inner = [
        e for e in edges
        if dist[e.src] < math.inf and dist[e.dst] < math.inf and e.weight < math.inf
    ]
    adjacency: Dict[int, List[int]] = {}
    for e in inner:
        adjacency.setdefault(e.src, []).append(e.dst)
    for e in inner:
        if e.weight == -math.inf and _reaches(adjacency, e.dst, e.src):
            return True

    finite = [e for e in inner if e.weight > -math.inf]
    potential = [0.0] * len(dist)
    changed = False
    for _ in range(sum(1 for d in dist if d < math.inf)):
        changed = relax(finite, potential)
        if not changed:
            break
    return changed


class BellmanFordEngine(ShortestPathEngine):
    """
    Single-source Bellman-Ford. Complexity: O(V * E).
    """

    def shortest_path_costs(self, graph: Graph, source: int) -> Optional[List[float]]:
        result = self.shortest_paths(graph, source)
        if result is None:
            return None
        return result[0]

    def shortest_paths(
        self, graph: Graph, source: int
    ) -> Optional[tuple[List[float], List[int]]]:
        """
        Run node_count - 1 relaxation rounds over the full edge list, then
        one more pass. If that extra pass still improves a distance, or a
        negative cycle hides among nodes at -inf, a negative cycle is
        reachable from source and None is returned.

        Rounds stop early once a round changes nothing; the result is the
        same, only convergence is faster.

        Raises:
            NodeIndexError: if source is out of range.
        """
        graph.validate_index(source)

        n = graph.node_count()
        dist: List[float] = [math.inf] * n
        prev: List[int] = [-1] * n
        dist[source] = 0.0
        edges = graph.all_edges()

        rounds = 0
        for _ in range(n - 1):
            rounds += 1
            if not relax(edges, dist, prev):
                break

        if relax(edges, list(dist)) or has_unbounded_cycle(edges, dist):
            logger.warning("Negative-weight cycle reachable from node %d", source)
            return None

        logger.debug("Bellman-Ford from %d converged after %d rounds", source, rounds)
        return dist, prev


def bellman_ford(graph: Graph, start: int) -> Optional[List[float]]:
    """Distance from start to every node, or None if a negative cycle is reachable."""
    return BellmanFordEngine().shortest_path_costs(graph, start)
