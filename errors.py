"""
Exception types raised by the graph data model and algorithms.

A reachable negative cycle in Bellman-Ford is not an error here: that engine
reports it by returning None.
"""


class GraphError(Exception):
    """Base class for all graph library errors."""


class NodeIndexError(GraphError, IndexError):
    """
    A node index outside [0, node_count) was passed to the graph.

    Subclasses the builtin IndexError so callers can catch either.
    """

    def __init__(self, indices: tuple[int, ...], node_count: int) -> None:
        self.indices = tuple(indices)
        self.node_count = node_count
        if len(self.indices) == 2:
            src, dst = self.indices
            where = f"from: {src}, to: {dst}"
        else:
            where = ", ".join(str(i) for i in self.indices)
        super().__init__(f"Node out of range: {where} (node_count={node_count})")


class NegativeWeightError(GraphError, ValueError):
    """Dijkstra was given a graph containing a negative edge weight."""

    def __init__(self, src: int, dst: int, weight: float) -> None:
        self.src = src
        self.dst = dst
        self.weight = weight
        super().__init__(
            f"Dijkstra requires non-negative weights; edge {src} -> {dst} has weight {weight}"
        )


class NegativeCycleError(GraphError, ValueError):
    """Floyd-Warshall was given a graph with a negative-weight cycle."""

    def __init__(self, node: int) -> None:
        self.node = node
        super().__init__(f"Negative-weight cycle through node {node}")
