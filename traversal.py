"""
Breadth-first and depth-first traversal over a Graph.

All traversals iterate neighbours through the ordered edge view (ascending
neighbour index), so the recorded predecessors and component ids are
reproducible. Depth-first variants use explicit stacks and never recurse.
"""

from collections import deque
from typing import Iterator, List, Optional, Sequence

from graph import Graph
from nodes import Edge

# Predecessor of a start node, or of a node that was never reached.
NO_PREDECESSOR = -1


def bfs(graph: Graph, start: int) -> List[int]:
    """
    Level-order traversal from start.

    Returns:
        Predecessor array: the node that first discovered each node,
        NO_PREDECESSOR for start and unreached nodes.
    """
    graph.validate_index(start)
    n = graph.node_count()
    seen = [False] * n
    last = [NO_PREDECESSOR] * n

    pending = deque([start])
    seen[start] = True
    while pending:
        current = pending.popleft()
        for e in graph.edges_of(current):
            neighbor = e.dst
            if not seen[neighbor]:
                seen[neighbor] = True
                last[neighbor] = current
                pending.append(neighbor)
    return last


def dfs_visit(graph: Graph, start: int, visited: List[bool]) -> List[int]:
    """
    Depth-first exploration from start, marking visited in place.

    Visits nodes in exactly the order a recursive DFS over the ordered edge
    view would, but keeps a stack of per-node edge iterators instead of
    recursing.

    Returns:
        Newly visited nodes in discovery (preorder) order.
    """
    graph.validate_index(start)
    visited[start] = True
    order = [start]
    stack: List[Iterator[Edge]] = [iter(graph.edges_of(start))]

    while stack:
        for e in stack[-1]:
            neighbor = e.dst
            if not visited[neighbor]:
                visited[neighbor] = True
                order.append(neighbor)
                stack.append(iter(graph.edges_of(neighbor)))
                break
        else:
            stack.pop()
    return order


def dfs(graph: Graph, start: int) -> List[int]:
    """Discovery order of a depth-first search from start."""
    return dfs_visit(graph, start, [False] * graph.node_count())


def dfs_all(graph: Graph) -> List[int]:
    """Discovery order over every node, restarting at each unvisited index."""
    visited = [False] * graph.node_count()
    order: List[int] = []
    for i in range(graph.node_count()):
        if not visited[i]:
            order.extend(dfs_visit(graph, i, visited))
    return order


def dfs_stack(graph: Graph, start: int) -> List[int]:
    """
    Stack-based DFS from start returning a predecessor array.

    Neighbours are pushed in descending index order so they pop in ascending
    order. A node's predecessor is the node that first pushed it; later
    pushes of the same node do not overwrite it, and stale stack entries for
    already visited nodes are skipped on pop.
    """
    graph.validate_index(start)
    n = graph.node_count()
    seen = [False] * n
    last = [NO_PREDECESSOR] * n

    to_explore = [start]
    while to_explore:
        current = to_explore.pop()
        if seen[current]:
            continue
        seen[current] = True
        for e in reversed(graph.edges_of(current)):
            neighbor = e.dst
            if not seen[neighbor]:
                if last[neighbor] == NO_PREDECESSOR:
                    last[neighbor] = current
                to_explore.append(neighbor)
    return last


def connected_components(graph: Graph) -> List[int]:
    """
    Component id of every node.

    A fresh DFS is started from each unvisited node in ascending index
    order; everything it reaches gets the next id, starting at 0. On a
    directed graph this follows edge direction, so the ids depend on the
    index order of the start nodes.
    """
    n = graph.node_count()
    visited = [False] * n
    component = [-1] * n
    current = 0
    for i in range(n):
        if visited[i]:
            continue
        for node in dfs_visit(graph, i, visited):
            component[node] = current
        current += 1
    return component


def predecessor_path(pred: Sequence[int], target: int) -> Optional[List[int]]:
    """
    Walk a predecessor array back from target.

    Returns:
        [root, ..., target], or None if the array has a cycle. An unreached
        target has no predecessor either, so it comes back as [target].
    """
    path = [target]
    current = target
    while pred[current] != NO_PREDECESSOR:
        current = pred[current]
        path.append(current)
        if len(path) > len(pred):
            return None
    path.reverse()
    return path
