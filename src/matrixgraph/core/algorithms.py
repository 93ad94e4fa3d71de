"""
Graph algorithms over a GraphMatrix.

Every function reads the graph through its ``matrix`` accessor and never
mutates it. Negative outcomes (no path, not bipartite, no negative cycle)
come back as the sentinel strings from ``matrixgraph.config``, not as
exceptions.

Some checks are deliberately anchored at vertex 0 or use a parent-only
back-edge rule; each function's docstring states exactly what it tests.
"""
from typing import List, Optional
from collections import deque
import logging

from matrixgraph import config
from matrixgraph.core.exceptions import VertexOutOfRange
from matrixgraph.core.graph_matrix import GraphMatrix

logger = logging.getLogger(__name__)


def is_connected(graph: GraphMatrix) -> bool:
    """
    Check whether every vertex is reachable from vertex 0.

    Breadth-first search along directed edges starting at vertex 0. This
    is reachability from 0, not strong or weak connectivity: a vertex that
    reaches everything but is not reached from 0 makes the result False.
    An empty graph is connected.
    """
    matrix = graph.matrix
    n = len(matrix)
    if n == 0:
        return True

    visited = [False] * n
    queue = deque([0])

    while queue:
        current = queue.popleft()
        if visited[current]:
            continue
        visited[current] = True

        for neighbor, weight in enumerate(matrix[current]):
            if weight != 0 and not visited[neighbor]:
                queue.append(neighbor)

    connected = all(visited)
    logger.debug("is_connected(%s) -> %s", graph.name, connected)
    return connected


def shortest_path(graph: GraphMatrix, start: int, end: int) -> str:
    """
    Find the path from ``start`` to ``end`` with the fewest hops.

    Every edge counts as one hop whatever its weight.

    Returns:
        Vertex indices joined by '->', e.g. '0->1->2', or NO_PATH ('-1')
        when ``end`` is unreachable. ``start == end`` gives the single vertex.

    Raises:
        VertexOutOfRange: If ``start`` or ``end`` is not a vertex
    """
    matrix = graph.matrix
    n = len(matrix)
    for vertex in (start, end):
        if not 0 <= vertex < n:
            raise VertexOutOfRange(f"Vertex {vertex} is not in 0..{n - 1}")

    parent: List[Optional[int]] = [None] * n
    distance = [-1] * n
    distance[start] = 0
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor, weight in enumerate(matrix[current]):
            if weight != 0 and distance[neighbor] == -1:
                distance[neighbor] = distance[current] + 1
                parent[neighbor] = current
                queue.append(neighbor)

    if distance[end] == -1:
        logger.debug("shortest_path(%s, %d, %d): no path", graph.name, start, end)
        return config.NO_PATH

    path = [end]
    while path[-1] != start:
        path.append(parent[path[-1]])
    path.reverse()

    return config.PATH_SEPARATOR.join(str(vertex) for vertex in path)


def is_contains_cycle(graph: GraphMatrix) -> bool:
    """
    Detect a cycle with an iterative depth-first search over all components.

    A cycle is reported when an edge leads from the current vertex to an
    already visited vertex other than the vertex recorded as its parent.
    Only the immediate parent is checked, not the whole DFS stack, so:

    - a directed 2-cycle (0 <-> 1) is NOT reported, since the edge back to
      0 goes to 1's parent;
    - an acyclic graph where a vertex is reached again through a second,
      already finished branch IS reported.
    """
    matrix = graph.matrix
    n = len(matrix)
    visited = [False] * n
    parent: List[Optional[int]] = [None] * n

    for root in range(n):
        if visited[root]:
            continue

        stack = [root]
        while stack:
            current = stack.pop()
            if visited[current]:
                continue
            visited[current] = True

            for neighbor, weight in enumerate(matrix[current]):
                if weight == 0:
                    continue
                if not visited[neighbor]:
                    stack.append(neighbor)
                    parent[neighbor] = current
                elif parent[current] != neighbor:
                    logger.debug(
                        "is_contains_cycle(%s): edge %d->%d closes a cycle",
                        graph.name, current, neighbor
                    )
                    return True

    return False


def is_bipartite(graph: GraphMatrix) -> str:
    """
    Two-color the graph by BFS from vertex 0.

    Only vertex 0's component is colored. Vertices never reached keep the
    UNCOLORED value and are bucketed into group B along with color-1
    vertices.

    Returns:
        'The graph is bipartite: A={0, 2}, B={1, 3}' on success, or
        NOT_BIPARTITE ('0') when an edge joins two same-colored vertices.
    """
    matrix = graph.matrix
    n = len(matrix)
    color = [config.UNCOLORED] * n

    if n > 0:
        color[0] = config.COLOR_A
        queue = deque([0])

        while queue:
            current = queue.popleft()
            for neighbor, weight in enumerate(matrix[current]):
                if weight == 0:
                    continue
                if color[neighbor] == config.UNCOLORED:
                    color[neighbor] = 1 - color[current]
                    queue.append(neighbor)
                elif color[neighbor] == color[current]:
                    logger.debug(
                        "is_bipartite(%s): edge %d->%d joins same color",
                        graph.name, current, neighbor
                    )
                    return config.NOT_BIPARTITE

    group_a = [vertex for vertex in range(n) if color[vertex] == config.COLOR_A]
    group_b = [vertex for vertex in range(n) if color[vertex] != config.COLOR_A]

    return config.BIPARTITE_TEMPLATE.format(
        group_a=config.CELL_SEPARATOR.join(str(vertex) for vertex in group_a),
        group_b=config.CELL_SEPARATOR.join(str(vertex) for vertex in group_b),
    )


def negative_cycle(graph: GraphMatrix) -> str:
    """
    Detect a negative-weight cycle with Bellman-Ford from vertex 0.

    Graphs without any cycle (per ``is_contains_cycle``) return
    NO_NEGATIVE_CYCLE immediately. Otherwise N-1 relaxation passes run
    from vertex 0, followed by one more pass: the first edge that still
    relaxes yields 'Negative cycle: <d>', where d is the source vertex's
    distance at that moment, not the cycle's total weight.
    """
    if not is_contains_cycle(graph):
        return config.NO_NEGATIVE_CYCLE

    matrix = graph.matrix
    n = len(matrix)
    edges = [
        (u, v, weight)
        for u, row in enumerate(matrix)
        for v, weight in enumerate(row)
        if weight != 0
    ]

    # None marks vertices not yet reached from 0
    distance: List[Optional[int]] = [None] * n
    distance[0] = 0

    for _ in range(n - 1):
        for u, v, weight in edges:
            if distance[u] is None:
                continue
            candidate = distance[u] + weight
            if distance[v] is None or candidate < distance[v]:
                distance[v] = candidate

    for u, v, weight in edges:
        if distance[u] is None:
            continue
        if distance[v] is None or distance[u] + weight < distance[v]:
            logger.debug(
                "negative_cycle(%s): edge %d->%d still relaxes", graph.name, u, v
            )
            return config.NEGATIVE_CYCLE_TEMPLATE.format(distance=distance[u])

    return config.NO_NEGATIVE_CYCLE


class GraphAlgorithms:
    """Namespace grouping the algorithm functions."""

    is_connected = staticmethod(is_connected)
    shortest_path = staticmethod(shortest_path)
    is_contains_cycle = staticmethod(is_contains_cycle)
    is_bipartite = staticmethod(is_bipartite)
    negative_cycle = staticmethod(negative_cycle)
