"""Shortest paths, minimum spanning trees and reachability on edge lists."""

import math
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from typing import NamedTuple


class Edge(NamedTuple):
    """A directed (or, for spanning trees, undirected) weighted edge."""

    source: int
    target: int
    weight: int = 0


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def bellman_ford(
    vertex_count: int, edges: Sequence[Edge], source: int
) -> list[float]:
    """Return shortest distances from ``source``; unreachable vertices get ``math.inf``.

    Raises NegativeCycleError if a negative cycle is reachable.
    """
    if not 0 <= source < vertex_count:
        raise ValueError(f"source {source} outside 0..{vertex_count - 1}")
    distance: list[float] = [math.inf] * vertex_count
    distance[source] = 0
    for _ in range(vertex_count - 1):
        for u, v, weight in edges:
            if distance[u] != math.inf and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
    for u, v, weight in edges:
        if distance[u] != math.inf and distance[u] + weight < distance[v]:
            raise NegativeCycleError("graph contains a negative weight cycle")
    return distance


def kruskal_mst(
    vertex_count: int, edges: Iterable[Edge]
) -> tuple[int, list[Edge]]:
    """Return the total weight and chosen edges of a minimum spanning forest.

    Edges are taken by weight, ties broken by target vertex.
    """
    parent = list(range(vertex_count))
    size = [1] * vertex_count

    def find(node: int) -> int:
        root = node
        while parent[root] != root:
            root = parent[root]
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    cost = 0
    chosen: list[Edge] = []
    for edge in sorted(edges, key=lambda e: (e.weight, e.target)):
        x_root = find(edge.source)
        y_root = find(edge.target)
        if x_root == y_root:
            continue
        cost += edge.weight
        chosen.append(edge)
        if size[y_root] >= size[x_root]:
            parent[x_root] = y_root
            size[y_root] += size[x_root]
        else:
            parent[y_root] = x_root
            size[x_root] += size[y_root]
    return cost, chosen


def path_exists(edges: Iterable[Sequence[int]], source: int, target: int) -> bool:
    """Return whether ``target`` is reachable from ``source`` along directed edges."""
    if source == target:
        return True
    adjacency: dict[int, list[int]] = defaultdict(list)
    for u, v, *_ in edges:
        adjacency[u].append(v)
    visited = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour == target:
                return True
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return False