from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Dict, Hashable, Iterator, List, Mapping, Sequence, Set, Tuple

_LOGGER = logging.getLogger(__name__)

Node = Hashable
Graph = Mapping[Node, Mapping[Node, float]]
Distances = Dict[Node, float]
Predecessors = Dict[Node, Node]

UNREACHABLE = math.inf


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors computed from a single start node.

    distances[v] stores the best distance from start to v (UNREACHABLE when
    no path exists), and predecessors[v] remembers the previous node along
    that path. The start node never has a predecessor.
    """

    start: Node
    distances: Distances = field(default_factory=dict)
    predecessors: Predecessors = field(default_factory=dict)

    def __iter__(self) -> Iterator:
        yield self.distances
        yield self.predecessors

    def distance_to(self, node: Node) -> float:
        return self.distances.get(node, UNREACHABLE)

    def is_reachable(self, node: Node) -> bool:
        return self.distance_to(node) != UNREACHABLE

    def reachable_nodes(self) -> List[Node]:
        return [node for node, distance in self.distances.items() if distance != UNREACHABLE]

    def tree_edges(self) -> List[Tuple[Node, Node]]:
        """Edges (predecessor, node) of the shortest-path tree."""
        return [(parent, node) for node, parent in self.predecessors.items()]


def nodes_of(graph: Graph) -> Set[Node]:
    """Every node named in the graph, including those only seen as neighbors."""
    nodes: Set[Node] = set(graph)
    for neighbors in graph.values():
        nodes.update(neighbors)
    return nodes


def compute_shortest_paths(graph: Graph, start: Node) -> ShortestPaths:
    """Compute single-source shortest paths using Dijkstra.

    Edge weights must be non-negative. The frontier holds (distance, node)
    entries and may contain several entries for the same node; entries whose
    distance is worse than the recorded one are discarded when popped.
    """
    distances: Distances = {node: UNREACHABLE for node in graph}
    predecessors: Predecessors = {}
    distances[start] = 0

    queue: List[Tuple[float, Node]] = [(0, start)]
    settled = 0
    stale = 0

    while queue:
        distance_u, u = heappop(queue)
        if distance_u > distances[u]:
            stale += 1
            continue
        settled += 1

        # Nodes that only appear as neighbors have no outgoing edges.
        for v, cost in graph.get(u, {}).items():
            candidate = distance_u + cost
            if candidate < distances.get(v, UNREACHABLE):
                distances[v] = candidate
                predecessors[v] = u
                heappush(queue, (candidate, v))

    _LOGGER.debug(
        "Dijkstra from %r settled %d node(s), skipped %d stale entries.",
        start,
        settled,
        stale,
    )
    return ShortestPaths(start=start, distances=distances, predecessors=predecessors)


def path_cost(graph: Graph, path: Sequence[Node]) -> float:
    """Return the total cost of walking along the given node sequence."""
    if len(path) < 2:
        return 0

    total_cost: float = 0
    for u, v in zip(path[:-1], path[1:]):
        edge_cost = graph.get(u, {}).get(v)
        if edge_cost is None:
            raise ValueError(f"Edge {u}->{v} not present in graph.")
        total_cost += edge_cost
    return total_cost


__all__ = [
    "Distances",
    "Graph",
    "Node",
    "Predecessors",
    "ShortestPaths",
    "UNREACHABLE",
    "compute_shortest_paths",
    "nodes_of",
    "path_cost",
]
