from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Set

from graph import Graph, Node, ShortestPaths, UNREACHABLE, compute_shortest_paths

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    start: Node
    target: Node
    path: List[Node] = field(default_factory=list)
    cost: float = UNREACHABLE

    @property
    def reachable(self) -> bool:
        return bool(self.path)

    def describe(self) -> str:
        return " -> ".join(str(node) for node in self.path)


def reconstruct_path(
    predecessors: Mapping[Node, Node], start: Node, target: Node
) -> List[Node]:
    """Walk the predecessor map back from target to start.

    Returns the nodes ordered start -> target, [start] when target is the
    start itself, and an empty list when target cannot be reached.
    """
    if target == start:
        return [start]

    path: List[Node] = [target]
    seen: Set[Node] = {target}
    while path[-1] != start:
        current = path[-1]
        if current not in predecessors or predecessors[current] in seen:
            _LOGGER.debug("No predecessor chain from %r back to %r.", target, start)
            return []
        previous = predecessors[current]
        seen.add(previous)
        path.append(previous)
    path.reverse()
    return path


def find_route(
    graph: Graph,
    start: Node,
    target: Node,
    result: Optional[ShortestPaths] = None,
) -> Route:
    """Recover both length and explicit path between start and target."""
    if result is None or result.start != start:
        result = compute_shortest_paths(graph, start)

    path = reconstruct_path(result.predecessors, start, target)
    if not path:
        return Route(start=start, target=target)
    return Route(start=start, target=target, path=path, cost=result.distance_to(target))


__all__ = ["Route", "find_route", "reconstruct_path"]
