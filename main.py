from __future__ import annotations

import argparse
import copy
import logging
import math
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from graph import Graph, ShortestPaths, UNREACHABLE, compute_shortest_paths, path_cost
from paths import Route, find_route

_LOGGER = logging.getLogger(__name__)

SAMPLE_GRAPH: Dict[str, Dict[str, int]] = {
    "A": {"B": 7, "C": 9, "F": 14},
    "B": {"C": 10, "D": 15},
    "C": {"D": 11, "F": 2},
    "D": {"E": 6},
    "E": {"F": 8},
    "F": {"E": 9},
}

DEFAULT_CONFIG: Dict[str, str] = {
    "start_node": "A",
    "target_node": "D",
    "log_level": "WARNING",
}


def build_sample_graph() -> Dict[str, Dict[str, int]]:
    return copy.deepcopy(SAMPLE_GRAPH)


def load_config(path: Optional[Path]) -> Dict:
    """Read the YAML run configuration and merge it over the defaults."""
    config = dict(DEFAULT_CONFIG)
    if path is None:
        return config

    with path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle)

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: expected a mapping at the top level.")

    unknown = sorted(set(loaded) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"{path}: unknown configuration key(s): {', '.join(unknown)}")

    config.update(loaded)
    return config


def format_distance(distance: float) -> str:
    return "Unreachable" if distance == UNREACHABLE else str(distance)


def print_distances(result: ShortestPaths) -> None:
    print(f"\nShortest Distances from {result.start}:")
    for node in sorted(result.distances, key=str):
        print(f"  Node {node}: {format_distance(result.distances[node])}")


def print_route(route: Route) -> None:
    if route.reachable:
        print(f"\nShortest Path to {route.target} (Distance: {format_distance(route.cost)}):")
        print(route.describe())
    else:
        print(f"\nNode {route.target} is unreachable from {route.start}.")


def run(graph: Graph, start: str, target: str) -> Tuple[ShortestPaths, Route]:
    print(f"--- Running Dijkstra's Algorithm from Node {start} ---")

    result = compute_shortest_paths(graph, start)
    print_distances(result)

    route = find_route(graph, start, target, result=result)
    if route.reachable:
        walked = path_cost(graph, route.path)
        if not math.isclose(walked, route.cost):
            raise RuntimeError(
                f"Route {route.describe()} costs {walked} but its recorded distance is {route.cost}."
            )
    print_route(route)
    return result, route


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run Dijkstra's shortest-path algorithm on the sample graph."
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional YAML run configuration (start_node, target_node, log_level).",
    )
    parser.add_argument("--start", help="Start node (overrides the configuration).")
    parser.add_argument("--target", help="Target node (overrides the configuration).")
    parser.add_argument(
        "--log-level",
        help="Logging level, e.g. DEBUG or INFO (overrides the configuration).",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Show a matplotlib drawing of the graph and the shortest path.",
    )
    parser.add_argument(
        "--figure-out",
        type=Path,
        help="Optional path to save the drawing as an image.",
    )
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.start:
        config["start_node"] = args.start
    if args.target:
        config["target_node"] = args.target
    if args.log_level:
        config["log_level"] = args.log_level

    logging.basicConfig(
        level=str(config["log_level"]).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.info(
        "Start %s, target %s.", config["start_node"], config["target_node"]
    )

    graph = build_sample_graph()
    start = config["start_node"]
    result, route = run(graph, start, config["target_node"])

    if args.visualize or args.figure_out:
        from visualize import draw_route

        draw_route(
            graph,
            result,
            route=route,
            output=args.figure_out,
            show=args.visualize,
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
