from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from graph import Graph, Node, ShortestPaths, nodes_of
from paths import Route

_LOGGER = logging.getLogger(__name__)


def build_networkx_graph(graph: Graph) -> nx.DiGraph:
    g = nx.DiGraph()
    g.add_nodes_from(sorted(nodes_of(graph), key=str))
    for origin, neighbors in graph.items():
        for target, weight in neighbors.items():
            g.add_edge(origin, target, weight=weight)
    return g


def compute_layout(graph: nx.DiGraph) -> Dict[Node, Tuple[float, float]]:
    return nx.spring_layout(graph, seed=42)


def node_labels(graph: nx.DiGraph, result: ShortestPaths) -> Dict[Node, str]:
    labels: Dict[Node, str] = {}
    for node in graph.nodes:
        distance = result.distance_to(node)
        shown = "∞" if math.isinf(distance) else f"{distance:g}"
        labels[node] = f"{node}\n{shown}"
    return labels


def route_edges(path: Sequence[Node]) -> List[Tuple[Node, Node]]:
    return list(zip(path[:-1], path[1:]))


def draw_route(
    graph: Graph,
    result: ShortestPaths,
    route: Route | None = None,
    output: Path | None = None,
    show: bool = False,
    require_path: bool = False,
) -> plt.Figure:
    """Draw the graph with its shortest-path tree and, if reachable, the route."""
    if require_path and (route is None or not route.reachable):
        raise RuntimeError("Route highlight requested but the target is unreachable.")

    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(
        graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0, arrows=True
    )
    nx.draw_networkx_edges(
        graph_nx,
        layout,
        edgelist=result.tree_edges(),
        edge_color="#1f77b4",
        width=1.8,
        arrows=True,
        ax=ax,
    )

    if route is not None and route.reachable:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=route_edges(route.path),
            edge_color="#d62728",
            width=2.5,
            arrows=True,
            ax=ax,
        )

    node_colors = [
        "#2ca02c" if node == result.start else
        ("#c7e9c0" if result.is_reachable(node) else "#dddddd")
        for node in graph_nx.nodes
    ]
    nx.draw_networkx_nodes(graph_nx, layout, node_color=node_colors, node_size=700, ax=ax)
    nx.draw_networkx_labels(
        graph_nx, layout, labels=node_labels(graph_nx, result), font_size=9, ax=ax
    )

    edge_labels = {(u, v): data["weight"] for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    if route is None:
        title = f"Shortest paths from {result.start}"
    elif route.reachable:
        title = f"Shortest path {route.describe()} (distance {route.cost:g})"
    else:
        title = f"Node {route.target} is unreachable from {route.start}"
    ax.set_title(title)
    ax.set_axis_off()

    if output:
        fig.savefig(output, bbox_inches="tight")
        _LOGGER.info("Figure written to %s", output)
    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig
