import pytest

from graph import UNREACHABLE, compute_shortest_paths, path_cost
from main import build_sample_graph
from paths import Route, find_route, reconstruct_path


class TestReconstructPath:
    """Walking predecessor maps back to the start node."""

    def test_sample_path_to_d(self):
        _, predecessors = compute_shortest_paths(build_sample_graph(), "A")
        assert reconstruct_path(predecessors, "A", "D") == ["A", "C", "D"]

    @pytest.mark.parametrize(
        "target, expected",
        [
            ("B", ["A", "B"]),
            ("C", ["A", "C"]),
            ("E", ["A", "C", "F", "E"]),
            ("F", ["A", "C", "F"]),
        ],
    )
    def test_sample_paths(self, target, expected):
        _, predecessors = compute_shortest_paths(build_sample_graph(), "A")
        assert reconstruct_path(predecessors, "A", target) == expected

    def test_target_equals_start(self):
        assert reconstruct_path({}, "A", "A") == ["A"]
        assert reconstruct_path({"B": "A"}, "A", "A") == ["A"]

    def test_unreachable_target(self):
        assert reconstruct_path({"B": "A"}, "A", "C") == []

    def test_chain_that_never_reaches_start(self):
        assert reconstruct_path({"C": "B"}, "A", "C") == []

    def test_cyclic_predecessors(self):
        assert reconstruct_path({"B": "C", "C": "B"}, "A", "B") == []

    def test_predecessors_not_mutated(self):
        predecessors = {"B": "A", "C": "B"}
        reconstruct_path(predecessors, "A", "C")
        assert predecessors == {"B": "A", "C": "B"}

    def test_path_weight_matches_distance(self):
        graph = build_sample_graph()
        result = compute_shortest_paths(graph, "A")
        for target in result.reachable_nodes():
            path = reconstruct_path(result.predecessors, "A", target)
            assert path[0] == "A"
            assert path[-1] == target
            assert path_cost(graph, path) == result.distances[target]

    def test_source_only_node_is_unreachable(self):
        # G only has outgoing edges, nothing leads into it.
        graph = build_sample_graph()
        graph["G"] = {"A": 1, "D": 1}
        _, predecessors = compute_shortest_paths(graph, "A")
        assert reconstruct_path(predecessors, "A", "G") == []


class TestFindRoute:
    def test_reachable_route(self):
        route = find_route(build_sample_graph(), "A", "D")
        assert route == Route(start="A", target="D", path=["A", "C", "D"], cost=20)
        assert route.reachable
        assert route.describe() == "A -> C -> D"

    def test_route_to_start(self):
        route = find_route(build_sample_graph(), "A", "A")
        assert route.path == ["A"]
        assert route.cost == 0
        assert route.reachable

    def test_unreachable_route(self):
        route = find_route(build_sample_graph(), "D", "A")
        assert route.path == []
        assert route.cost == UNREACHABLE
        assert not route.reachable
        assert route.describe() == ""

    def test_start_missing_from_graph(self):
        route = find_route(build_sample_graph(), "Z", "A")
        assert not route.reachable
        assert find_route(build_sample_graph(), "Z", "Z").cost == 0

    def test_reuses_existing_result(self):
        graph = build_sample_graph()
        result = compute_shortest_paths(graph, "A")
        graph["A"]["D"] = 1  # ignored, the precomputed result is reused
        assert find_route(graph, "A", "D", result=result).cost == 20

    def test_recomputes_for_other_start(self):
        graph = build_sample_graph()
        result = compute_shortest_paths(graph, "A")
        route = find_route(graph, "C", "E", result=result)
        assert route.path == ["C", "F", "E"]
        assert route.cost == 11
