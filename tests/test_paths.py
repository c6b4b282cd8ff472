import pytest

from graphdata.components import ConnectedComponentAnalyzer
from graphdata.graph import AdjacencyList, Edge, Message
from graphdata.paths import dijkstra_shortest_path, format_path, prim_costs


def _graph(*relations):
    graph = AdjacencyList()
    for id1, id2, weight in relations:
        graph.insert(Message(id1, id2, weight))
    return graph


@pytest.fixture
def triangle():
    return _graph(("a", "b", 0.5), ("b", "c", 0.25), ("a", "c", 1.0))


def _components(graph):
    analyzer = ConnectedComponentAnalyzer()
    analyzer.compute(graph)
    return list(analyzer)


def test_dijkstra_triangle_prefers_two_hops(triangle):
    path = dijkstra_shortest_path(triangle, ("a", "b", "c"), "a")
    assert [(edge.id, edge.weight) for edge in path] == [("b", 0.5), ("c", 0.75)]


def test_dijkstra_covers_component_except_origin(triangle):
    path = dijkstra_shortest_path(triangle, ("a", "b", "c"), "b")
    assert sorted(edge.id for edge in path) == ["a", "c"]


def test_dijkstra_distances_never_decrease():
    graph = _graph(
        ("a", "b", 0.5), ("b", "c", 0.25), ("c", "d", 0.125),
        ("a", "d", 1.0), ("d", "e", 0.5), ("b", "e", 0.875),
    )
    component = _components(graph)[0]
    path = dijkstra_shortest_path(graph, component, "a")
    weights = [edge.weight for edge in path]
    assert weights == sorted(weights)
    assert len(path) == len(component) - 1


def test_dijkstra_distance_not_above_direct_edge():
    graph = _graph(("a", "b", 0.5), ("b", "c", 0.25), ("a", "c", 1.0), ("c", "d", 0.5))
    path = dijkstra_shortest_path(graph, ("a", "b", "c", "d"), "a")
    distances = {edge.id: edge.weight for edge in path}
    for edge in graph.edges("a"):
        assert distances[edge.id] <= edge.weight


def test_dijkstra_single_edge_component():
    graph = _graph(("x", "y", 0.5))
    path = dijkstra_shortest_path(graph, ("x", "y"), "y")
    assert [(edge.id, edge.weight) for edge in path] == [("x", 0.5)]


def test_dijkstra_stays_inside_component():
    graph = _graph(("a", "b", 0.5), ("c", "d", 0.25))
    path = dijkstra_shortest_path(graph, ("a", "b"), "a")
    assert {edge.id for edge in path} == {"b"}


def test_prim_triangle_skips_heaviest_edge(triangle):
    assert prim_costs(triangle, [("a", "b", "c")]) == [0.75]


def test_prim_tree_costs_sum_of_its_edges():
    relations = [("a", "b", 0.5), ("b", "c", 0.25), ("b", "d", 0.125)]
    graph = _graph(*relations)
    assert prim_costs(graph, _components(graph)) == [sum(w for _, _, w in relations)]


def test_prim_one_cost_per_component():
    graph = _graph(("a", "b", 0.5), ("c", "d", 0.25), ("d", "e", 0.5))
    components = _components(graph)
    costs = prim_costs(graph, components)
    assert len(costs) == len(components) == 2
    assert costs[1] == 0.5


def test_prim_cost_not_above_any_spanning_tree():
    graph = _graph(
        ("a", "b", 0.5), ("b", "c", 0.25), ("c", "d", 0.125), ("a", "d", 0.0625)
    )
    (cost,) = prim_costs(graph, _components(graph))
    assert cost <= 0.5 + 0.25 + 0.125
    assert cost <= 0.0625 + 0.25 + 0.125


def test_prim_empty_component_list():
    assert prim_costs(AdjacencyList(), []) == []


def test_format_path_layout():
    text = format_path("a", [Edge("b", 0.5), Edge("c", 0.75)])
    assert text == "\norigin: a\n( 1) \tb, 0.5\t( 2) \tc, 0.75\t\n"


def test_format_path_limits_to_four_significant_digits():
    text = format_path("a", [Edge("b", 0.123456)])
    assert ", 0.1235\t" in text


def test_format_path_wraps_after_eight():
    path = [Edge(f"v{i}", 0.5) for i in range(9)]
    lines = format_path("o", path).split("\n")
    assert lines[1] == "origin: o"
    assert lines[2].count("\t(") + lines[2].startswith("(") == 8
    assert lines[3].startswith("( 9) \tv8, ")


def test_format_path_empty():
    assert format_path("z", []) == "\norigin: z\n\n"