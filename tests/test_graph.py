import pytest

from graphdata.graph import AdjacencyList, Edge, Message


def build(*messages):
    graph = AdjacencyList()
    for message in messages:
        graph.insert(message)
    return graph


def test_insert_adds_both_directions():
    graph = build(Message("a", "b", 0.5))
    assert graph.edges("a") == (Edge("b", 0.5),)
    assert graph.edges("b") == (Edge("a", 0.5),)
    assert graph.edges("a")[0].weight == 0.5


def test_edges_sorted_by_neighbour_id():
    graph = build(Message("x", "c", 0.1), Message("x", "a", 0.2), Message("x", "b", 0.3))
    assert [edge.id for edge in graph.edges("x")] == ["a", "b", "c"]
    assert [edge.weight for edge in graph.edges("x")] == [0.2, 0.3, 0.1]


def test_iteration_in_ascending_order():
    graph = build(Message("m", "c", 1.0), Message("z", "a", 1.0))
    assert list(graph) == ["a", "c", "m", "z"]
    assert [vertex for vertex, _ in graph.items()] == ["a", "c", "m", "z"]


def test_len_and_node_count():
    graph = build(Message("a", "b", 1.0), Message("b", "c", 1.0), Message("c", "a", 1.0))
    assert len(graph) == 3
    assert graph.node_count() == 6


def test_contains_and_missing_vertex():
    graph = build(Message("a", "b", 1.0))
    assert "a" in graph
    assert "q" not in graph
    with pytest.raises(KeyError):
        graph.edges("q")


def test_clear_empties_graph():
    graph = build(Message("a", "b", 1.0))
    graph.clear()
    assert len(graph) == 0
    assert graph.node_count() == 0
    assert list(graph) == []


def test_edge_equality_ignores_weight():
    assert Edge("a", 0.1) == Edge("a", 0.9)
    assert Edge("a", 0.9) < Edge("b", 0.1)


def test_self_loop_recorded_twice():
    graph = build(Message("a", "a", 0.5))
    assert len(graph) == 1
    assert graph.node_count() == 2


def test_duplicate_relation_keeps_insertion_order():
    graph = build(Message("a", "b", 0.3), Message("a", "b", 0.7))
    assert [edge.weight for edge in graph.edges("a")] == [0.3, 0.7]