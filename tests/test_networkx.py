import pytest

from ugraphkit.model.graph import Graph

nx = pytest.importorskip("networkx")

from ugraphkit.model.graph import from_networkx, to_networkx  # noqa: E402


def test_to_networkx(sample_graphs):
    for graph in sample_graphs:
        ng = to_networkx(graph)

        assert ng.number_of_nodes() == graph.vertex_count
        assert ng.number_of_edges() == graph.edge_count
        assert nx.number_connected_components(ng) == graph.count_components()
        assert ng.graph["id"] == graph.graph_id


def test_from_networkx():
    ng = nx.Graph(name="ring")
    nx.add_cycle(ng, ["a", "b", "c"], weight=2)
    ng.add_node("d")

    graph = from_networkx(ng)

    assert graph.name == "ring"
    assert graph.node_names == ["a", "b", "c", "d"]
    assert graph.edge_count == 3
    assert all(edge.weight == 2 for edge in graph.edges)
    assert graph.count_components() == 2


def test_round_trip():
    graph = Graph.from_labels(["A", "B", "C"], name="pair", graph_id=5)
    graph.add_edge("A", "C", 3)

    restored = from_networkx(to_networkx(graph))

    assert restored.node_names == ["A", "B", "C"]
    assert restored.edges == graph.edges
    assert restored.graph_id == 5
