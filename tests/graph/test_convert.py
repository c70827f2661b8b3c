import networkx as nx
import pytest

from pathcount.graph import NxWeightedGraph, from_edges, to_networkx


def test_from_edges_infers_nodes():
    graph = from_edges([("A", "B", 1), ("B", "C", 2)])
    assert isinstance(graph, NxWeightedGraph)
    assert set(graph.nodes()) == {"A", "B", "C"}
    assert list(graph.out_edges("B")) == [("C", 2)]


def test_from_edges_explicit_nodes_keeps_isolated():
    graph = from_edges([("A", "B", 1)], nodes=["A", "B", "E"])
    assert set(graph.nodes()) == {"A", "B", "E"}
    assert list(graph.out_edges("E")) == []


def test_from_edges_rejects_unknown_endpoint():
    with pytest.raises(ValueError, match="Target node 'C' does not exist"):
        from_edges([("A", "C", 1)], nodes=["A", "B"])
    with pytest.raises(ValueError, match="Source node 'X' does not exist"):
        from_edges([("X", "A", 1)], nodes=["A", "B"])


def test_from_edges_parallel_edges_and_weight_attr():
    graph = from_edges([("A", "B", 1), ("A", "B", 2)], weight="w")
    g = to_networkx(graph)
    assert isinstance(g, nx.MultiDiGraph)
    assert g.number_of_edges("A", "B") == 2
    assert sorted(d["w"] for _, _, d in g.edges(data=True)) == [1, 2]
    assert graph.weight == "w"


def test_to_networkx_passthrough():
    g = nx.DiGraph()
    assert to_networkx(g) is g
    assert to_networkx(NxWeightedGraph(g)) is g


def test_to_networkx_rejects_other_types():
    with pytest.raises(TypeError):
        to_networkx(nx.Graph())
    with pytest.raises(TypeError):
        to_networkx([("A", "B", 1)])
