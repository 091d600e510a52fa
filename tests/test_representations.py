"""Representation-specific tests: factory, invariant checking and a differential run."""

import random

import pytest

from graph_poet.exceptions import InvalidArgumentError, RepInvariantError
from graph_poet.models.edge import Edge
from graph_poet.representations import (
    REPRESENTATIONS,
    AdjacencyMapGraph,
    EdgeListGraph,
    empty_graph,
)


class TestEmptyGraph:
    def test_default_is_edge_list(self):
        assert isinstance(empty_graph(), EdgeListGraph)

    def test_by_name(self):
        assert isinstance(empty_graph("adjacency_map"), AdjacencyMapGraph)
        assert isinstance(empty_graph("edge_list"), EdgeListGraph)

    def test_unknown_name(self):
        with pytest.raises(InvalidArgumentError, match="Unknown graph representation"):
            empty_graph("matrix")

    def test_fresh_instance_each_call(self):
        first = empty_graph()
        first.add_vertex("a")
        assert empty_graph().vertices() == set()


class TestCheckRep:
    def test_valid_graphs_pass(self, graph):
        graph.set_edge("a", "b", 1)
        graph.set_edge("b", "b", 2)
        graph.check_rep()

    def test_edge_list_duplicate_edge(self):
        graph = EdgeListGraph()
        graph.set_edge("a", "b", 1)
        graph._edges.append(Edge(source="a", target="b", weight=2))
        with pytest.raises(RepInvariantError, match="Duplicate edge"):
            graph.check_rep()

    def test_edge_list_dangling_endpoint(self):
        graph = EdgeListGraph()
        graph.set_edge("a", "b", 1)
        graph._vertices.discard("b")
        with pytest.raises(RepInvariantError, match="outside the vertex set"):
            graph.check_rep()

    def test_adjacency_map_unmirrored_edge(self):
        graph = AdjacencyMapGraph()
        graph.set_edge("a", "b", 1)
        graph._vertices["b"].sources.clear()
        with pytest.raises(RepInvariantError, match="not mirrored"):
            graph.check_rep()

    def test_adjacency_map_mismatched_weights(self):
        graph = AdjacencyMapGraph()
        graph.set_edge("a", "b", 1)
        graph._vertices["b"].sources["a"] = 4
        with pytest.raises(RepInvariantError, match="not mirrored"):
            graph.check_rep()

    @pytest.mark.parametrize("weight", [0, -2])
    def test_adjacency_map_non_positive_weight(self, weight):
        graph = AdjacencyMapGraph()
        graph.set_edge("a", "b", 1)
        graph._vertices["a"].targets["b"] = weight
        graph._vertices["b"].sources["a"] = weight
        with pytest.raises(RepInvariantError, match="invalid weight"):
            graph.check_rep()

    def test_adjacency_map_non_positive_source_only(self):
        graph = AdjacencyMapGraph()
        graph.add_vertex("a")
        graph.add_vertex("b")
        graph._vertices["b"].sources["a"] = 0
        with pytest.raises(RepInvariantError, match="not mirrored"):
            graph.check_rep()

    def test_edge_list_non_positive_weight(self):
        graph = EdgeListGraph()
        graph.set_edge("a", "b", 1)
        graph._edges[0] = Edge.model_construct(source="a", target="b", weight=0)
        with pytest.raises(RepInvariantError, match="invalid weight"):
            graph.check_rep()

    def test_adjacency_map_wrong_key(self):
        graph = AdjacencyMapGraph()
        graph.add_vertex("a")
        graph._vertices["z"] = graph._vertices.pop("a")
        with pytest.raises(RepInvariantError, match="stored under"):
            graph.check_rep()

    def test_checked_after_mutation_when_enabled(self):
        graph = AdjacencyMapGraph(check_rep=True)
        graph.set_edge("a", "b", 1)
        graph._vertices["b"].sources.clear()
        with pytest.raises(RepInvariantError):
            graph.add_vertex("c")

    def test_not_checked_when_disabled(self):
        graph = AdjacencyMapGraph()
        graph.set_edge("a", "b", 1)
        graph._vertices["b"].sources.clear()
        assert graph.add_vertex("c") is True


LABELS = ["a", "b", "c", "d", "e"]


def _random_operation(rng: random.Random):
    kind = rng.choice(["add", "set", "set", "set", "zero", "remove"])
    if kind == "add":
        return ("add_vertex", rng.choice(LABELS))
    if kind == "remove":
        return ("remove_vertex", rng.choice(LABELS))
    weight = 0 if kind == "zero" else rng.randint(1, 5)
    return ("set_edge", rng.choice(LABELS), rng.choice(LABELS), weight)


def _observe(graph):
    return (
        graph.vertices(),
        {label: graph.sources(label) for label in LABELS},
        {label: graph.targets(label) for label in LABELS},
        sorted((e.source, e.target, e.weight) for e in graph.edges()),
        str(graph),
    )


class TestDifferential:
    @pytest.mark.parametrize("seed", range(20))
    def test_same_operations_same_observations(self, seed):
        rng = random.Random(seed)
        graphs = [cls(check_rep=True) for _, cls in sorted(REPRESENTATIONS.items())]
        for _ in range(60):
            name, *args = _random_operation(rng)
            results = [getattr(graph, name)(*args) for graph in graphs]
            assert len(set(results)) == 1, (name, args, results)
            observations = [_observe(graph) for graph in graphs]
            assert all(obs == observations[0] for obs in observations[1:]), (name, args)

    def test_negative_weight_rejected_identically(self):
        graphs = [cls() for cls in REPRESENTATIONS.values()]
        for graph in graphs:
            graph.set_edge("a", "b", 2)
            with pytest.raises(InvalidArgumentError):
                graph.set_edge("a", "b", -2)
        assert len({str(graph) for graph in graphs}) == 1
