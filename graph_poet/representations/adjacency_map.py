"""Vertex-centric representation: each vertex owns its incoming and outgoing weights."""

from __future__ import annotations

from graph_poet.exceptions import RepInvariantError
from graph_poet.graph import Graph
from graph_poet.models.base import Label
from graph_poet.models.edge import Edge
from graph_poet.models.vertex import Vertex


class AdjacencyMapGraph(Graph):
    """Graph stored as a map from label to ``Vertex``.

    Every edge is recorded twice, in the source's ``targets`` and in the
    target's ``sources``, so ``sources``/``targets`` are single lookups.
    """

    def __init__(self, check_rep: bool = False):
        super().__init__(check_rep=check_rep)
        self._vertices: dict[Label, Vertex] = {}

    def _vertex(self, label: Label) -> Vertex:
        """Return the vertex for label, creating an edgeless one if missing."""
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = Vertex(label=label)
            self._vertices[label] = vertex
        return vertex

    def _add_vertex(self, label: Label) -> bool:
        if label in self._vertices:
            return False
        self._vertex(label)
        return True

    def _set_edge(self, source: Label, target: Label, weight: int) -> int:
        if weight == 0:
            if source not in self._vertices or target not in self._vertices:
                return 0
            previous = self._vertices[source].set_target(target, 0)
            self._vertices[target].set_source(source, 0)
            return previous

        previous = self._vertex(source).set_target(target, weight)
        self._vertex(target).set_source(source, weight)
        return previous

    def _remove_vertex(self, label: Label) -> bool:
        vertex = self._vertices.pop(label, None)
        if vertex is None:
            return False
        for neighbour in set(vertex.sources) | set(vertex.targets):
            if neighbour in self._vertices:
                self._vertices[neighbour].detach(label)
        return True

    def vertices(self) -> set[Label]:
        return set(self._vertices)

    def sources(self, target: Label) -> dict[Label, int]:
        vertex = self._vertices.get(target)
        return dict(vertex.sources) if vertex is not None else {}

    def targets(self, source: Label) -> dict[Label, int]:
        vertex = self._vertices.get(source)
        return dict(vertex.targets) if vertex is not None else {}

    def edges(self) -> list[Edge]:
        return [
            Edge(source=vertex.label, target=target, weight=weight)
            for vertex in self._vertices.values()
            for target, weight in vertex.targets.items()
        ]

    def _edge_triples(self) -> list[tuple[Label, Label, int]]:
        return [
            (label, target, weight)
            for label, vertex in self._vertices.items()
            for target, weight in vertex.targets.items()
        ]

    def check_rep(self) -> None:
        super().check_rep()
        for label, vertex in self._vertices.items():
            if vertex.label != label:
                raise RepInvariantError(f"Vertex {vertex.label!r} stored under {label!r}")
            for target, weight in vertex.targets.items():
                mirror = self._vertices.get(target)
                if mirror is None or mirror.sources.get(label) != weight:
                    raise RepInvariantError(
                        f"Edge {label!r} -> {target!r} is not mirrored in the target's sources"
                    )
            for source, weight in vertex.sources.items():
                mirror = self._vertices.get(source)
                if mirror is None or mirror.targets.get(label) != weight:
                    raise RepInvariantError(
                        f"Edge {source!r} -> {label!r} is not mirrored in the source's targets"
                    )
