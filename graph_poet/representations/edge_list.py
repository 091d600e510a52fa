"""Edge-centric representation: a vertex set plus a flat list of edges."""

from __future__ import annotations

from graph_poet.graph import Graph
from graph_poet.models.base import Label
from graph_poet.models.edge import Edge


class EdgeListGraph(Graph):
    """Graph stored as a set of labels and a list of ``Edge`` values.

    Edge lookups and per-vertex queries scan the whole list, O(|E|);
    enumerating edges is a plain copy.
    """

    def __init__(self, check_rep: bool = False):
        super().__init__(check_rep=check_rep)
        self._vertices: set[Label] = set()
        self._edges: list[Edge] = []

    def _add_vertex(self, label: Label) -> bool:
        if label in self._vertices:
            return False
        self._vertices.add(label)
        return True

    def _find(self, source: Label, target: Label) -> int:
        for index, edge in enumerate(self._edges):
            if edge.connects(source, target):
                return index
        return -1

    def _set_edge(self, source: Label, target: Label, weight: int) -> int:
        index = self._find(source, target)
        if index < 0:
            if weight > 0:
                self._vertices.add(source)
                self._vertices.add(target)
                self._edges.append(Edge(source=source, target=target, weight=weight))
            return 0

        previous = self._edges[index].weight
        if weight > 0:
            self._edges[index] = self._edges[index].with_weight(weight)
        else:
            del self._edges[index]
        return previous

    def _remove_vertex(self, label: Label) -> bool:
        if label not in self._vertices:
            return False
        self._vertices.remove(label)
        self._edges = [edge for edge in self._edges if not edge.touches(label)]
        return True

    def vertices(self) -> set[Label]:
        return set(self._vertices)

    def sources(self, target: Label) -> dict[Label, int]:
        return {edge.source: edge.weight for edge in self._edges if edge.target == target}

    def targets(self, source: Label) -> dict[Label, int]:
        return {edge.target: edge.weight for edge in self._edges if edge.source == source}

    def edges(self) -> list[Edge]:
        return list(self._edges)

    def _edge_triples(self) -> list[tuple[Label, Label, int]]:
        return [(edge.source, edge.target, edge.weight) for edge in self._edges]
