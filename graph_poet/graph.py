"""The weighted directed graph contract shared by every representation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from graph_poet.event import dispatch
from graph_poet.exceptions import InvalidArgumentError, RepInvariantError
from graph_poet.models.base import Label
from graph_poet.models.edge import Edge

log = logging.getLogger(__name__)


def validate_weight(weight) -> int:
    """Return weight if it is a non-negative int, else raise InvalidArgumentError."""
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidArgumentError(f"Edge weight must be an int, got {weight!r}")
    if weight < 0:
        raise InvalidArgumentError(f"Edge weight must be non-negative, got {weight}")
    return weight


class Graph(ABC):
    """A mutable weighted directed graph over hashable, immutable labels.

    Vertices are identified by their label alone. Each (source, target) pair
    has at most one edge, and every stored weight is a positive int; setting a
    weight of 0 removes the edge. Self-loops are allowed.

    Subclasses choose the storage and implement the ``_add_vertex``,
    ``_set_edge``, ``_remove_vertex`` hooks plus the queries. The public
    mutators here validate arguments before touching any state, fire events
    and, when the graph was created with ``check_rep=True``, verify the
    representation invariant after every change.

    Queries always return fresh containers; mutating them never affects the
    graph.

    Usage:
        graph = EdgeListGraph()
        graph.set_edge("a", "b", 3)     # -> 0, creates a and b
        graph.targets("a")              # -> {"b": 3}
        graph.set_edge("a", "b", 0)     # -> 3, edge removed, vertices kept
    """

    def __init__(self, check_rep: bool = False):
        self._check_rep_enabled = check_rep

    # === Mutation ===

    def add_vertex(self, label: Label) -> bool:
        """Add a vertex with no edges. Returns False if label is already present."""
        added = self._add_vertex(label)
        self._after_mutation()
        dispatch(self, "post_add_vertex", label=label, added=added)
        return added

    def set_edge(self, source: Label, target: Label, weight: int) -> int:
        """Add, reweight or remove the edge from source to target.

        A positive weight creates the edge, adding missing endpoints as
        vertices, or overwrites its weight. A weight of 0 removes the edge if
        there is one and leaves both vertices in place.

        Returns:
            The weight of the edge before this call, 0 if it did not exist.

        Raises:
            InvalidArgumentError: if weight is negative or not an int. The
                graph is unchanged.
        """
        validate_weight(weight)
        dispatch(self, "pre_set_edge", edge_source=source, edge_target=target, weight=weight)
        previous = self._set_edge(source, target, weight)
        log.debug("set_edge %r -> %r: %d (was %d)", source, target, weight, previous)
        self._after_mutation()
        dispatch(
            self, "post_set_edge",
            edge_source=source, edge_target=target, weight=weight, previous=previous,
        )
        return previous

    def remove_vertex(self, label: Label) -> bool:
        """Remove a vertex and every edge into or out of it.

        Returns False, changing nothing, if label is not present.
        """
        removed = self._remove_vertex(label)
        if removed:
            log.debug("Removed vertex %r", label)
        self._after_mutation()
        dispatch(self, "post_remove_vertex", label=label, removed=removed)
        return removed

    # === Queries ===

    @abstractmethod
    def vertices(self) -> set[Label]:
        """All vertex labels."""

    @abstractmethod
    def sources(self, target: Label) -> dict[Label, int]:
        """Map each vertex with an edge into target to that edge's weight.

        Empty if target has no incoming edges or is not in the graph.
        """

    @abstractmethod
    def targets(self, source: Label) -> dict[Label, int]:
        """Map each vertex that source has an edge to, to that edge's weight.

        Empty if source has no outgoing edges or is not in the graph.
        """

    @abstractmethod
    def edges(self) -> list[Edge]:
        """Every stored edge."""

    # === Representation invariant ===

    def check_rep(self) -> None:
        """Verify the invariants common to all representations.

        Raises:
            RepInvariantError: describing the first violation found.
        """
        vertices = self.vertices()
        seen: set[tuple[Label, Label]] = set()
        for source, target, weight in self._edge_triples():
            if (source, target) in seen:
                raise RepInvariantError(f"Duplicate edge {source!r} -> {target!r}")
            seen.add((source, target))
            if source not in vertices or target not in vertices:
                raise RepInvariantError(
                    f"Edge {source!r} -> {target!r} has an endpoint outside the vertex set"
                )
            if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
                raise RepInvariantError(
                    f"Edge {source!r} -> {target!r} has an invalid weight {weight!r}"
                )

    def _after_mutation(self) -> None:
        if self._check_rep_enabled:
            self.check_rep()

    # === Storage hooks ===

    @abstractmethod
    def _add_vertex(self, label: Label) -> bool: ...

    @abstractmethod
    def _set_edge(self, source: Label, target: Label, weight: int) -> int:
        """Apply an already validated, non-negative weight. Returns the previous weight."""

    @abstractmethod
    def _remove_vertex(self, label: Label) -> bool: ...

    @abstractmethod
    def _edge_triples(self) -> list[tuple[Label, Label, int]]:
        """Stored edges as raw (source, target, weight) triples, without building models."""

    # === Rendering ===

    def __str__(self):
        edges = self.edges()
        if not edges:
            return "Empty Graph"
        return "\n".join(str(edge) for edge in sorted(edges, key=lambda e: e.key))

    def __repr__(self):
        return (
            f"{type(self).__name__}(vertices={len(self.vertices())}, "
            f"edges={len(self.edges())})"
        )
