"""Edge model: an immutable weighted (source, target) pair."""

from __future__ import annotations

from typing import ClassVar

from pydantic import ConfigDict, PositiveInt

from .base import GraphModel, Label


class Edge(GraphModel):
    """A directed edge with a strictly positive integer weight.

    Edges are frozen; changing a weight means building a new edge:

        edge = Edge(source="a", target="b", weight=2)
        heavier = edge.with_weight(3)

    A weight of zero or less fails validation, so an absent edge can never be
    stored as one with weight 0.
    """

    model_config: ClassVar[dict] = ConfigDict(frozen=True)

    source: Label
    target: Label
    weight: PositiveInt

    @property
    def key(self) -> tuple[Label, Label]:
        """The (source, target) pair identifying this edge within a graph."""
        return (self.source, self.target)

    def connects(self, source: Label, target: Label) -> bool:
        return self.source == source and self.target == target

    def touches(self, label: Label) -> bool:
        """True if label is either endpoint."""
        return self.source == label or self.target == label

    def with_weight(self, weight: int) -> "Edge":
        return Edge(source=self.source, target=self.target, weight=weight)

    def __str__(self):
        return f"{self.source} -> {self.target}: {self.weight}"
