"""Vertex model: a label plus its local incoming and outgoing weight maps."""

from __future__ import annotations

from pydantic import Field, PositiveInt

from .base import GraphModel, Label


class Vertex(GraphModel):
    """A vertex that owns its incident edges.

    ``sources`` maps each source label to the weight of its edge into this
    vertex; ``targets`` maps each target label to the weight of the edge out of
    it. The owning graph keeps the two sides of every edge in step.
    """

    label: Label
    sources: dict[Label, PositiveInt] = Field(default_factory=dict)
    targets: dict[Label, PositiveInt] = Field(default_factory=dict)

    def set_source(self, source: Label, weight: int) -> int:
        """Set or (with weight 0) drop the incoming edge from source. Returns the old weight."""
        return _put(self.sources, source, weight)

    def set_target(self, target: Label, weight: int) -> int:
        """Set or (with weight 0) drop the outgoing edge to target. Returns the old weight."""
        return _put(self.targets, target, weight)

    def detach(self, label: Label) -> None:
        """Forget every edge between this vertex and label, in both directions."""
        self.sources.pop(label, None)
        self.targets.pop(label, None)

    def __str__(self):
        return f"{self.label} -> {self.targets}, <- {self.sources}"


def _put(weights: dict, label: Label, weight: int) -> int:
    if weight == 0:
        return weights.pop(label, 0)
    previous = weights.get(label, 0)
    weights[label] = weight
    return previous
