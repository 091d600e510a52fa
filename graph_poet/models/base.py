"""Base model for graph value objects (edges and vertices)."""

from __future__ import annotations

from collections.abc import Hashable
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

# Any hashable, immutable value can label a vertex.
Label = Hashable


class GraphModel(BaseModel):
    """Base for all graph value objects."""

    model_config: ClassVar[dict] = ConfigDict(
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    def __repr__(self):
        return f"{type(self).__name__}({self})"
