from .base import GraphModel, Label
from .edge import Edge
from .vertex import Vertex

__all__ = ["GraphModel", "Label", "Edge", "Vertex"]
