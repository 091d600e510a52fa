"""graph-poet: weighted directed graphs and bridge-word poetry."""

from .graph import Graph
from .representations import AdjacencyMapGraph, EdgeListGraph, empty_graph
from .affinity import AffinityModel
from .composer import BridgeComposer
from .config import PoetSettings
from .corpus import read_tokens, tokenize
from .poet import GraphPoet, generate_poem
from .event import listen, listens_for

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "EdgeListGraph",
    "AdjacencyMapGraph",
    "empty_graph",
    "AffinityModel",
    "BridgeComposer",
    "PoetSettings",
    "read_tokens",
    "tokenize",
    "GraphPoet",
    "generate_poem",
    "listen",
    "listens_for",
]
