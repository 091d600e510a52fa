"""Concrete graph representations and a factory for empty graphs."""

from graph_poet.exceptions import InvalidArgumentError
from graph_poet.graph import Graph

from .adjacency_map import AdjacencyMapGraph
from .edge_list import EdgeListGraph

DEFAULT_REPRESENTATION = "edge_list"

REPRESENTATIONS: dict[str, type[Graph]] = {
    "edge_list": EdgeListGraph,
    "adjacency_map": AdjacencyMapGraph,
}


def empty_graph(representation: str = DEFAULT_REPRESENTATION, check_rep: bool = False) -> Graph:
    """Create an empty graph backed by the named representation.

    Args:
        representation: A key of ``REPRESENTATIONS``.
        check_rep: Verify the representation invariant after every mutation.
    """
    try:
        graph_class = REPRESENTATIONS[representation]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown graph representation {representation!r}; "
            f"expected one of {sorted(REPRESENTATIONS)}"
        ) from None
    return graph_class(check_rep=check_rep)


__all__ = [
    "AdjacencyMapGraph",
    "EdgeListGraph",
    "DEFAULT_REPRESENTATION",
    "REPRESENTATIONS",
    "empty_graph",
]
