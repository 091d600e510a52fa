"""Word-adjacency graphs built from token sequences."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from graph_poet.exceptions import InvalidArgumentError
from graph_poet.graph import Graph
from graph_poet.representations import empty_graph

log = logging.getLogger(__name__)


class AffinityModel:
    """Builds affinity graphs: one vertex per distinct token, and an edge
    ``a -> b`` weighted by how many times ``b`` directly follows ``a``.

    For ``["hello", "hello", "goodbye"]`` the graph holds ``hello -> hello: 1``
    and ``hello -> goodbye: 1``.
    """

    def __init__(self, graph_factory: Callable[[], Graph] | None = None):
        self._graph_factory = graph_factory or empty_graph

    def build(self, tokens: Sequence[str]) -> Graph:
        """Build a fresh graph from an already tokenized corpus.

        Raises:
            InvalidArgumentError: if tokens is empty.
        """
        if not tokens:
            raise InvalidArgumentError("Cannot build an affinity model from an empty token sequence")

        graph = self._graph_factory()
        for token in tokens:
            graph.add_vertex(token)
        for source, target in zip(tokens, tokens[1:]):
            count = graph.targets(source).get(target, 0)
            graph.set_edge(source, target, count + 1)

        log.info(
            "Built affinity graph from %d tokens: %d words, %d word pairs",
            len(tokens), len(graph.vertices()), len(graph.edges()),
        )
        return graph
