"""Bridge-word insertion between adjacent words of a sentence."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from graph_poet.graph import Graph
from graph_poet.models.base import Label

log = logging.getLogger(__name__)


class BridgeComposer:
    """Inserts a bridge word between each pair of adjacent input words.

    A bridge ``b`` for the pair ``(w1, w2)`` is any vertex with edges
    ``w1 -> b`` and ``b -> w2``. Among those, the one with the largest
    ``weight(w1 -> b) + weight(b -> w2)`` is used; equal scores go to the
    smallest label. Pass ``rng`` to instead pick uniformly among the tied
    best candidates, reproducibly for a seeded ``random.Random``.

    Usage:
        graph = AffinityModel().build(["hello", "beautiful", "world!"])
        composer = BridgeComposer()
        composer.compose(graph, ["Hello", "world!"])   # -> ["Hello", "beautiful", "world!"]
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng

    def select_bridge(self, graph: Graph, first: Label, second: Label) -> Label | None:
        """Return the bridge word for (first, second), or None if there is none."""
        outgoing = graph.targets(first)
        incoming = graph.sources(second)
        candidates = outgoing.keys() & incoming.keys()
        if not candidates:
            return None

        scores = {word: outgoing[word] + incoming[word] for word in candidates}
        best = max(scores.values())
        tied = sorted(word for word, score in scores.items() if score == best)
        if self._rng is not None:
            return self._rng.choice(tied)
        return tied[0]

    def compose(self, graph: Graph, input_tokens: Sequence[str]) -> list[str]:
        """Return input_tokens with bridge words inserted between adjacent tokens.

        Lookups use the lowercased tokens; the tokens themselves, including
        their casing and punctuation, are copied to the output unchanged.
        """
        output: list[str] = []
        for index, word in enumerate(input_tokens):
            if index > 0:
                previous = input_tokens[index - 1]
                bridge = self.select_bridge(graph, previous.lower(), word.lower())
                if bridge is not None:
                    log.debug("Bridge %r between %r and %r", bridge, previous, word)
                    output.append(bridge)
            output.append(word)
        return output
