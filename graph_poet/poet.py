"""Poem generation: bridge words from a corpus inserted into input text."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from graph_poet.affinity import AffinityModel
from graph_poet.composer import BridgeComposer
from graph_poet.config import PoetSettings
from graph_poet.corpus import read_tokens, tokenize
from graph_poet.graph import Graph

log = logging.getLogger(__name__)


def generate_poem(graph: Graph, input_text: str, composer: BridgeComposer | None = None) -> str:
    """Insert bridge words from graph into input_text.

    The input is split on whitespace with every token kept verbatim, and the
    result is joined with single spaces. Blank input gives an empty string.
    """
    composer = composer or BridgeComposer()
    return " ".join(composer.compose(graph, input_text.split()))


class GraphPoet:
    """A poetry generator backed by the affinity graph of a corpus.

    Usage:
        poet = GraphPoet.from_file("corpus.txt")
        poet.poem("Seek to explore new and exciting synergies!")

        poet = GraphPoet.from_text("hello beautiful world")
        poet.poem("HELLO WORLD")    # -> "HELLO beautiful WORLD"
    """

    def __init__(
        self,
        corpus_words: Iterable[str],
        settings: PoetSettings | None = None,
        composer: BridgeComposer | None = None,
    ):
        self._settings = settings or PoetSettings()
        self._corpus_words = tuple(corpus_words)
        self._composer = composer or BridgeComposer()
        model = AffinityModel(graph_factory=self._settings.new_graph)
        self._graph = model.build(self._corpus_words)

    @classmethod
    def from_file(
        cls,
        path: str | os.PathLike,
        settings: PoetSettings | None = None,
        composer: BridgeComposer | None = None,
    ) -> "GraphPoet":
        """Build a poet from a corpus file.

        Raises:
            CorpusReadError: if the file cannot be read.
            InvalidArgumentError: if the file holds no words.
        """
        settings = settings or PoetSettings()
        return cls(read_tokens(path, encoding=settings.encoding), settings=settings, composer=composer)

    @classmethod
    def from_text(
        cls,
        text: str,
        settings: PoetSettings | None = None,
        composer: BridgeComposer | None = None,
    ) -> "GraphPoet":
        return cls(tokenize(text), settings=settings, composer=composer)

    @property
    def corpus_words(self) -> tuple[str, ...]:
        """The lowercased corpus, in order."""
        return self._corpus_words

    @property
    def settings(self) -> PoetSettings:
        return self._settings

    def poem(self, input_text: str) -> str:
        return generate_poem(self._graph, input_text, composer=self._composer)

    def __str__(self):
        return str(self._graph)
