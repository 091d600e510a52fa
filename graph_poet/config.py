"""Runtime configuration for graph construction and corpus loading."""

from __future__ import annotations

import os
from typing import ClassVar, Literal, Mapping

from pydantic import BaseModel, ConfigDict

from graph_poet.graph import Graph
from graph_poet.representations import DEFAULT_REPRESENTATION, empty_graph

ENV_PREFIX = "GRAPH_POET_"


class PoetSettings(BaseModel):
    """Options selecting how affinity graphs are stored and how corpora are read.

    Usage:
        settings = PoetSettings(representation="adjacency_map", check_rep=True)
        graph = settings.new_graph()

        # or from GRAPH_POET_REPRESENTATION / GRAPH_POET_CHECK_REP / GRAPH_POET_ENCODING
        settings = PoetSettings.from_env()
    """

    model_config: ClassVar[dict] = ConfigDict(frozen=True, extra="forbid")

    representation: Literal["edge_list", "adjacency_map"] = DEFAULT_REPRESENTATION
    check_rep: bool = False
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PoetSettings":
        """Build settings from ``GRAPH_POET_*`` variables; unset ones keep their defaults."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw.strip()
        return cls(**values)

    def new_graph(self) -> Graph:
        return empty_graph(self.representation, check_rep=self.check_rep)
