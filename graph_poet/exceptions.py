"""Custom exceptions for graph-poet."""


class GraphPoetError(Exception):
    """Base exception for all graph-poet errors."""


class InvalidArgumentError(GraphPoetError, ValueError):
    """Raised for a negative edge weight, an empty corpus, or an unknown option."""


class CorpusReadError(GraphPoetError, OSError):
    """Raised when a corpus source cannot be read."""


class RepInvariantError(GraphPoetError, AssertionError):
    """Raised when a graph's internal state violates its representation invariant."""
