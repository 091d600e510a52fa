"""Shared test fixtures."""

import pytest

from graph_poet.event import _registrars
from graph_poet.representations import REPRESENTATIONS, empty_graph


@pytest.fixture(params=sorted(REPRESENTATIONS))
def representation(request):
    return request.param


@pytest.fixture
def graph(representation):
    """An empty graph of each representation, checking its invariant after every change."""
    return empty_graph(representation, check_rep=True)


@pytest.fixture(autouse=True)
def clear_registrars():
    """Clear event registrars around each test."""
    _registrars.clear()
    yield
    _registrars.clear()


@pytest.fixture
def corpus_file(tmp_path):
    """Write a corpus to a temporary file and return its path."""

    def write(content: str, name: str = "corpus.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return write
