"""Turning text sources into the lowercase token sequences the affinity model consumes."""

from __future__ import annotations

import logging
import os

from graph_poet.exceptions import CorpusReadError

log = logging.getLogger(__name__)


def tokenize(text: str) -> list[str]:
    """Split text on whitespace and case-fold every token.

    Punctuation stays attached to its word: ``"World!"`` becomes ``"world!"``.
    """
    return [token.lower() for token in text.split()]


def read_tokens(path: str | os.PathLike, encoding: str = "utf-8") -> list[str]:
    """Read a corpus file and tokenize it.

    Raises:
        CorpusReadError: if the file is missing, unreadable or not decodable
            with encoding. Not retried.
    """
    try:
        with open(path, encoding=encoding) as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusReadError(f"Cannot read corpus {os.fspath(path)!r}: {exc}") from exc

    tokens = tokenize(text)
    log.info("Read %d tokens from %s", len(tokens), os.fspath(path))
    return tokens
