"""Bridge-word poetry from a word affinity graph.

A :class:`GraphPoet` is built from a corpus of text. Words are non-empty,
case-insensitive runs of non-whitespace characters; punctuation stays part of
the word. The graph holds one vertex per word and an edge ``w1 -> w2`` whose
weight counts how many times ``w1`` is immediately followed by ``w2``.

For example the corpus ``Hello, HELLO, hello, goodbye!`` yields two edges:
``hello, -> hello,`` with weight 2 and ``hello, -> goodbye!`` with weight 1.

Given an input, the poet inserts a bridge word ``b`` between every adjacent
pair ``w1 w2`` such that ``w1 -> b -> w2`` is the heaviest two-edge path from
``w1`` to ``w2``. Input words keep their case, bridge words are lower case and
words are separated by a single space. With the corpus
``This is a test of the Mugar Omni Theater sound system.`` the input
``Test the system.`` becomes ``Test of the system.``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .corpus import read_corpus_lines, split_words
from .graph import WeightedGraph

logger = logging.getLogger(__name__)


class GraphPoet:
    """Word affinity graph plus maximum-weight bridge selection.

    The graph is built once in the constructor and never mutated afterwards,
    so :meth:`poem` is a pure function of the corpus and its input.
    """

    def __init__(self, lines: Iterable[str] | str) -> None:
        """Build the affinity graph from corpus ``lines`` or a single text blob."""
        if isinstance(lines, str):
            lines = [lines]
        self._graph = WeightedGraph()

        content = "".join(f"{line} " for line in lines)
        words = split_words(content.lower())
        for first, second in zip(words, words[1:]):
            self._graph.set_edge(first, second, self._graph.weight(first, second) + 1)

        self.check_rep()
        logger.debug(
            "built affinity graph from %d words: %d vertices, %d edges",
            len(words),
            self._graph.vertex_count,
            self._graph.edge_count,
        )

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "GraphPoet":
        """from lines."""
        return cls(lines)

    @classmethod
    def from_text(cls, text: str) -> "GraphPoet":
        """from text."""
        return cls([text])

    @classmethod
    def from_file(cls, path: str | Path, encoding: str = "utf-8") -> "GraphPoet":
        """Build a poet from a corpus file.

        Raises:
            CorpusUnreadableError: if the file cannot be read.
        """
        return cls(read_corpus_lines(path, encoding=encoding))

    @property
    def graph(self) -> WeightedGraph:
        """A copy of the affinity graph; changes to it do not reach the poet."""
        return self._graph.copy()

    def check_rep(self) -> None:
        """check rep."""
        self._graph.check_rep()

    def bridge(self, first: str, second: str) -> str | None:
        """Return the best bridge word from ``first`` to ``second``, or None.

        Candidates are scanned in the graph's outgoing-edge order and only a
        strictly greater score replaces the current best, so the earliest
        maximal candidate wins ties.
        """
        second = second.lower()
        best: str | None = None
        best_score = 0
        for candidate, first_weight in self._graph.outgoing_edges(first).items():
            onward = self._graph.outgoing_edges(candidate)
            if second not in onward:
                continue
            score = first_weight + onward[second]
            if best is None or score > best_score:
                best = candidate
                best_score = score
        return best

    def poem(self, text: str) -> str:
        """Generate a poem from ``text`` by inserting bridge words."""
        words = split_words(text)
        if not words:
            return ""

        output: list[str] = []
        for first, second in zip(words, words[1:]):
            output.append(first)
            bridge = self.bridge(first, second)
            if bridge is not None:
                output.append(bridge)
        output.append(words[-1])
        return " ".join(output)

    def __str__(self) -> str:
        return "GraphPoet with graph: " + self._graph.to_display_string()

    def __repr__(self) -> str:
        return f"GraphPoet(graph={self._graph!r})"
