"""graphpoet public API."""

__version__ = "0.1.0"

from .graph import InvariantViolation, WeightedGraph
from .corpus import CorpusUnreadableError, read_corpus_lines, split_words
from .poet import GraphPoet

__all__ = [
    "WeightedGraph",
    "InvariantViolation",
    "GraphPoet",
    "CorpusUnreadableError",
    "read_corpus_lines",
    "split_words",
]
