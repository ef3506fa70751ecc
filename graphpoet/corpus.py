"""Corpus reading and whitespace tokenization."""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")


class CorpusUnreadableError(OSError):
    """Raised when a corpus file cannot be found, opened or decoded."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot read corpus {self.path}: {reason}")


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of whitespace, dropping empty tokens."""
    return [word for word in _WHITESPACE_RE.split(text or "") if word]


def read_corpus_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read a corpus file into a list of lines without line terminators."""
    corpus_path = Path(path).expanduser()
    try:
        text = corpus_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        raise CorpusUnreadableError(corpus_path, reason) from exc
    lines = text.splitlines()
    logger.debug("read %d corpus lines from %s", len(lines), corpus_path)
    return lines
