"""Command-line interface for graphpoet."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from . import __version__
from .corpus import CorpusUnreadableError, split_words
from .poet import GraphPoet

logger = logging.getLogger("graphpoet")


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
        logger.addHandler(handler)
    logger.propagate = False


def _build_parser() -> argparse.ArgumentParser:
    """ build parser."""
    parser = argparse.ArgumentParser(prog="graphpoet")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("poem", help="Insert bridge words into TEXT using a corpus")
    p.add_argument("text", nargs="?", help="input text (read from stdin when omitted)")
    p.add_argument("--corpus", required=True)
    p.add_argument("--encoding", default="utf-8")
    p.add_argument("--json", action="store_true")

    g = sub.add_parser("graph", help="Dump the affinity graph built from a corpus")
    g.add_argument("--corpus", required=True)
    g.add_argument("--encoding", default="utf-8")
    g.add_argument("--json", action="store_true")
    return parser


def _load_poet(args: argparse.Namespace) -> GraphPoet | None:
    """Build a poet from ``--corpus``, reporting read failures on stderr."""
    try:
        return GraphPoet.from_file(args.corpus, encoding=args.encoding)
    except CorpusUnreadableError as exc:
        print(f"graphpoet: {exc}", file=sys.stderr)
        return None


def cmd_poem(args: argparse.Namespace) -> int:
    """cmd poem."""
    poet = _load_poet(args)
    if poet is None:
        return 1

    text = args.text if args.text is not None else sys.stdin.read()
    poem = poet.poem(text)
    bridges = len(split_words(poem)) - len(split_words(text))
    logger.info("poem generated with %d bridge word(s)", bridges)

    if args.json:
        print(json.dumps({"input": text, "poem": poem, "bridges": bridges}, indent=2))
    else:
        print(poem)
    return 0


def cmd_graph(args: argparse.Namespace) -> int:
    """cmd graph."""
    poet = _load_poet(args)
    if poet is None:
        return 1

    graph = poet.graph
    if args.json:
        payload = {
            "vertices": graph.vertex_count,
            "edges": graph.edge_count,
            "dump": graph.to_display_string(),
        }
        print(json.dumps(payload, indent=2))
    else:
        print(graph.to_display_string())
    return 0


def main(argv: list[str] | None = None) -> int:
    """main."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    return {
        "poem": cmd_poem,
        "graph": cmd_graph,
    }[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())
