"""Core in-memory weighted graph for graphpoet."""

from __future__ import annotations


class InvariantViolation(AssertionError):
    """Raised when the graph representation is found in an inconsistent state."""


class WeightedGraph:
    """Directed graph over lower-cased word labels with non-negative integer weights.

    Vertices exist only as endpoints of edges. Outgoing edges are kept in
    insertion order, which fixes the enumeration order callers observe.
    """

    def __init__(self) -> None:
        """  init  ."""
        self._vertices: dict[str, None] = {}
        self._edges: dict[str, dict[str, int]] = {}

    @staticmethod
    def _normalize(label: str) -> str:
        return label.lower()

    def _add_vertex(self, label: str) -> None:
        if label not in self._vertices:
            self._vertices[label] = None

    def set_edge(self, source: str, target: str, weight: int) -> int:
        """Add or replace the directed edge ``source -> target``.

        Both endpoints are created when missing. Returns the weight the edge had
        before the call, or 0 when the edge did not exist.

        Raises:
            ValueError: if ``weight`` is not a non-negative integer.
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(f"edge weight must be an int, got {type(weight).__name__}")
        if weight < 0:
            raise ValueError(f"edge weight must be non-negative, got {weight}")

        source = self._normalize(source)
        target = self._normalize(target)
        self._add_vertex(source)
        self._add_vertex(target)

        if source not in self._edges:
            self._edges[source] = {}
        previous = self._edges[source].get(target, 0)
        self._edges[source][target] = weight
        return previous

    def weight(self, source: str, target: str) -> int:
        """weight."""
        return self._edges.get(self._normalize(source), {}).get(self._normalize(target), 0)

    def has_edge(self, source: str, target: str) -> bool:
        """has edge."""
        return self._normalize(target) in self._edges.get(self._normalize(source), {})

    def outgoing_edges(self, vertex: str) -> dict[str, int]:
        """Return a copy of ``vertex``'s outgoing edges as ``{target: weight}``."""
        return dict(self._edges.get(self._normalize(vertex), {}))

    def vertices(self) -> set[str]:
        """vertices."""
        return set(self._vertices)

    def copy(self) -> "WeightedGraph":
        """Return an independent graph with the same vertices and edges."""
        clone = WeightedGraph()
        clone._vertices = dict(self._vertices)
        clone._edges = {source: dict(targets) for source, targets in self._edges.items()}
        return clone

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._edges.values())

    def check_rep(self) -> None:
        """Verify every edge weight is non-negative and every endpoint is a vertex."""
        for source, targets in self._edges.items():
            if source not in self._vertices:
                raise InvariantViolation(f"edge source {source!r} is not a vertex")
            for target, weight in targets.items():
                if target not in self._vertices:
                    raise InvariantViolation(f"edge target {target!r} is not a vertex")
                if weight < 0:
                    raise InvariantViolation(f"edge {source!r} -> {target!r} has negative weight {weight}")

    def to_display_string(self) -> str:
        """Deterministic dump of vertices and edges, in insertion order."""
        lines = ["vertices: " + ", ".join(self._vertices)]
        lines.append("edges:")
        for source, targets in self._edges.items():
            for target, weight in targets.items():
                lines.append(f"  {source} -> {target} ({weight})")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"WeightedGraph(vertices={self.vertex_count}, edges={self.edge_count})"
