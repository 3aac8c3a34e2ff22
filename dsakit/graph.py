"""Undirected graph stored as an adjacency map of sets."""

from __future__ import annotations

from collections.abc import Hashable

__all__ = ["Graph"]


class Graph:
    """An undirected graph without edge weights."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, set[Hashable]] = {}

    def add_vertex(self, vertex: Hashable) -> bool:
        """Add ``vertex``; return False if it was already present."""
        if vertex in self._adjacency:
            return False
        self._adjacency[vertex] = set()
        return True

    def add_edge(self, vertex1: Hashable, vertex2: Hashable) -> bool:
        """Connect two existing vertices; return False if either is missing."""
        if vertex1 not in self._adjacency or vertex2 not in self._adjacency:
            return False
        self._adjacency[vertex1].add(vertex2)
        self._adjacency[vertex2].add(vertex1)
        return True

    def remove_edge(self, vertex1: Hashable, vertex2: Hashable) -> bool:
        """Disconnect two existing vertices; return False if either is missing."""
        if vertex1 not in self._adjacency or vertex2 not in self._adjacency:
            return False
        self._adjacency[vertex1].discard(vertex2)
        self._adjacency[vertex2].discard(vertex1)
        return True

    def remove_vertex(self, vertex: Hashable) -> bool:
        """Remove ``vertex`` and its edges; return False if it is missing."""
        edges = self._adjacency.pop(vertex, None)
        if edges is None:
            return False
        for other in edges:
            if other != vertex:
                self._adjacency[other].discard(vertex)
        return True

    def neighbours(self, vertex: Hashable) -> frozenset[Hashable]:
        """Return the vertices adjacent to ``vertex``; KeyError if missing."""
        return frozenset(self._adjacency[vertex])

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __str__(self) -> str:
        lines = []
        for vertex, edges in self._adjacency.items():
            names = "".join(f"{edge} " for edge in sorted(edges, key=str))
            lines.append(f"{vertex}: [ {names}]")
        return "\n".join(lines)