"""Undirected weighted graph stored as sorted adjacency lists."""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Message:
    """One relation between two identifiers, with its weight."""

    id1: str
    id2: str
    weight: float = 0.0


@dataclass(frozen=True, order=True)
class Edge:
    """An edge to a neighbour; edges compare and sort by neighbour id only."""

    id: str
    weight: float = field(default=0.0, compare=False)


class AdjacencyList:
    """Adjacency lists keyed by vertex id, iterated in ascending id order."""

    def __init__(self) -> None:
        self._data: dict[str, list[Edge]] = {}

    def insert(self, message: Message) -> None:
        """Add the relation as an edge in both directions."""
        self._add(message.id1, Edge(message.id2, message.weight))
        self._add(message.id2, Edge(message.id1, message.weight))

    def _add(self, vertex: str, edge: Edge) -> None:
        bisect.insort(self._data.setdefault(vertex, []), edge)

    def clear(self) -> None:
        self._data.clear()

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))

    def items(self) -> Iterator[tuple[str, tuple[Edge, ...]]]:
        """Yield (vertex, edges) pairs in ascending vertex order."""
        for vertex in sorted(self._data):
            yield vertex, tuple(self._data[vertex])

    def node_count(self) -> int:
        """Total number of entries across all adjacency lists."""
        return sum(len(edges) for edges in self._data.values())

    def edges(self, vertex_id: str) -> tuple[Edge, ...]:
        """Edges of a vertex, sorted by neighbour id; KeyError if absent."""
        return tuple(self._data[vertex_id])