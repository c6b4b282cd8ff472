"""Shortest paths and minimum spanning tree costs within components."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence

from graphdata.graph import AdjacencyList, Edge

_FLOAT32 = struct.Struct("<f")
INFINITE = 3.4028234663852886e38


def _to_float32(value: float) -> float:
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def _cheapest(available: dict[str, float]) -> tuple[str, float]:
    return min(available.items(), key=lambda item: item[1])


def dijkstra_shortest_path(
    graph: AdjacencyList, component: Sequence[str], start: str
) -> list[Edge]:
    """Distances from ``start`` to every other vertex of its component.

    Vertices are listed in the order they are settled, each with its
    distance, computed at single precision.
    """
    available = dict.fromkeys(component, INFINITE)
    path: list[Edge] = []
    current, cost = start, 0.0
    while len(available) > 1:
        available.pop(current, None)
        for edge in graph.edges(current):
            if edge.id in available:
                candidate = _to_float32(edge.weight + cost)
                if available[edge.id] > candidate:
                    available[edge.id] = candidate
        current, cost = _cheapest(available)
        path.append(Edge(current, cost))
    return path


def prim_costs(
    graph: AdjacencyList, components: Iterable[Sequence[str]]
) -> list[float]:
    """Minimum spanning tree cost of each component, in the given order."""
    results = []
    for component in components:
        available = dict.fromkeys(component, INFINITE)
        cost = 0.0
        current = component[0]
        while len(available) > 1:
            available.pop(current, None)
            for edge in graph.edges(current):
                if edge.id in available and edge.weight < available[edge.id]:
                    available[edge.id] = edge.weight
            current, weight = _cheapest(available)
            cost = _to_float32(cost + weight)
        results.append(cost)
    return results


def format_path(origin: str, path: Iterable[Edge]) -> str:
    """Render shortest-path distances in the report file layout."""
    parts = [f"\norigin: {origin}\n"]
    for count, edge in enumerate(path, start=1):
        parts.append(f"({count:>2}) \t{edge.id}, {edge.weight:.4g}\t")
        if count % 8 == 0:
            parts.append("\n")
    parts.append("\n")
    return "".join(parts)